from __future__ import annotations

from tevr_asr.config import BeamSearchSettings
from tevr_asr.decoding.lm_decoder import LanguageModelOracle


class LanguageModelScorer:
    """Memoized language-model score of a transcription prefix.

    Only words closed by a word space are scored; the trailing piece may still
    be mid-word. The cache belongs to one decode session and is never shared.
    """

    def __init__(
        self,
        oracle: LanguageModelOracle,
        *,
        space: str,
        settings: BeamSearchSettings | None = None,
    ):
        settings = settings or BeamSearchSettings()
        self.oracle = oracle
        self.space = space
        self.alpha = float(settings.alpha)
        self.beta = float(settings.beta)
        self.unk_logp_offset = float(settings.unk_logp_offset)
        self.log_base_conversion = settings.log_base_conversion
        self._cache: dict[str, float] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def score(self, text: str) -> float:
        cached = self._cache.get(text)
        if cached is not None:
            return cached
        score = self._score_uncached(text)
        self._cache[text] = score
        return score

    def word_score(self, state, word: str):
        """Score one word; returns (natural-log score, next n-gram state)."""
        raw, next_state = self.oracle.score(state, word)
        score = raw * self.log_base_conversion * self.alpha + self.beta
        if not self.oracle.vocabulary_lookup(word):
            score += self.unk_logp_offset
        return score, next_state

    def _score_uncached(self, text: str) -> float:
        total = 0.0
        state = self.oracle.initial_state()
        # ignore the last (incomplete) word
        for word in text.split(self.space)[:-1]:
            if not word.strip():
                continue
            score, state = self.word_score(state, word)
            total += score
        return total
