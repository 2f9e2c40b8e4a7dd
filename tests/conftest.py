from __future__ import annotations

import numpy as np
import pytest

from tevr_asr.config import BeamSearchSettings
from tevr_asr.data.vocab import Vocabulary
from tevr_asr.decoding.beam import BeamSearchDecoder
from tevr_asr.decoding.scorer import LanguageModelScorer

# id:       0   1    2    3     4    5        6       7
TOKENS = ["", " ", " ", "ab", "cd", "hallo", "welt", "xyz"]


class TableOracle:
    """Unigram oracle over a fixed log10 table; the state is the word history."""

    def __init__(self, table: dict[str, float], unk: float = -6.0):
        self.table = dict(table)
        self.unk = unk
        self.calls: list[tuple[tuple[str, ...], str]] = []

    def initial_state(self):
        return ("<s>",)

    def score(self, state, word):
        self.calls.append((state, word))
        return self.table.get(word, self.unk), state + (word,)

    def vocabulary_lookup(self, word):
        return word in self.table


@pytest.fixture
def vocab() -> Vocabulary:
    return Vocabulary(TOKENS)


@pytest.fixture
def oracle() -> TableOracle:
    return TableOracle({"hallo": -1.0, "welt": -1.5, "ab": -2.0})


@pytest.fixture
def scorer(oracle, vocab) -> LanguageModelScorer:
    return LanguageModelScorer(oracle, space=vocab.space, settings=BeamSearchSettings())


@pytest.fixture
def make_decoder(vocab, oracle):
    def _make(**kwargs) -> BeamSearchDecoder:
        scorer = LanguageModelScorer(oracle, space=vocab.space, settings=BeamSearchSettings())
        return BeamSearchDecoder(vocab, scorer, **kwargs)

    return _make


def one_hot_frames(spec: list[dict[int, float]], vocab_size: int = len(TOKENS), floor: float = -20.0) -> np.ndarray:
    """Frames where only the listed ids carry a usable log-probability."""
    frames = np.full((len(spec), vocab_size), floor, dtype=np.float64)
    for t, entries in enumerate(spec):
        for token_id, logp in entries.items():
            frames[t, token_id] = logp
    return frames
