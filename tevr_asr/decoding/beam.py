"""CTC beam search fused with a word-level n-gram language model.

Each frame expands every active hypothesis with every token whose
log-probability clears ``min_token_logp``. A token equal to the hypothesis'
last token is a repeated emission and leaves the text unchanged; any other
token appends its surface and pays the language-model score difference.
Hypotheses reaching the same ``(text, last_token_id)`` are alternative
alignments and their probabilities are summed in log space.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from tevr_asr.data.frames import validate_frames
from tevr_asr.data.vocab import Vocabulary
from tevr_asr.decoding.scorer import LanguageModelScorer

logger = logging.getLogger(__name__)

BEAM_WIDTH = 500
MIN_TOKEN_LOGP = -5.0


def log_sum_exp(a: float, b: float) -> float:
    """ln(exp(a) + exp(b)) without overflow."""
    hi, lo = (a, b) if a > b else (b, a)
    return hi + math.log1p(math.exp(lo - hi))


@dataclass(frozen=True)
class Hypothesis:
    text: str
    logp: float
    last_token_id: int | None = None

    @property
    def key(self) -> tuple[str, int | None]:
        return (self.text, self.last_token_id)

    def sort_key(self) -> tuple[float, str, int]:
        # Descending score, then text and last token for reproducible ties.
        last = -1 if self.last_token_id is None else self.last_token_id
        return (-self.logp, self.text, last)


class BeamSearchDecoder:
    """One decode session.

    Owns the active beam set, the next-generation merge map and (through its
    scorer) the prefix score cache. The oracle behind the scorer is borrowed.
    """

    def __init__(
        self,
        vocab: Vocabulary,
        scorer: LanguageModelScorer,
        *,
        beam_width: int = BEAM_WIDTH,
        min_token_logp: float = MIN_TOKEN_LOGP,
    ):
        self.vocab = vocab
        self.scorer = scorer
        self.beam_width = int(beam_width)
        self.min_token_logp = float(min_token_logp)
        self.beams: list[Hypothesis] = [Hypothesis(text="", logp=0.0, last_token_id=None)]
        self._next: dict[tuple[str, int | None], Hypothesis] = {}
        self.frames_seen = 0
        self.finalized = False

    @property
    def best(self) -> Hypothesis:
        return self.beams[0]

    def add_token(self, token_id: int, token_logp: float) -> None:
        token = self.vocab[token_id]
        for beam in self.beams:
            if token_id == beam.last_token_id:
                self.merge(Hypothesis(beam.text, beam.logp + token_logp, token_id))
            else:
                new_text = self.vocab.concatenate(beam.text, token)
                lm_delta = self.scorer.score(new_text) - self.scorer.score(beam.text)
                self.merge(Hypothesis(new_text, beam.logp + token_logp + lm_delta, token_id))

    def merge(self, candidate: Hypothesis) -> None:
        existing = self._next.get(candidate.key)
        if existing is None:
            self._next[candidate.key] = candidate
        else:
            self._next[candidate.key] = Hypothesis(
                existing.text, log_sum_exp(existing.logp, candidate.logp), existing.last_token_id
            )

    def reduce(self) -> None:
        assert self._next, "no hypothesis survived the frame"
        beams = sorted(self._next.values(), key=Hypothesis.sort_key)
        self._next = {}
        full_beam_count = len(beams)
        self.beams = beams[: self.beam_width]
        logger.debug(
            "frame %d [%9d beams] %r @ %f (cache %d)",
            self.frames_seen,
            full_beam_count,
            self.best.text,
            self.best.logp,
            self.scorer.cache_size,
        )

    def process_frame(self, frame: np.ndarray) -> None:
        if self.finalized:
            raise RuntimeError("Decode session is already finalized")
        for token_id in np.flatnonzero(frame >= self.min_token_logp):
            self.add_token(int(token_id), float(frame[token_id]))
        self.frames_seen += 1
        self.reduce()

    def finalize(self) -> str:
        """Close the trailing word with end-of-sequence and return the best text."""
        if self.finalized:
            raise RuntimeError("Decode session is already finalized")
        self.add_token(self.vocab.end_of_sequence_id, 0.0)
        self.reduce()
        self.finalized = True
        return self.best.text

    def decode(self, frames: Any) -> str:
        arr = validate_frames(frames, len(self.vocab))
        for t, frame in enumerate(arr):
            if not np.any(frame >= self.min_token_logp):
                raise ValueError(
                    f"Frame {t} has no token with log-probability >= {self.min_token_logp}"
                )
            self.process_frame(frame)
        return self.finalize()
