from __future__ import annotations

from dataclasses import dataclass

import jiwer


@dataclass(frozen=True)
class ErrorRates:
    wer: float
    cer: float


def compute_error_rates(refs: list[str], hyps: list[str]) -> ErrorRates:
    if len(refs) != len(hyps):
        raise ValueError("refs and hyps must have same length")
    if not refs:
        raise ValueError("Cannot score an empty manifest")
    return ErrorRates(wer=float(jiwer.wer(refs, hyps)), cer=float(jiwer.cer(refs, hyps)))
