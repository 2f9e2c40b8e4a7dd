from __future__ import annotations

import re

_WS_RE = re.compile(r"\s+")
_PUNCT_RE = re.compile(r"[^\w' ]+")


def normalize_text(text: str) -> str:
    """Text normalization for WER scoring of German transcripts."""
    t = text.strip().lower()
    # Keep letters (umlauts included), digits, apostrophes and spaces.
    t = _PUNCT_RE.sub(" ", t)
    t = _WS_RE.sub(" ", t).strip()
    return t
