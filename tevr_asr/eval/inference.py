from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from tevr_asr.config import ToolConfig
from tevr_asr.data.frames import load_frames
from tevr_asr.data.vocab import Vocabulary, default_vocabulary, load_vocabulary
from tevr_asr.decoding.greedy import GreedyDecoder
from tevr_asr.decoding.lm_decoder import LanguageModelOracle, build_kenlm_oracle
from tevr_asr.decoding.strategy import Decoder, build_decoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResources:
    """Loaded once per process and shared by every decode session."""

    vocab: Vocabulary
    oracle: LanguageModelOracle | None


def _resolve(path: str | Path, data_folder: str | Path | None) -> Path:
    p = Path(path)
    if data_folder is not None and not p.is_absolute():
        return Path(data_folder) / p
    return p


def load_resources(cfg: ToolConfig, *, data_folder: str | Path | None = None) -> DecodeResources:
    vocab_path = cfg.get("vocabulary")
    if vocab_path:
        vocab = load_vocabulary(_resolve(vocab_path, data_folder))
    else:
        vocab = default_vocabulary()
    logger.info("Vocabulary has %d tokens", len(vocab))

    oracle = None
    if cfg.use_language_model:
        lm_cfg = cfg.require("language_model")
        oracle = build_kenlm_oracle(
            _resolve(lm_cfg["path"], data_folder),
            sanity_word=lm_cfg.get("sanity_word"),
        )
    return DecodeResources(vocab=vocab, oracle=oracle)


def transcribe(frames: Any, decoder: Decoder) -> str:
    """Feed all frames in order, finalize and return the winning text."""
    return decoder.decode(frames)


def transcribe_file(
    path: str | Path,
    *,
    cfg: ToolConfig,
    resources: DecodeResources,
) -> str:
    frames = load_frames(path, normalize=bool(cfg.get("frames", {}).get("normalize", False)))
    logger.info("Decoding %s (%d frames)", path, frames.shape[0])
    decoder = build_decoder(cfg, resources.vocab, resources.oracle)
    return transcribe(frames, decoder)


def stream_greedy_lines(frames: Any, vocab: Vocabulary, *, newline_per_frame: bool) -> Iterator[str]:
    """Render greedy output.

    With ``newline_per_frame`` every frame produces one line, empty when the
    argmax did not change. Otherwise a single line with the whole transcript.
    """
    fragments = GreedyDecoder(vocab).stream(frames)
    if newline_per_frame:
        yield from fragments
    else:
        yield "".join(fragments)
