from __future__ import annotations

from typing import Any, Protocol

from tevr_asr.config import ConfigError, ToolConfig
from tevr_asr.data.vocab import Vocabulary
from tevr_asr.decoding.beam import BeamSearchDecoder
from tevr_asr.decoding.greedy import GreedyDecoder
from tevr_asr.decoding.lm_decoder import LanguageModelOracle
from tevr_asr.decoding.scorer import LanguageModelScorer


class Decoder(Protocol):
    def decode(self, frames: Any) -> str: ...


def build_decoder(
    cfg: ToolConfig,
    vocab: Vocabulary,
    oracle: LanguageModelOracle | None = None,
) -> Decoder:
    """Return a fresh decoder for one utterance.

    Beam search sessions get their own score cache; the oracle is shared.
    """
    if not cfg.use_language_model:
        return GreedyDecoder(vocab)
    if oracle is None:
        raise ConfigError("Language model decoding requested but no oracle was loaded")
    settings = cfg.decoder
    scorer = LanguageModelScorer(oracle, space=vocab.space, settings=settings)
    return BeamSearchDecoder(
        vocab,
        scorer,
        beam_width=settings.beam_width,
        min_token_logp=settings.min_token_logp,
    )
