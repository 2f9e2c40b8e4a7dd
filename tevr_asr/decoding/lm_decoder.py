from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from tevr_asr.config import ConfigError

logger = logging.getLogger(__name__)


class LanguageModelOracle(Protocol):
    """Word-level n-gram model consumed by the beam search.

    Scores are in the oracle's native log base; the n-gram state is opaque.
    """

    def initial_state(self) -> Any: ...

    def score(self, state: Any, word: str) -> tuple[float, Any]: ...

    def vocabulary_lookup(self, word: str) -> bool: ...


@dataclass(frozen=True)
class KenLMOracle:
    model: Any

    def initial_state(self) -> Any:
        import kenlm

        state = kenlm.State()
        self.model.BeginSentenceWrite(state)
        return state

    def score(self, state: Any, word: str) -> tuple[float, Any]:
        import kenlm

        out_state = kenlm.State()
        raw = self.model.BaseScore(state, word, out_state)
        return float(raw), out_state

    def vocabulary_lookup(self, word: str) -> bool:
        return word in self.model


def build_kenlm_oracle(
    path: str | Path,
    *,
    sanity_word: str | None = None,
) -> KenLMOracle:
    """Load a KenLM binary or ARPA model as a language-model oracle.

    Requires optional dep: kenlm. The oracle is loaded once and can be shared
    by any number of decode sessions.
    """

    import kenlm

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    logger.info("Loading language model %s ...", p)
    oracle = KenLMOracle(model=kenlm.Model(str(p)))
    if sanity_word is not None and not oracle.vocabulary_lookup(sanity_word):
        raise ConfigError(f"Language model vocabulary is wrong: {sanity_word!r} not found in {p}")
    return oracle
