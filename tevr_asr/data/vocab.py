"""Subword vocabulary of the acoustic model's output classes."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from tevr_asr.data.tevr_tokens import TEVR_TOKENS

BLANK_ID = 0
END_OF_SEQUENCE_ID = 1
SPACE_ID = 2


class VocabularyError(ValueError):
    pass


@dataclass(frozen=True)
class Token:
    id: int
    surface: str


class Vocabulary:
    """Immutable id -> surface table.

    Ids 0, 1 and 2 are reserved for blank, end-of-sequence and word-space.
    Surfaces may be multi-character subword units and need not be unique.
    """

    def __init__(self, tokens: Sequence[str] | Mapping[int, str]):
        self._tokens: tuple[str, ...] = _validate(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, token_id: int) -> Token:
        return Token(id=token_id, surface=self.surface(token_id))

    @property
    def blank_id(self) -> int:
        return BLANK_ID

    @property
    def end_of_sequence_id(self) -> int:
        return END_OF_SEQUENCE_ID

    @property
    def space_id(self) -> int:
        return SPACE_ID

    @property
    def space(self) -> str:
        return self._tokens[SPACE_ID]

    def surface(self, token_id: int) -> str:
        if not 0 <= token_id < len(self._tokens):
            raise VocabularyError(f"Token id {token_id} out of range [0, {len(self._tokens)})")
        return self._tokens[token_id]

    def concatenate(self, prefix: str, token: Token) -> str:
        """Append a token's surface to ``prefix`` without doubling the word space."""
        if token.surface == self.space and prefix.endswith(self.space):
            return prefix
        return prefix + token.surface


def _validate(tokens: Sequence[str] | Mapping[int, str]) -> tuple[str, ...]:
    if isinstance(tokens, Mapping):
        ids = []
        for k in tokens:
            try:
                ids.append(int(k))
            except (TypeError, ValueError) as e:
                raise VocabularyError(f"Token id must be an integer; got {k!r}") from e
        if len(set(ids)) != len(ids):
            raise VocabularyError("Duplicate token ids in vocabulary")
        missing = set(range(len(ids))) - set(ids)
        if missing:
            raise VocabularyError(f"Token ids must cover 0..{len(ids) - 1}; missing {sorted(missing)}")
        by_id = {int(k): v for k, v in tokens.items()}
        table = [by_id[i] for i in range(len(by_id))]
    elif isinstance(tokens, str):
        raise VocabularyError("Vocabulary must be a list of surfaces, not a single string")
    else:
        table = list(tokens)

    if len(table) <= SPACE_ID:
        raise VocabularyError(
            f"Vocabulary needs blank, end-of-sequence and word-space tokens; got {len(table)} entries"
        )
    for i, t in enumerate(table):
        if not isinstance(t, str):
            raise VocabularyError(f"Token {i} must map to a string surface; got {type(t)}")
    if not table[SPACE_ID]:
        raise VocabularyError("Word-space token must have a non-empty surface")
    return tuple(table)


def load_vocabulary(path: str | Path) -> Vocabulary:
    """Load a vocabulary from JSON or YAML.

    The file holds either a list of surfaces (index = id), an ``{id: surface}``
    mapping, or either of those under a top-level ``tokens`` key.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        if p.suffix == ".json":
            data: Any = json.load(f)
        else:
            data = yaml.safe_load(f)
    if isinstance(data, dict) and "tokens" in data:
        data = data["tokens"]
    if not isinstance(data, (list, dict)):
        raise VocabularyError(f"Vocabulary file must hold a list or mapping; got {type(data)}")
    return Vocabulary(data)


def default_vocabulary() -> Vocabulary:
    return Vocabulary(TEVR_TOKENS)
