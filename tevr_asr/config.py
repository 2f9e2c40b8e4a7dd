from __future__ import annotations

import copy
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml


class ConfigError(RuntimeError):
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping; got {type(data)}")
    return data


def deep_update(base: dict[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively update nested dicts."""
    out = copy.deepcopy(base)
    for k, v in patch.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def to_pretty_json(obj: Any) -> str:
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=True)


@dataclass(frozen=True)
class BeamSearchSettings:
    """Tunables of the LM-fused beam search.

    alpha weighs the language model, beta is the per-word insertion bonus and
    unk_logp_offset penalizes words the n-gram model does not know.
    """

    beam_width: int = 500
    alpha: float = 0.7
    beta: float = 0.75
    min_token_logp: float = -5.0
    unk_logp_offset: float = -10.0
    log_base: float = 10.0

    @property
    def log_base_conversion(self) -> float:
        # KenLM scores are log10, acoustic scores are natural log
        return math.log(self.log_base)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "BeamSearchSettings":
        raw = dict(raw or {})
        unknown = set(raw) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigError(f"Unknown decoder keys: {sorted(unknown)}")
        try:
            settings = cls(**raw)
        except TypeError as e:
            raise ConfigError(str(e)) from e
        if int(settings.beam_width) < 1:
            raise ConfigError(f"decoder.beam_width must be >= 1; got {settings.beam_width}")
        if float(settings.log_base) <= 1.0:
            raise ConfigError(f"decoder.log_base must be > 1; got {settings.log_base}")
        return settings


@dataclass(frozen=True)
class ToolConfig:
    """Thin wrapper around a nested mapping with a few convenience helpers."""

    raw: dict[str, Any]
    path: Path | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def require(self, key: str) -> Any:
        if key not in self.raw:
            raise ConfigError(f"Missing required config key: {key}")
        return self.raw[key]

    def dump(self) -> str:
        return to_pretty_json({"config_path": str(self.path), "config": self.raw})

    @property
    def use_language_model(self) -> bool:
        return bool(self.raw.get("language_model", {}).get("enabled", True))

    @property
    def decoder(self) -> BeamSearchSettings:
        return BeamSearchSettings.from_mapping(self.raw.get("decoder"))

    @property
    def newline_per_frame(self) -> bool:
        return bool(self.raw.get("greedy", {}).get("newline_per_frame", False))

    def with_overrides(self, patch: Mapping[str, Any]) -> "ToolConfig":
        return validate_config(deep_update(self.raw, patch), path=self.path)


def validate_config(raw: dict[str, Any], path: Path | None = None) -> ToolConfig:
    # Minimal validation for keys we rely on.
    lm = raw.get("language_model")
    if not isinstance(lm, dict):
        raise ConfigError("Config must define 'language_model' mapping")
    if lm.get("enabled", True) and not lm.get("path"):
        raise ConfigError("language_model.path is required when the language model is enabled")
    for section in ("decoder", "greedy", "frames", "logging"):
        if section in raw and not isinstance(raw[section], dict):
            raise ConfigError(f"'{section}' must be a mapping")

    # Fail fast on bad tunables before any decode session starts.
    BeamSearchSettings.from_mapping(raw.get("decoder"))
    return ToolConfig(raw=raw, path=path)


def load_config(path: str | Path) -> ToolConfig:
    p = Path(path)
    return validate_config(load_yaml(p), path=p)
