from __future__ import annotations

import platform
import time
from pathlib import Path
from typing import Any

import numpy as np
from tqdm import tqdm

from tevr_asr.config import ToolConfig
from tevr_asr.eval.inference import DecodeResources, transcribe_file
from tevr_asr.eval.metrics import compute_error_rates
from tevr_asr.utils.io import ManifestRow, read_manifest
from tevr_asr.utils.text import normalize_text


def _env_meta() -> dict[str, Any]:
    return {
        "timestamp_unix": int(time.time()),
        "python": platform.python_version(),
        "platform": platform.platform(),
        "numpy": np.__version__,
    }


def _decode_manifest(
    *,
    rows: list[ManifestRow],
    cfg: ToolConfig,
    resources: DecodeResources,
    desc: str,
) -> dict[str, Any]:
    refs: list[str] = []
    hyps: list[str] = []

    t0 = time.perf_counter()
    for row in tqdm(rows, desc=desc):
        hyp = transcribe_file(row.frames, cfg=cfg, resources=resources)
        hyps.append(normalize_text(hyp))
        refs.append(normalize_text(row.text))
    dt = time.perf_counter() - t0

    rates = compute_error_rates(refs, hyps)
    return {
        "wer": rates.wer,
        "cer": rates.cer,
        "num_utts": len(refs),
        "decode_sec": float(dt),
        "hyps": hyps,
    }


def run_evaluation(
    *,
    cfg: ToolConfig,
    manifest: str | Path,
    resources: DecodeResources,
    max_utts: int | None = None,
) -> dict[str, Any]:
    """Decode every manifest row and return a JSON-serializable dict."""

    rows = read_manifest(manifest)
    if max_utts is not None:
        rows = rows[: int(max_utts)]

    decoding = ["beam_lm" if cfg.use_language_model else "greedy"]
    if cfg.use_language_model and bool(cfg.get("eval", {}).get("include_greedy", False)):
        decoding.append("greedy")

    results: dict[str, Any] = {
        "meta": _env_meta(),
        "manifest": str(manifest),
        "config": cfg.raw,
        "decoding": {},
    }
    for mode in decoding:
        mode_cfg = cfg
        if mode == "greedy" and cfg.use_language_model:
            mode_cfg = cfg.with_overrides({"language_model": {"enabled": False}})
        results["decoding"][mode] = _decode_manifest(
            rows=rows,
            cfg=mode_cfg,
            resources=resources,
            desc=f"decode {mode}",
        )
    return results
