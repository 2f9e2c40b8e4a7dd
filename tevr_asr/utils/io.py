from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ManifestRow:
    frames: Path
    text: str


def read_manifest(path: str | Path) -> list[ManifestRow]:
    """Read a JSONL manifest of ``{"frames": ..., "text": ...}`` rows.

    Relative frame paths resolve against the manifest's directory.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    rows: list[ManifestRow] = []
    with p.open("r", encoding="utf-8") as f:
        for n, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            obj = json.loads(line)
            if not isinstance(obj, dict) or "frames" not in obj or "text" not in obj:
                raise ValueError(f"{p}:{n}: manifest row needs 'frames' and 'text'")
            frames = Path(obj["frames"])
            if not frames.is_absolute():
                frames = p.parent / frames
            rows.append(ManifestRow(frames=frames, text=str(obj["text"])))
    return rows


def write_json(path: str | Path, obj: Any) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, sort_keys=True, ensure_ascii=False)
        f.write("\n")
