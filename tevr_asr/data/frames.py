from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import torch


def as_frame_matrix(frames: Any) -> np.ndarray:
    """Convert acoustic model output to a (T, V) float64 array.

    Accepts numpy arrays, torch tensors and nested lists, shaped (T, V) or (1, T, V).
    """
    if isinstance(frames, torch.Tensor):
        frames = frames.detach().cpu().double().numpy()
    arr = np.asarray(frames, dtype=np.float64)
    if arr.ndim == 3 and arr.shape[0] == 1:
        arr = arr[0]
    if arr.ndim != 2:
        raise ValueError(f"Frames must be shaped (T, V) or (1, T, V); got {arr.shape}")
    return arr


def validate_frames(frames: Any, vocab_size: int) -> np.ndarray:
    arr = as_frame_matrix(frames)
    if arr.shape[1] != vocab_size:
        raise ValueError(
            f"Frame width {arr.shape[1]} does not match vocabulary size {vocab_size}"
        )
    return arr


def log_softmax(frames: np.ndarray) -> np.ndarray:
    # For dumps that hold raw logits rather than log-probabilities.
    return torch.log_softmax(torch.from_numpy(frames), dim=-1).numpy()


def load_frames(path: str | Path, *, normalize: bool = False) -> np.ndarray:
    """Load a per-frame log-probability dump written by the acoustic model.

    ``.npy`` files are read with numpy, ``.pt`` files with ``torch.load``.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    if p.suffix == ".npy":
        data = np.load(p)
    elif p.suffix == ".pt":
        data = torch.load(p, map_location="cpu")
    else:
        raise ValueError(f"Unsupported frame dump format: {p.suffix}")
    arr = as_frame_matrix(data)
    if normalize:
        arr = log_softmax(arr)
    return arr
