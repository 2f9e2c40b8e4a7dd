from __future__ import annotations

from typing import Any, Iterator

import numpy as np

from tevr_asr.data.frames import validate_frames
from tevr_asr.data.vocab import Vocabulary


class GreedyDecoder:
    """Best-path decoding without a language model.

    Streams one fragment per frame: the surface of the argmax token when it
    differs from the previous frame's argmax, otherwise an empty string.
    """

    def __init__(self, vocab: Vocabulary):
        self.vocab = vocab

    def stream(self, frames: Any) -> Iterator[str]:
        arr = validate_frames(frames, len(self.vocab))
        last_token = self.vocab.blank_id
        for frame in arr:
            # np.argmax returns the lowest id on ties
            token_id = int(np.argmax(frame))
            if token_id != last_token:
                last_token = token_id
                yield self.vocab.surface(token_id)
            else:
                yield ""

    def decode(self, frames: Any) -> str:
        return "".join(self.stream(frames))
