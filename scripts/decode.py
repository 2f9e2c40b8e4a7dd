from __future__ import annotations

import argparse

from tevr_asr.config import load_config
from tevr_asr.data.frames import load_frames
from tevr_asr.eval.inference import load_resources, stream_greedy_lines, transcribe_file
from tevr_asr.utils.logging_setup import setup_logging


def main() -> None:
    ap = argparse.ArgumentParser(
        description="German speech recognition from a per-frame token log-probability dump."
    )
    ap.add_argument("--config", default="configs/decoder.yaml")
    ap.add_argument("--frames", required=True, help="Path to a (T, V) .npy or .pt log-probability dump.")
    ap.add_argument("--data-folder", default=None, help="Directory that relative vocabulary/LM paths resolve against.")
    ap.add_argument("--no-lm", action="store_true", help="Greedy decoding without the language model.")
    ap.add_argument("--newline-per-frame", action="store_true", help="Greedy mode: print one line per frame.")
    args = ap.parse_args()

    cfg = load_config(args.config)
    patch: dict = {}
    if args.no_lm:
        patch["language_model"] = {"enabled": False}
    if args.newline_per_frame:
        patch["greedy"] = {"newline_per_frame": True}
    if patch:
        cfg = cfg.with_overrides(patch)

    setup_logging(str(cfg.get("logging", {}).get("level", "INFO")))
    resources = load_resources(cfg, data_folder=args.data_folder)

    if cfg.use_language_model:
        print(transcribe_file(args.frames, cfg=cfg, resources=resources))
        return

    frames = load_frames(args.frames, normalize=bool(cfg.get("frames", {}).get("normalize", False)))
    for line in stream_greedy_lines(frames, resources.vocab, newline_per_frame=cfg.newline_per_frame):
        print(line)


if __name__ == "__main__":
    main()
