from __future__ import annotations

import argparse

from tevr_asr.config import load_config
from tevr_asr.eval.inference import load_resources
from tevr_asr.eval.runner import run_evaluation
from tevr_asr.utils.io import write_json
from tevr_asr.utils.logging_setup import setup_logging


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", required=True)
    ap.add_argument("--manifest", required=True)
    ap.add_argument("--out", default="artifacts/results.json")
    ap.add_argument("--data-folder", default=None)
    ap.add_argument("--max-utts", type=int, default=None)
    ap.add_argument("--only-decoding", choices=["greedy", "beam_lm"], default=None)
    args = ap.parse_args()

    cfg = load_config(args.config)
    if args.only_decoding == "greedy":
        cfg = cfg.with_overrides({"language_model": {"enabled": False}})
    elif args.only_decoding == "beam_lm":
        cfg = cfg.with_overrides({"eval": {"include_greedy": False}})

    setup_logging(str(cfg.get("logging", {}).get("level", "INFO")))
    resources = load_resources(cfg, data_folder=args.data_folder)
    results = run_evaluation(cfg=cfg, manifest=args.manifest, resources=resources, max_utts=args.max_utts)
    write_json(args.out, results)


if __name__ == "__main__":
    main()
