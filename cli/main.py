"""Command-line entry points for running single and batched experiments."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

# Allow `python cli/main.py ...` execution from IDEs by adding repo root to sys.path.
if __package__ in {None, ""}:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from configs.loader import ConfigLoader, ExperimentConfig
from main import run_experiment


def _summarize(config: ExperimentConfig) -> dict:
    history = run_experiment(config)
    final = history[-1] if history else None
    return {
        "config": config.to_dict(),
        "generations_run": len(history),
        "mean_fitness": final.mean_fitness if final else None,
        "max_fitness": max((m.max_fitness for m in history), default=None),
        "diversity": final.diversity if final else None,
    }


def run_cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="roulette-ga")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run")
    run_cmd.add_argument("--config", default="configs/example_experiment.yaml")

    batch_cmd = sub.add_parser("batch")
    batch_cmd.add_argument("--config", default="configs/example_batch.yaml")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "run":
        configs = [ConfigLoader.load(args.config)]
    elif args.command == "batch":
        configs = ConfigLoader.load_many(args.config)
    else:
        return 1

    for config in configs:
        print(json.dumps(_summarize(config), sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
