#!/usr/bin/env python3
"""
BCD CLI - Drive the behavioral-cognitive engine from a terminal

Usage:
    python -m bcd warmup --steps 12          # Print last warmup snapshot
    python -m bcd run --ticks 20             # Live session, one line per tick
    python -m bcd export --ticks 30 --out bcd-session.json
    python -m bcd soak --steps 10000         # Invariant check over random frames
    python -m bcd config --write bcd.yaml    # Write default configuration

Examples:
    $ bcd run --ticks 3 --interval 0
    T+15s  attention=68.1 stress=39.7 dominant=Deceptive (27%)
      Dominant mode: Deceptive. stress within adaptive range; ...
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from .config import DashboardConfig, load_config, save_config
from .engine import (
    CognitiveEngine,
    SensorFrame,
    default_modalities,
    generate_frame,
    random_frame,
)
from .engine.invariants import result_violations, state_violations
from .narrative import dominant_mode
from .session import MonitoringSession

logger = logging.getLogger(__name__)


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _load(args: argparse.Namespace) -> DashboardConfig:
    config = load_config(Path(args.config)) if args.config else load_config()
    if args.seed is not None:
        config.engine.seed = args.seed
    return config


# =============================================================================
# Commands
# =============================================================================

def cmd_warmup(args: argparse.Namespace) -> int:
    config = _load(args)
    engine = CognitiveEngine(seed=config.engine.seed)
    warm = engine.warmup(config.modalities, args.steps)
    print(json.dumps(warm.to_dict() if args.full else (warm.last.to_dict() if warm.last else None), indent=2))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    config = _load(args)
    session = MonitoringSession(config)
    if args.sensitivity is not None:
        session.set_sensitivity(args.sensitivity)

    last_alert = session.alerts[-1] if session.alerts else None

    def report(result) -> None:
        nonlocal last_alert
        state = result.cognitive_state
        top = dominant_mode(result.mode_distribution)
        print(
            f"{result.timeline_point.time:<7} attention={state.attention:5.1f} "
            f"stress={state.stress:5.1f} dominant={top.mode} ({top.score}%)"
        )
        print(f"  {session.narrative()}")
        if session.alerts and session.alerts[-1] is not last_alert:
            last_alert = session.alerts[-1]
            print(f"  !! {last_alert.title}: {last_alert.message}")

    session.run(args.ticks, interval=args.interval, on_tick=report)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    config = _load(args)
    session = MonitoringSession(config)
    session.run(args.ticks, interval=0)
    out = session.export_json(args.out)
    print(f"Session exported to {out}")
    return 0


def cmd_soak(args: argparse.Namespace) -> int:
    config = _load(args)
    engine = CognitiveEngine(seed=config.engine.seed)
    rng = np.random.default_rng(args.seed if args.seed is not None else 0)
    adversarial = [SensorFrame.uniform(0.0), SensorFrame.uniform(100.0), SensorFrame.uniform(0.0, 0)]
    failures: List[str] = []

    for i in tqdm(range(args.steps), desc="soak", unit="step", disable=args.quiet):
        if i % 10 < len(adversarial):
            frame = adversarial[i % 10]
        elif i % 2:
            frame = random_frame(rng)
        else:
            frame = generate_frame(default_modalities(), engine.rng)
        sensitivity = float(rng.uniform(0.4, 1.4))
        result = engine.step(frame, sensitivity=sensitivity)
        problems = result_violations(result) + state_violations(engine.state)
        if problems:
            failures.extend(f"step {engine.step_count}: {p}" for p in problems)
            if len(failures) >= args.max_failures:
                break

    if failures:
        for line in failures[: args.max_failures]:
            print(line, file=sys.stderr)
        return 1
    print(f"{engine.step_count} steps, all invariants held")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    path = save_config(DashboardConfig(), Path(args.write))
    print(f"Wrote default configuration to {path}")
    return 0


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bcd",
        description="Behavioral-cognitive dashboard engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Override the engine seed")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings only")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("warmup", help="Warm up a fresh engine and print the last snapshot")
    p.add_argument("--steps", type=int, default=12)
    p.add_argument("--full", action="store_true", help="Include the timeline and reactivity series")
    p.set_defaults(func=cmd_warmup)

    p = sub.add_parser("run", help="Run a monitoring session")
    p.add_argument("--ticks", type=int, default=10)
    p.add_argument("--interval", type=float, default=None, help="Seconds between ticks")
    p.add_argument("--sensitivity", type=float, default=None)
    p.set_defaults(func=cmd_run)

    p = sub.add_parser("export", help="Run a session and write the export JSON")
    p.add_argument("--ticks", type=int, default=14)
    p.add_argument("--out", default="bcd-session.json")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("soak", help="Check engine invariants over many frames")
    p.add_argument("--steps", type=int, default=10000)
    p.add_argument("--max-failures", type=int, default=20)
    p.set_defaults(func=cmd_soak)

    p = sub.add_parser("config", help="Write the default configuration")
    p.add_argument("--write", required=True, metavar="PATH")
    p.set_defaults(func=cmd_config)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
