"""
Command-line interface for the mentorship engine.

Usage:
    python -m mentorship_engine.cli [command] [options]

Commands:
    run         Run a scenario and print its transcript.
    info        Print default ladder parameters.
    ladder      Print the rank ladder and each rank's advancement rule.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .analysis.metrics import summary_statistics
from .core.parameters import LadderParameters
from .core.ranks import RankLadder
from .scenario_loader import load_scenario
from .simulation.runner import ScenarioRunner
from .systems.output import ListSink, StreamSink


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mentorship_engine",
        description="Mentorship and rank-progression simulation CLI",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # ------------------------------------------------------------------ run --
    run_p = sub.add_parser("run", help="Run a scenario")
    run_p.add_argument(
        "--scenario", type=str, default=None, metavar="PATH",
        help="Scenario YAML file (default: bundled scenario)",
    )
    run_p.add_argument(
        "--seed", type=int, default=None, metavar="SEED",
        help="Override the scenario's random seed",
    )
    run_p.add_argument(
        "--max-attempts", type=int, default=100, metavar="N",
        help="Qualification attempts allowed per training cycle (default: 100)",
    )
    run_p.add_argument(
        "--json", action="store_true",
        help="Print roster summary statistics as JSON instead of the transcript",
    )

    # ----------------------------------------------------------------- info --
    sub.add_parser("info", help="Print default ladder parameters")

    # --------------------------------------------------------------- ladder --
    sub.add_parser("ladder", help="Print the rank ladder")
    return parser


def _cmd_run(args: argparse.Namespace) -> None:
    """Execute the run sub-command."""
    scenario = load_scenario(args.scenario, seed=args.seed)
    sink = ListSink() if args.json else StreamSink()
    runner = ScenarioRunner(scenario, sink=sink, max_attempts=args.max_attempts)
    runner.run()

    if args.json:
        stats = summary_statistics(scenario.roster)
        stats["scenario"] = scenario.name
        stats["seed"] = scenario.params.seed
        print(json.dumps(stats, indent=2))


def _cmd_info(_args: argparse.Namespace) -> None:
    """Execute the info sub-command."""
    params = LadderParameters()
    print("Mentorship Engine")
    print("Default LadderParameters:")
    for name, value in params.to_dict().items():
        print(f"  {name}: {value}")
    print(f"  success_probability: {params.success_probability:.2f}")


def _cmd_ladder(_args: argparse.Namespace) -> None:
    """Execute the ladder sub-command."""
    for row in RankLadder().describe():
        print(f"  {row['index']}. {row['rank']:<12} {row['rule']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "run":
        _cmd_run(args)
    elif args.command == "info":
        _cmd_info(args)
    elif args.command == "ladder":
        _cmd_ladder(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
