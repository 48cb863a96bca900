"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from fogchess.core.scenarios import UnknownScenarioError, scenario_names
from fogchess.game.config import GameConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fogchess", description="Chess with fog of war."
    )
    parser.add_argument(
        "--no-fog", action="store_true", help="Turn off the fog of war."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command")
    test = sub.add_parser("test", help="Start from a named test scenario.")
    test.add_argument(
        "scenario",
        help=f"Name of scenario to test ({', '.join(scenario_names())}).",
    )
    return parser


def config_from_args(argv: list[str] | None = None) -> GameConfig:
    """Parse *argv* into a :class:`GameConfig`; exits on an unknown scenario."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    fog = not args.no_fog
    if args.command != "test":
        return GameConfig(fog=fog)
    try:
        return GameConfig.for_scenario(args.scenario, fog=fog)
    except UnknownScenarioError as exc:
        parser.error(str(exc))


def main() -> None:
    """Launch the Fog of Chess application."""
    from fogchess.ui.bootstrap import run_application

    config = config_from_args()
    sys.exit(run_application(config))


if __name__ == "__main__":
    main()
