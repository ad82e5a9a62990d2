"""CLI entry point: ``python -m remote_stats [--scenario NAME] [--steps N]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from remote_stats.config import RemoteStatsSettings


def _configure_logging(level: str, fmt: str) -> None:
    """Set up structlog with console or JSON rendering."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remote_stats",
        description="Show simulated locomotive gauges on a remote's coupler display",
    )
    parser.add_argument(
        "--scenario",
        default=None,
        help="Locomotive scenario to pair with (default: SIM_SCENARIO)",
    )
    parser.add_argument(
        "--unpaired",
        action="store_true",
        default=False,
        help="Run without pairing a locomotive",
    )
    parser.add_argument(
        "--steps",
        type=_non_negative_int,
        default=None,
        help="Number of cycle events after the first refresh",
    )
    parser.add_argument(
        "--delta",
        type=int,
        default=None,
        help="Selection step per cycle event",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # Load settings from env / .env file first, then override with CLI flags.
    try:
        settings = RemoteStatsSettings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    if args.scenario is not None:
        settings.sim_scenario = args.scenario
    if args.steps is not None:
        settings.cycle_steps = args.steps
    if args.delta is not None:
        settings.cycle_delta = args.delta

    _configure_logging(settings.log_level, settings.log_format)

    logger = structlog.get_logger("remote_stats")
    logger.info(
        "remote_starting",
        version=__import__("remote_stats").__version__,
        scenario=None if args.unpaired else settings.sim_scenario,
        steps=settings.cycle_steps,
        delta=settings.cycle_delta,
    )

    from remote_stats.host.console import ConsoleDisplay
    from remote_stats.host.simulation import SimulatedLocomotive, SimulatedPairing
    from remote_stats.remote import RemoteController

    pairing = SimulatedPairing()
    if not args.unpaired:
        try:
            pairing.pair(SimulatedLocomotive(settings.sim_scenario))
        except ValueError:
            logger.exception("scenario_load_failed", scenario=settings.sim_scenario)
            return 1

    remote = RemoteController(
        pairing,
        ConsoleDisplay(label="coupler"),
        ConsoleDisplay(label="sign"),
    )
    remote.refresh()
    for _ in range(settings.cycle_steps):
        remote.cycle_selection(settings.cycle_delta)
    return 0


if __name__ == "__main__":
    sys.exit(main())
