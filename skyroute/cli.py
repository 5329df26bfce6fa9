"""Command-line front-end for the route planner.

    skyroute route SUB SIN --day Monday --time 08:00 --layover 30
    skyroute flights
    skyroute airports
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import ObservabilityConfig, get_config
from .container import get_container
from .domain.errors import ConfigurationError, ScheduleDataError
from .services import RoutePlannerService


def configure_logging(config: ObservabilityConfig) -> None:
    logging.basicConfig(level=config.level.upper(), format=config.format)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyroute",
        description="Earliest-arrival planning over a weekly flight timetable.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="find the earliest arrival between two airports")
    route.add_argument("source", help="departure airport code")
    route.add_argument("target", help="arrival airport code")
    route.add_argument("--day", default="Monday", help="weekday to start (default: Monday)")
    route.add_argument("--time", default="00:00", help="time of day HH:MM (default: 00:00)")
    route.add_argument(
        "--layover",
        type=int,
        default=None,
        help="minimum connection time in minutes (default from config)",
    )

    sub.add_parser("flights", help="print the weekly timetable")
    sub.add_parser("airports", help="list the known airports")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(config.observability)

    planner: RoutePlannerService = get_container().resolve(RoutePlannerService)

    try:
        if args.command == "airports":
            print("\n".join(planner.list_airports()))
            return 0

        if args.command == "flights":
            for row in planner.timetable():
                print(
                    f"{row.origin:>5} -> {row.destination:<5} "
                    f"{row.departure:<22} {row.arrival:<22} {row.duration}"
                )
            return 0

        if args.layover is not None and args.layover < 0:
            print("Error: --layover must be non-negative", file=sys.stderr)
            return 2

        itinerary, error = planner.plan_safe(
            args.source, args.target, args.day, args.time, args.layover
        )
        if error is not None or itinerary is None:
            print(error, file=sys.stderr)
            return 1
        print(planner.render_itinerary(itinerary))
        return 0
    except ScheduleDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
