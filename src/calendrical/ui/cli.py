# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from calendrical.config import (
    ConfigurationError,
    configure_logging,
    get_clock_config,
    get_logging_config,
)
from calendrical.domain import CalendricalError, MonthDay

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect recurring month-day dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Validate a month-day and print its canonical form")
    parse.add_argument("text", help="Month-day as MM-DD, e.g. 12-03")

    at_year = subparsers.add_parser("at-year", help="Combine a month-day with a year")
    at_year.add_argument("text", help="Month-day as MM-DD")
    at_year.add_argument("year", type=int, help="Year to combine with")
    at_year.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of using February 28 for --02-29 in a non-leap year",
    )

    today = subparsers.add_parser("today", help="Print the current month-day")
    today.add_argument(
        "--zone",
        help="IANA time zone name (default: CALENDRICAL_TIMEZONE or the local zone)",
    )
    return parser.parse_args(list(argv))


def _month_day(text: str) -> MonthDay:
    # argparse treats a leading "--" as an option prefix, so MM-DD is accepted too
    return MonthDay.parse(text if text.startswith("--") else f"--{text}")


def _run(args: argparse.Namespace) -> str:
    if args.command == "parse":
        return str(_month_day(args.text))
    if args.command == "at-year":
        month_day = _month_day(args.text)
        if args.strict:
            return str(month_day.resolve_year(args.year).unwrap())
        if not month_day.is_valid_year(args.year):
            log.warning("%s does not occur in %d; using February 28", month_day, args.year)
        return str(month_day.at_year(args.year))
    if args.command == "today":
        clock = get_clock_config(zone_name=args.zone).clock()
        return str(MonthDay.now(clock=clock))
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging(level=get_logging_config().level)
        parsed_args = _parse_args(args_list)
        print(_run(parsed_args))
    except (CalendricalError, ConfigurationError) as exc:
        log.error("Invalid input: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Unexpected error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
