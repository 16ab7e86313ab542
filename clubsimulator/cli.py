"""Command-line interface for clubsimulator."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from clubsimulator.errors import LogFormatError
from clubsimulator.logging_config import configure_from_env, enable_console_logging
from clubsimulator.parser import parse_day_log
from clubsimulator.report import render_json, render_text
from clubsimulator.simulation import simulate_day


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="club-simulator",
        description="Replay a computer club's day log and settle every table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  club-simulator day.txt
  club-simulator day.txt --json
  club-simulator day.txt --log-level DEBUG --summary
""",
    )
    parser.add_argument("log", type=Path, help="Path to the day log")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print run counters to stderr after the report",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Enable console logging at this level (default: from CS_LOGGING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the club-simulator CLI."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    if not args.log.exists():
        print(f"Error: log file not found: {args.log}", file=sys.stderr)
        return 1

    try:
        config, events = parse_day_log(args.log)
    except LogFormatError as e:
        # The offending line is the whole of the output
        print(e.line)
        return 1

    report = simulate_day(config, events)

    if args.json:
        print(render_json(report))
    else:
        sys.stdout.write(render_text(report))

    if args.summary and report.summary is not None:
        print(report.summary, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
