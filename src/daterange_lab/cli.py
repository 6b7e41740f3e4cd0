"""CLI for Date Range Lab."""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from daterange_lab.config import DEFAULT_CALENDAR, DEFAULT_ZONE, LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("daterange_lab")


def resolve_today(args: argparse.Namespace) -> pd.Timestamp:
    """Return --today as an instant in the zone, or the current time."""
    from daterange_lab.chrono.zone import localize, resolve_zone, to_local

    tz = resolve_zone(args.zone)
    if args.today:
        ts = pd.Timestamp(args.today)
        # Naive --today values are wall-clock times in --zone.
        return localize(tz, ts) if ts.tzinfo is None else ts.tz_convert(tz)
    return to_local(tz, pd.Timestamp.now(tz="UTC"))


def parse_local(value: str, zone: str) -> pd.Timestamp:
    """Parse a CLI instant; naive values are wall-clock times in ``zone``."""
    from daterange_lab.chrono.zone import localize

    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return localize(zone, ts)
    return ts


def cmd_ranges(args: argparse.Namespace) -> int:
    """Print the quick-pick catalog."""
    from daterange_lab.report import predefined_ranges_frame

    today = resolve_today(args)
    logger.info(f"Quick picks for {today} ({args.zone})")

    frame = predefined_ranges_frame(args.zone, today)
    print(frame[["label", "begins_at", "ends_at", "days", "caption"]].to_string(index=False))
    return 0


def cmd_label(args: argparse.Namespace) -> int:
    """Print the caption for a range."""
    from daterange_lab.chrono import DateRange
    from daterange_lab.humanize import range_label

    today = resolve_today(args)
    begin = parse_local(args.begin, args.zone)
    end = parse_local(args.end, args.zone) if args.end else begin

    print(range_label(args.zone, today, DateRange.of(args.zone, begin, end)))
    return 0


def cmd_month(args: argparse.Namespace) -> int:
    """Print a Markdown month sheet."""
    from daterange_lab.report import generate_month_sheet

    today = resolve_today(args)
    anchor = parse_local(args.anchor, args.zone) if args.anchor else None

    print(generate_month_sheet(
        args.zone,
        today,
        anchor=anchor,
        exclude_holidays=args.holidays,
        calendar=args.calendar,
    ))
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export a selection record."""
    from daterange_lab.chrono import DateRange
    from daterange_lab.report import export_selection, selection_to_json

    date_range = DateRange.of(
        args.zone,
        parse_local(args.begin, args.zone),
        parse_local(args.end, args.zone),
    )

    if args.output is None:
        print(selection_to_json(date_range))
        return 0

    path = export_selection(date_range, output_dir=args.output, fmt=args.format)
    logger.info(f"Selection exported to: {path}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Run validation checks on the calculus."""
    from daterange_lab.validation import format_results, run_all_checks

    print("Running validation checks...")
    print()

    results = run_all_checks(args.zone, resolve_today(args))
    print(format_results(results))

    # Return exit code based on failures
    failed = sum(1 for r in results if not r.passed)
    return 1 if failed > 0 else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="daterange-lab",
        description="Date Range Lab - date-range picking rules and labels",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--zone",
        default=DEFAULT_ZONE,
        help=f"IANA timezone (default: {DEFAULT_ZONE})",
    )
    common.add_argument(
        "--today",
        type=str,
        help="Instant to treat as now, ISO-8601 (default: current time)",
    )

    # ranges
    ranges_parser = subparsers.add_parser("ranges", parents=[common], help="Show quick-pick ranges")
    ranges_parser.set_defaults(func=cmd_ranges)

    # label
    label_parser = subparsers.add_parser("label", parents=[common], help="Caption a range")
    label_parser.add_argument("begin", help="Range begin, ISO-8601")
    label_parser.add_argument("end", nargs="?", help="Range end, ISO-8601 (default: begin)")
    label_parser.set_defaults(func=cmd_label)

    # month
    month_parser = subparsers.add_parser("month", parents=[common], help="Show a month sheet")
    month_parser.add_argument("--anchor", type=str, help="Begin of an in-progress selection")
    month_parser.add_argument(
        "--holidays",
        action="store_true",
        help="Disable exchange holidays",
    )
    month_parser.add_argument(
        "--calendar",
        default=DEFAULT_CALENDAR,
        help=f"Exchange calendar code (default: {DEFAULT_CALENDAR})",
    )
    month_parser.set_defaults(func=cmd_month)

    # export
    export_parser = subparsers.add_parser("export", parents=[common], help="Export a selection")
    export_parser.add_argument("begin", help="Range begin, ISO-8601")
    export_parser.add_argument("end", help="Range end, ISO-8601")
    export_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Export format (default: json)",
    )
    export_parser.add_argument(
        "--output",
        type=Path,
        help="Output directory (default: print JSON to stdout)",
    )
    export_parser.set_defaults(func=cmd_export)

    # validate
    validate_parser = subparsers.add_parser("validate", parents=[common], help="Run validation checks")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
