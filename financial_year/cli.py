"""
Print the period (and business week) table of a financial year.

Usage:
    financial-year --type TYPE --start YYYY-MM-DD [options]
    financial-year --name NAME [--config FILE] [options]

Examples:
    # Calendar year starting in April
    financial-year --type calendar --start 2019-04-06

    # Long business year with its weeks, and where a date falls
    financial-year --type business --start 2019-01-01 --fifty-three-weeks \\
        --weeks --lookup 2019-12-31

    # A year declared in a definitions file
    financial-year --name retail-2019 --config financial_years.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

import yaml

from financial_year.domain.dates import DateRange
from financial_year.domain.financial_year import FinancialYear
from financial_year.domain.year_types import FinancialYearType
from financial_year.exceptions import FinancialYearError
from financial_year.logging_config import configure_logging


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="financial-year",
        description="Show period and business week boundaries of a financial year.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--type",
        dest="year_type",
        choices=[t.value for t in FinancialYearType],
        help="Financial year type.",
    )
    parser.add_argument(
        "--start",
        help="First day of the financial year (YYYY-MM-DD).",
    )
    parser.add_argument(
        "--fifty-three-weeks",
        action="store_true",
        help="Business years only: 53 instead of 52 weeks.",
    )
    parser.add_argument(
        "--name",
        help="Load the named definition instead of --type/--start.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Definitions YAML file used with --name (default: packaged example).",
    )
    parser.add_argument(
        "--weeks",
        action="store_true",
        help="Also print the business week table.",
    )
    parser.add_argument(
        "--lookup",
        default=None,
        help="Print the period (and week) containing this date.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit debug log records to stderr.",
    )
    args = parser.parse_args(argv)
    if args.name is None and (args.year_type is None or args.start is None):
        parser.error("either --name or both --type and --start are required")
    return args


def _build(args: argparse.Namespace) -> FinancialYear:
    if args.name is not None:
        # Config package sits above the calculator; import on demand.
        from financial_year_config import get_financial_year

        return get_financial_year(args.name, args.config)
    return FinancialYear(args.year_type, args.start, args.fifty_three_weeks)


def _write_table(out: TextIO, label: str, ranges: list[DateRange]) -> None:
    out.write(f"{label:>6}  {'First':<10}  {'Last':<10}  {'Days':>4}\n")
    for idx, date_range in enumerate(ranges, start=1):
        out.write(
            f"{idx:>6}  {date_range.start.isoformat():<10}  "
            f"{date_range.end.isoformat():<10}  {len(date_range):>4}\n"
        )


def render(fy: FinancialYear, show_weeks: bool, lookup: str | None, out: TextIO) -> None:
    weeks = f", {fy.weeks} weeks" if fy.weeks else ""
    out.write(
        f"{fy.year_type.value} financial year "
        f"{fy.start_date.isoformat()} .. {fy.end_date.isoformat()} "
        f"({fy.periods} periods{weeks})\n\n"
    )
    _write_table(out, "Period", list(fy.iter_periods()))

    if show_weeks and fy.is_business:
        out.write("\n")
        _write_table(out, "Week", list(fy.iter_weeks()))

    if lookup is not None:
        out.write("\n")
        line = f"{lookup}: period {fy.period_id_for_date(lookup)}"
        if fy.is_business:
            line += f", week {fy.week_id_for_date(lookup)}"
        out.write(line + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        fy = _build(args)
        render(fy, args.weeks, args.lookup, sys.stdout)
    except FinancialYearError as e:
        print(f"ERROR: {e.code}: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, KeyError, ValueError, yaml.YAMLError) as e:
        # Unreadable or inconsistent definitions file.
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
