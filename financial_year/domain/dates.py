"""
Dates -- Day-granularity date arithmetic for financial year boundaries.

Responsibility:
    The single place where raw input becomes a ``date`` and where dates are
    shifted by days, weeks, months or years.  Calendar rules (month lengths,
    leap years) are delegated to ``datetime`` and ``dateutil.relativedelta``;
    nothing here hand-codes them.

Architecture position:
    Financial year > Domain -- pure functional core, zero I/O.
    Imported by year_types and financial_year.  No outward dependencies
    except financial_year.exceptions.

Invariants enforced:
    - Every value returned by ``to_date`` is a plain ``date`` (never a
      ``datetime``), so time of day and timezone never leak into
      comparisons.
    - ``DateRange`` is inclusive at both ends and re-iterable.

Failure modes:
    - InvalidDateError from ``to_date`` for anything that is not a date,
      datetime or strict ``YYYY-MM-DD`` string.
    - ValueError constructing a ``DateRange`` whose start is after its end.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterator

from dateutil.relativedelta import relativedelta

from financial_year.exceptions import InvalidDateError

ISO_DATE_FORMAT = "%Y-%m-%d"

ONE_DAY = timedelta(days=1)


def to_date(value: Any) -> date:
    """
    Normalize a date-like input to a day-granularity ``date``.

    Preconditions:
        - ``value`` is a ``date``, a ``datetime`` or a ``YYYY-MM-DD`` string.
    Postconditions:
        - Returns a ``date``; a ``datetime`` is truncated to its calendar
          day as written (tzinfo is not applied).
    Raises:
        InvalidDateError: for any other type or a malformed string.
    """
    # datetime is a subclass of date, so it must be checked first.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            parsed = datetime.strptime(value, ISO_DATE_FORMAT).date()
        except ValueError as exc:
            raise InvalidDateError(value) from exc
        # strptime accepts unpadded fields such as 2019-1-1.
        if parsed.isoformat() != value:
            raise InvalidDateError(value)
        return parsed
    raise InvalidDateError(value)


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def sub_day(value: date) -> date:
    """The day before ``value``."""
    return value - ONE_DAY


def add_weeks(value: date, weeks: int) -> date:
    return value + timedelta(weeks=weeks)


def add_months(value: date, months: int) -> date:
    """Shift by calendar months, clamping to the last day of short months."""
    return value + relativedelta(months=months)


def add_years(value: date, years: int) -> date:
    """Shift by calendar years; 29 February clamps to 28 February."""
    return value + relativedelta(years=years)


def is_between(value: date, start: date, end: date) -> bool:
    """Inclusive range check."""
    return start <= value <= end


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive, finite, day-by-day sequence of dates.

    Contract:
        Represents every calendar day from ``start`` to ``end`` inclusive.
        Iterating always walks from ``start`` again, so one instance can be
        consumed any number of times.

    Guarantees:
        - ``start <= end`` (validated in __post_init__).
        - ``len(r)`` equals the number of days iterated.
        - ``d in r`` is an O(1) inclusive bounds check.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"start ({self.start}) cannot be after end ({self.end})"
            )

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += ONE_DAY

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, date):
            return False
        if isinstance(item, datetime):
            item = item.date()
        return is_between(item, self.start, self.end)

    @property
    def days(self) -> int:
        return len(self)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
