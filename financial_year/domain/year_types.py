"""
Year types -- The two supported financial year shapes and their rules.

Responsibility:
    Defines ``FinancialYearType`` and the rule table that answers every
    type-dependent question (how many periods, how far period N starts from
    the year start, where the next year starts, whether business weeks
    exist).  The calculator looks the rules up once and never branches on
    the type itself.

Architecture position:
    Financial year > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - CALENDAR years have 12 month-long periods and no business weeks.
    - BUSINESS years have 13 periods of exactly 4 weeks, and 52 or 53
      business weeks; the 53rd week only lengthens the final period.
    - A CALENDAR year may not start on day 29, 30 or 31.

Failure modes:
    - UnsupportedYearTypeError from ``resolve_year_type`` for unknown literals.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable

from financial_year.domain import dates
from financial_year.exceptions import UnsupportedYearTypeError

WEEKS_PER_BUSINESS_PERIOD = 4
SHORT_BUSINESS_YEAR_WEEKS = 52
LONG_BUSINESS_YEAR_WEEKS = 53


class FinancialYearType(str, Enum):
    """
    Shape of a financial year.

    Contract:
        Exactly two values.  The string values are the literals accepted
        from callers and configuration files.
    """

    CALENDAR = "calendar"
    BUSINESS = "business"


@dataclass(frozen=True)
class YearTypeRules:
    """
    Rule set for one ``FinancialYearType``.

    Contract:
        ``period_offset(start, n)`` returns the date ``n`` whole periods
        after ``start``; ``year_offset(start, weeks)`` returns the start of
        the following financial year.  Both are pure.

    Guarantees:
        - ``periods`` is fixed per type.
        - ``disallowed_start_days`` is empty for types that accept any day.
    """

    year_type: FinancialYearType
    periods: int
    has_business_weeks: bool
    period_offset: Callable[[date, int], date]
    year_offset: Callable[[date, int | None], date]
    disallowed_start_days: frozenset[int] = frozenset()

    def weeks_for(self, fifty_three_weeks: bool) -> int | None:
        """Business week count for the flag, ``None`` when weeks do not apply."""
        if not self.has_business_weeks:
            return None
        return LONG_BUSINESS_YEAR_WEEKS if fifty_three_weeks else SHORT_BUSINESS_YEAR_WEEKS


def _calendar_period_offset(start: date, periods: int) -> date:
    return dates.add_months(start, periods)


def _calendar_year_offset(start: date, weeks: int | None) -> date:
    return dates.add_years(start, 1)


def _business_period_offset(start: date, periods: int) -> date:
    return dates.add_weeks(start, periods * WEEKS_PER_BUSINESS_PERIOD)


def _business_year_offset(start: date, weeks: int | None) -> date:
    return dates.add_weeks(start, weeks)


YEAR_TYPE_RULES: dict[FinancialYearType, YearTypeRules] = {
    FinancialYearType.CALENDAR: YearTypeRules(
        year_type=FinancialYearType.CALENDAR,
        periods=12,
        has_business_weeks=False,
        period_offset=_calendar_period_offset,
        year_offset=_calendar_year_offset,
        # Not every month has these days, so month-by-month boundaries
        # would drift.
        disallowed_start_days=frozenset({29, 30, 31}),
    ),
    FinancialYearType.BUSINESS: YearTypeRules(
        year_type=FinancialYearType.BUSINESS,
        periods=13,
        has_business_weeks=True,
        period_offset=_business_period_offset,
        year_offset=_business_year_offset,
    ),
}


def resolve_year_type(value: Any) -> FinancialYearType:
    """
    Map a caller-supplied literal to a ``FinancialYearType``.

    Accepts enum members or their exact string values.

    Raises:
        UnsupportedYearTypeError: for anything else.
    """
    if isinstance(value, FinancialYearType):
        return value
    if isinstance(value, str):
        try:
            return FinancialYearType(value)
        except ValueError as exc:
            raise UnsupportedYearTypeError(value) from exc
    raise UnsupportedYearTypeError(value)


def rules_for(year_type: FinancialYearType) -> YearTypeRules:
    return YEAR_TYPE_RULES[year_type]
