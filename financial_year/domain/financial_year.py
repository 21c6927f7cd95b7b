"""
FinancialYear -- Period and business week boundaries of one financial year.

Responsibility:
    Holds the configuration of a single financial year (type, start date,
    52/53 week flag), derives its end date and answers boundary queries:
    first/last date of a period or business week, which period or week a
    date falls in, and day-by-day ranges for both.

Architecture position:
    Financial year > Domain -- pure functional core, zero I/O apart from
    log records.  Type-specific rules come from ``year_types``; all date
    arithmetic goes through ``dates``.

Invariants enforced:
    - ``end_date`` is always the day before ``next_start_date()`` and is
      recomputed by every mutator that can move it; callers never set it.
    - ``periods`` and ``weeks`` are pure functions of the type and the
      53-week flag.
    - The first period/week starts on ``start_date`` and the last one ends
      on ``end_date``, so the final period absorbs the 53rd week.
    - Lookups by date only run for dates inside ``[start_date, end_date]``.

Failure modes:
    - UnsupportedYearTypeError -- unknown type literal.
    - DisallowedStartDateError -- calendar year starting on day 29-31.
    - WeeksNotApplicableError -- week query or week setter on a calendar year.
    - InvalidDateError -- unparseable date input.
    - PeriodNotFoundError / WeekNotFoundError -- id out of range.
    - DateOutOfRangeError -- lookup date outside the year.
    - YearOutOfBoundsError -- the following year would start after the last
      representable date.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterator

from financial_year.domain import dates
from financial_year.domain.dates import DateRange
from financial_year.domain.year_types import (
    WEEKS_PER_BUSINESS_PERIOD,
    FinancialYearType,
    YearTypeRules,
    resolve_year_type,
    rules_for,
)
from financial_year.exceptions import (
    DateOutOfRangeError,
    DisallowedStartDateError,
    IncompleteConfigurationError,
    PeriodNotFoundError,
    UnresolvedDateError,
    WeekNotFoundError,
    WeeksNotApplicableError,
    YearOutOfBoundsError,
)
from financial_year.logging_config import get_logger

logger = get_logger("domain.financial_year")


class FinancialYear:
    """
    One financial year, fully determined at construction.

    Contract:
        Construct with ``(year_type, start_date, fifty_three_weeks=False)``.
        The only legal mutations afterwards are ``set_start_date`` and, for
        business years, ``set_fifty_three_weeks``; each recomputes the end
        date.  Every boundary query recomputes from the start date, there is
        no cached period table.

    Guarantees:
        - ``first_date_of_period(1) == start_date`` and
          ``last_date_of_period(periods) == end_date`` (same for weeks).
        - Consecutive periods and weeks are contiguous and non-overlapping.
        - ``period_id_for_date(d)`` returns the period whose range holds ``d``.

    Non-goals:
        - No time of day or timezone handling; inputs are truncated to days.
        - No internal locking.  Callers sharing one instance across threads
          must serialize the two mutators; queries are safe once no
          mutator is running.
    """

    def __init__(
        self,
        year_type: FinancialYearType | str,
        start_date: date | str,
        fifty_three_weeks: bool = False,
    ):
        self._year_type: FinancialYearType = resolve_year_type(year_type)
        self._rules: YearTypeRules = rules_for(self._year_type)
        self._periods: int = self._rules.periods
        self._start_date: date | None = None
        self._end_date: date | None = None

        # Stored for every type, only counted for business years.
        self._fifty_three_weeks = bool(fifty_three_weeks)
        self._weeks: int | None = self._rules.weeks_for(self._fifty_three_weeks)

        self.set_start_date(start_date)
        self._recompute_end_date()

        logger.info(
            "financial_year_created",
            extra={
                "year_type": self._year_type.value,
                "start_date": self._start_date,
                "end_date": self._end_date,
                "periods": self._periods,
                "weeks": self._weeks,
            },
        )

    def __repr__(self) -> str:
        return (
            f"<FinancialYear {self._year_type.value} "
            f"{self._start_date}..{self._end_date} "
            f"periods={self._periods} weeks={self._weeks}>"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def year_type(self) -> FinancialYearType:
        return self._year_type

    @property
    def periods(self) -> int:
        """Number of periods: 12 for calendar, 13 for business years."""
        return self._periods

    @property
    def weeks(self) -> int | None:
        """Number of business weeks, ``None`` for calendar years."""
        return self._weeks

    @property
    def fifty_three_weeks(self) -> bool:
        return self._fifty_three_weeks

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    @property
    def is_business(self) -> bool:
        return self._rules.has_business_weeks

    def set_fifty_three_weeks(self, fifty_three_weeks: bool) -> None:
        """
        Switch a business year between 52 and 53 weeks.

        Postconditions:
            - ``weeks`` reflects the flag.
            - ``end_date`` is recomputed only if ``weeks`` actually changed.
        Raises:
            WeeksNotApplicableError: on a calendar year.
            YearOutOfBoundsError: if the longer year would not fit.
        """
        self._require_business_weeks()

        original_weeks = self._weeks
        weeks = self._rules.weeks_for(bool(fifty_three_weeks))
        self._next_start_for(self._start_date, weeks)

        self._fifty_three_weeks = bool(fifty_three_weeks)
        self._weeks = weeks

        if original_weeks is not None and original_weeks != self._weeks:
            self._recompute_end_date()

    def set_start_date(self, value: date | str) -> None:
        """
        Set the first day of the financial year.

        Re-assigning always recomputes ``end_date``, even when the new date
        equals the current one.  During construction the constructor does
        the first computation itself.

        Raises:
            InvalidDateError: if ``value`` is not a date or ISO date string.
            DisallowedStartDateError: calendar year starting on day 29-31.
            YearOutOfBoundsError: if the following year would start after
                the last representable date.
        """
        start_date = dates.to_date(value)
        self._validate_start_date(start_date)

        original_start_date = self._start_date
        self._start_date = start_date

        if original_start_date is not None:
            self._recompute_end_date()

    def next_start_date(self) -> date:
        """Start date of the following financial year under the same rules."""
        return self._next_start_for(self._start_date, self._weeks)

    def validate_configuration(self) -> None:
        """
        Precondition check run before every boundary query.

        Raises:
            IncompleteConfigurationError: if type, start date or the
                period/week counts are missing.
        """
        missing = []
        if self._year_type is None:
            missing.append("year_type")
        if self._start_date is None:
            missing.append("start_date")
        if self._end_date is None:
            missing.append("end_date")
        if not self._periods:
            missing.append("periods")
        if self._rules.has_business_weeks and not self._weeks:
            missing.append("weeks")
        if missing:
            raise IncompleteConfigurationError(missing)

    # ------------------------------------------------------------------
    # Periods
    # ------------------------------------------------------------------

    def first_date_of_period(self, period_id: int) -> date:
        self.validate_configuration()
        self._validate_period_id(period_id)

        if period_id == 1:
            return self._start_date
        return self._rules.period_offset(self._start_date, period_id - 1)

    def last_date_of_period(self, period_id: int) -> date:
        self.validate_configuration()
        self._validate_period_id(period_id)

        # The last period always closes on the year end, which is what
        # gives a 53-week year a 5-week period 13.
        if period_id == self._periods:
            return self._end_date
        return dates.sub_day(self._rules.period_offset(self._start_date, period_id))

    def period_range(self, period_id: int) -> DateRange:
        """Every day of the period, first to last inclusive."""
        return DateRange(
            self.first_date_of_period(period_id),
            self.last_date_of_period(period_id),
        )

    def period_id_for_date(self, value: date | str) -> int:
        """
        Id of the period containing ``value``.

        Linear scan over at most 13 periods, reusing the boundary functions
        so lookups can never disagree with them.

        Raises:
            DateOutOfRangeError: if ``value`` lies outside the year.
        """
        day = dates.to_date(value)
        self._validate_date_in_year(day)

        for period_id in range(1, self._periods + 1):
            if dates.is_between(
                day,
                self.first_date_of_period(period_id),
                self.last_date_of_period(period_id),
            ):
                return period_id

        raise UnresolvedDateError(day, "period")

    def iter_periods(self) -> Iterator[DateRange]:
        for period_id in range(1, self._periods + 1):
            yield self.period_range(period_id)

    # ------------------------------------------------------------------
    # Business weeks
    # ------------------------------------------------------------------

    def first_date_of_week(self, week_id: int) -> date:
        self.validate_configuration()
        self._validate_week_id(week_id)

        if week_id == 1:
            return self._start_date
        return dates.add_weeks(self._start_date, week_id - 1)

    def last_date_of_week(self, week_id: int) -> date:
        self.validate_configuration()
        self._validate_week_id(week_id)

        if week_id == self._weeks:
            return self._end_date
        return dates.sub_day(dates.add_weeks(self._start_date, week_id))

    def week_range(self, week_id: int) -> DateRange:
        """Every day of the business week, first to last inclusive."""
        return DateRange(
            self.first_date_of_week(week_id),
            self.last_date_of_week(week_id),
        )

    def week_id_for_date(self, value: date | str) -> int:
        """
        Id of the business week containing ``value``.

        Raises:
            WeeksNotApplicableError: on a calendar year.
            DateOutOfRangeError: if ``value`` lies outside the year.
        """
        self._require_business_weeks()
        day = dates.to_date(value)
        self._validate_date_in_year(day)

        for week_id in range(1, self._weeks + 1):
            if dates.is_between(
                day,
                self.first_date_of_week(week_id),
                self.last_date_of_week(week_id),
            ):
                return week_id

        raise UnresolvedDateError(day, "business week")

    def iter_weeks(self) -> Iterator[DateRange]:
        self._require_business_weeks()
        for week_id in range(1, self._weeks + 1):
            yield self.week_range(week_id)

    def first_week_of_period(self, period_id: int) -> DateRange:
        return self.week_range(self._week_id_in_period(period_id, 1))

    def second_week_of_period(self, period_id: int) -> DateRange:
        return self.week_range(self._week_id_in_period(period_id, 2))

    def third_week_of_period(self, period_id: int) -> DateRange:
        return self.week_range(self._week_id_in_period(period_id, 3))

    def fourth_week_of_period(self, period_id: int) -> DateRange:
        return self.week_range(self._week_id_in_period(period_id, 4))

    def fifty_third_week(self) -> DateRange:
        """The extra week of a long business year; WeekNotFoundError otherwise."""
        return self.week_range(53)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def contains(self, value: date | str) -> bool:
        return dates.is_between(dates.to_date(value), self._start_date, self._end_date)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _recompute_end_date(self) -> None:
        self._end_date = dates.sub_day(self.next_start_date())
        logger.debug(
            "end_date_recomputed",
            extra={
                "year_type": self._year_type.value,
                "start_date": self._start_date,
                "end_date": self._end_date,
                "weeks": self._weeks,
            },
        )

    def _validate_start_date(self, start_date: date) -> None:
        if start_date.day in self._rules.disallowed_start_days:
            logger.warning(
                "start_date_rejected",
                extra={
                    "year_type": self._year_type.value,
                    "start_date": start_date,
                },
            )
            raise DisallowedStartDateError(start_date)
        self._next_start_for(start_date, self._weeks)

    def _next_start_for(self, start_date: date, weeks: int | None) -> date:
        try:
            return self._rules.year_offset(start_date, weeks)
        except (OverflowError, ValueError) as exc:
            logger.warning(
                "year_out_of_bounds",
                extra={
                    "year_type": self._year_type.value,
                    "start_date": start_date,
                    "weeks": weeks,
                },
            )
            raise YearOutOfBoundsError(start_date, weeks) from exc

    def _validate_date_in_year(self, day: date) -> None:
        if not dates.is_between(day, self._start_date, self._end_date):
            logger.warning(
                "date_out_of_range",
                extra={
                    "requested_date": day,
                    "start_date": self._start_date,
                    "end_date": self._end_date,
                },
            )
            raise DateOutOfRangeError(day, self._start_date, self._end_date)

    def _validate_period_id(self, period_id: Any) -> None:
        if not _is_id_within(period_id, self._periods):
            raise PeriodNotFoundError(period_id, self._periods)

    def _require_business_weeks(self) -> None:
        if not self._rules.has_business_weeks:
            raise WeeksNotApplicableError(self._year_type.value)

    def _validate_week_id(self, week_id: Any) -> None:
        self._require_business_weeks()
        if not _is_id_within(week_id, self._weeks):
            raise WeekNotFoundError(week_id, self._weeks)

    def _week_id_in_period(self, period_id: int, position: int) -> int:
        self._require_business_weeks()
        self._validate_period_id(period_id)
        return (period_id - 1) * WEEKS_PER_BUSINESS_PERIOD + position


def _is_id_within(value: Any, upper: int) -> bool:
    # bool is an int subclass but never a valid id.
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return 1 <= value <= upper
