"""
Typed Exception Hierarchy for the financial year calculator.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers of the calculator are other programs (report builders, ledgers,
import jobs).  Parsing message strings to find out *why* a query failed is
fragile, so every failure has:
  1. A TYPED exception class (catch by type, not message)
  2. A CODE class attribute (machine-readable, API-safe)
  3. The offending values stored as attributes

Example:
    try:
        fy.period_id_for_date("2018-12-31")
    except DateOutOfRangeError as e:
        log.warning(f"{e.value} is outside {e.start_date}..{e.end_date}")

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    FinancialYearError (base)
    |
    +-- ConfigurationError
    |   +-- UnsupportedYearTypeError
    |   +-- DisallowedStartDateError
    |   +-- WeeksNotApplicableError
    |   +-- IncompleteConfigurationError
    |
    +-- DomainError
        +-- InvalidDateError
        +-- PeriodNotFoundError
        +-- WeekNotFoundError
        +-- DateOutOfRangeError
        +-- UnresolvedDateError
        +-- YearOutOfBoundsError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Configuration   | UNSUPPORTED_YEAR_TYPE       | Type literal is not calendar/business
                | DISALLOWED_START_DATE       | Calendar year starting on day 29-31
                | WEEKS_NOT_APPLICABLE        | Week query/setter on a calendar year
                | INCOMPLETE_CONFIGURATION    | Query before type/start/counts are set
----------------|-----------------------------|-----------------------------------------
Domain          | INVALID_DATE                | Not a date, datetime or YYYY-MM-DD
                | PERIOD_NOT_FOUND            | Period id outside 1..periods
                | WEEK_NOT_FOUND              | Week id outside 1..weeks
                | DATE_OUT_OF_RANGE           | Date before start or after end date
                | UNRESOLVED_DATE             | Lookup scan found nothing (logic defect)
                | YEAR_OUT_OF_BOUNDS          | Next year would start after 9999-12-31

===============================================================================
DESIGN DECISIONS
===============================================================================

1. Both categories inherit from FinancialYearError, not ValueError, so a
   caller can catch every calculator failure with one clause without also
   catching unrelated programming errors.

2. ConfigurationError means the year itself is set up wrong; DomainError
   means one particular query got bad input.  Neither is transient and
   neither is retried.

===============================================================================
"""

from datetime import date
from typing import Any


class FinancialYearError(Exception):
    """
    Base exception for all financial year errors.

    All subclasses carry a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "FINANCIAL_YEAR_ERROR"


# Configuration exceptions


class ConfigurationError(FinancialYearError):
    """Base exception for invalid or incomplete financial year setup."""

    code: str = "CONFIGURATION_ERROR"


class UnsupportedYearTypeError(ConfigurationError):
    """Year type literal is not one of the supported types."""

    code: str = "UNSUPPORTED_YEAR_TYPE"

    def __init__(self, year_type: Any):
        self.year_type = year_type
        super().__init__(f"Financial year type {year_type!r} is not supported.")


class DisallowedStartDateError(ConfigurationError):
    """Calendar type financial year starting on a day missing from some months."""

    code: str = "DISALLOWED_START_DATE"

    def __init__(self, start_date: date):
        self.start_date = start_date
        self.day = start_date.day
        super().__init__(
            "This library does not support 29, 30, 31 as start dates of a month "
            "for calendar type financial year."
        )


class WeeksNotApplicableError(ConfigurationError):
    """Business week operation requested on a non business type year."""

    code: str = "WEEKS_NOT_APPLICABLE"

    def __init__(self, year_type: str):
        self.year_type = year_type
        super().__init__(
            "Week id is not applicable for non business type financial year."
        )


class IncompleteConfigurationError(ConfigurationError):
    """Boundary query attempted before the year is fully configured."""

    code: str = "INCOMPLETE_CONFIGURATION"

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Non supported or incomplete configuration, missing: "
            + ", ".join(missing)
        )


# Domain exceptions


class DomainError(FinancialYearError):
    """Base exception for bad query input or failed lookups."""

    code: str = "DOMAIN_ERROR"


class InvalidDateError(DomainError):
    """Value cannot be interpreted as a calendar date."""

    code: str = "INVALID_DATE"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            "Invalid date format. Not a valid ISO-8601 date string or date "
            f"object: {value!r}"
        )


class PeriodNotFoundError(DomainError):
    """Period id outside the year's period range."""

    code: str = "PERIOD_NOT_FOUND"

    def __init__(self, period_id: Any, periods: int):
        self.period_id = period_id
        self.periods = periods
        super().__init__(f"There is no period with id: {period_id}.")


class WeekNotFoundError(DomainError):
    """Business week id outside the year's week range."""

    code: str = "WEEK_NOT_FOUND"

    def __init__(self, week_id: Any, weeks: int):
        self.week_id = week_id
        self.weeks = weeks
        super().__init__(f"There is no week with id: {week_id}.")


class DateOutOfRangeError(DomainError):
    """Date falls before the start or after the end of the financial year."""

    code: str = "DATE_OUT_OF_RANGE"

    def __init__(self, value: date, start_date: date, end_date: date):
        self.value = value
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            "The requested date is out of range of the current financial year."
        )


class UnresolvedDateError(DomainError):
    """
    An in-range date matched no period or week.

    Only reachable if the boundary rules disagree with each other, which
    means a defect in the calculator rather than bad input.
    """

    code: str = "UNRESOLVED_DATE"

    def __init__(self, value: date, unit: str):
        self.value = value
        self.unit = unit
        super().__init__(f"A {unit} could not be found for the requested date {value}.")


class YearOutOfBoundsError(DomainError):
    """The following financial year would start past the last representable date."""

    code: str = "YEAR_OUT_OF_BOUNDS"

    def __init__(self, start_date: date, weeks: int | None):
        self.start_date = start_date
        self.weeks = weeks
        super().__init__(
            f"A financial year starting {start_date} runs beyond the supported date range."
        )
