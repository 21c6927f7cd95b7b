"""
Pure domain layer.

This module contains the date arithmetic, year type rules and the
FinancialYear calculator with NO dependencies on:
- Persistence
- Clock / current time
- I/O (other than log records)

Every query result is a plain ``date`` or an immutable ``DateRange``.
"""

from financial_year.domain.dates import DateRange, to_date
from financial_year.domain.financial_year import FinancialYear
from financial_year.domain.year_types import (
    YEAR_TYPE_RULES,
    FinancialYearType,
    YearTypeRules,
    resolve_year_type,
)

__all__ = [
    "DateRange",
    "FinancialYear",
    "FinancialYearType",
    "YEAR_TYPE_RULES",
    "YearTypeRules",
    "resolve_year_type",
    "to_date",
]
