"""
Financial Year - period and business week calculator

Derives the boundaries of a custom financial year from its start date:
- Calendar years of 12 month-long periods
- Business years of 13 four-week periods and 52 or 53 business weeks
- Reverse lookup of the period or week containing a date
- Day-by-day ranges for any period or week
"""

from financial_year.domain.dates import DateRange
from financial_year.domain.financial_year import FinancialYear
from financial_year.domain.year_types import FinancialYearType

__version__ = "0.1.0"

__all__ = [
    "DateRange",
    "FinancialYear",
    "FinancialYearType",
]
