"""
Pytest fixtures for the financial year test suite.

Provides:
- Reference financial years starting 2019-01-01 (calendar, business 52
  and business 53 weeks)
- Structured log capture
"""

import json
import logging
from io import StringIO

import pytest

from financial_year.domain.financial_year import FinancialYear
from financial_year.domain.year_types import FinancialYearType
from financial_year.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG, handler=logging.NullHandler())
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture financial_year logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            FinancialYear("business", "2019-01-01")
            logs = captured_logs()
            assert any(r["message"] == "financial_year_created" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("financial_year")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Financial year fixtures
# =============================================================================


@pytest.fixture
def calendar_year() -> FinancialYear:
    """Calendar type year 2019-01-01 .. 2019-12-31."""
    return FinancialYear(FinancialYearType.CALENDAR, "2019-01-01")


@pytest.fixture
def business_year() -> FinancialYear:
    """Business type year of 52 weeks, 2019-01-01 .. 2019-12-30."""
    return FinancialYear(FinancialYearType.BUSINESS, "2019-01-01")


@pytest.fixture
def long_business_year() -> FinancialYear:
    """Business type year of 53 weeks, 2019-01-01 .. 2020-01-06."""
    return FinancialYear(FinancialYearType.BUSINESS, "2019-01-01", fifty_three_weeks=True)
