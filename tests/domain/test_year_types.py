"""Year type rule table tests."""

from datetime import date

import pytest

from financial_year.domain.year_types import (
    YEAR_TYPE_RULES,
    FinancialYearType,
    resolve_year_type,
    rules_for,
)
from financial_year.exceptions import UnsupportedYearTypeError


class TestResolveYearType:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("calendar", FinancialYearType.CALENDAR),
            ("business", FinancialYearType.BUSINESS),
            (FinancialYearType.BUSINESS, FinancialYearType.BUSINESS),
        ],
    )
    def test_supported_literals(self, value, expected):
        assert resolve_year_type(value) is expected

    @pytest.mark.parametrize("value", ["Calendar", "BUSINESS", "fiscal", "", None, 1])
    def test_unsupported_literals(self, value):
        with pytest.raises(UnsupportedYearTypeError) as exc_info:
            resolve_year_type(value)
        assert exc_info.value.year_type == value


class TestRules:

    def test_every_type_has_rules(self):
        assert set(YEAR_TYPE_RULES) == set(FinancialYearType)

    def test_calendar_rules(self):
        rules = rules_for(FinancialYearType.CALENDAR)
        assert rules.periods == 12
        assert not rules.has_business_weeks
        assert rules.weeks_for(True) is None
        assert rules.disallowed_start_days == frozenset({29, 30, 31})
        assert rules.period_offset(date(2019, 1, 15), 3) == date(2019, 4, 15)
        assert rules.year_offset(date(2019, 1, 15), None) == date(2020, 1, 15)

    def test_business_rules(self):
        rules = rules_for(FinancialYearType.BUSINESS)
        assert rules.periods == 13
        assert rules.has_business_weeks
        assert rules.weeks_for(False) == 52
        assert rules.weeks_for(True) == 53
        assert rules.disallowed_start_days == frozenset()
        assert rules.period_offset(date(2019, 1, 1), 1) == date(2019, 1, 29)
        assert rules.year_offset(date(2019, 1, 1), 52) == date(2019, 12, 31)
        assert rules.year_offset(date(2019, 1, 1), 53) == date(2020, 1, 7)
