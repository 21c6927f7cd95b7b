"""
Business week tests.

Verifies:
- Week boundaries, including the 53rd week of a long year
- Week lookups are rejected on calendar years
- Period to week composition (weeks 1-4 of period p)
"""

from datetime import date

import pytest

from financial_year.domain.dates import DateRange
from financial_year.exceptions import (
    DateOutOfRangeError,
    PeriodNotFoundError,
    WeekNotFoundError,
    WeeksNotApplicableError,
)


class TestWeekBoundaries:

    def test_first_week(self, business_year):
        assert business_year.week_range(1) == DateRange(date(2019, 1, 1), date(2019, 1, 7))
        assert business_year.first_date_of_week(1) == business_year.start_date

    def test_second_week(self, business_year):
        assert business_year.week_range(2) == DateRange(date(2019, 1, 8), date(2019, 1, 14))

    def test_last_week_fifty_two_weeks(self, business_year):
        assert business_year.week_range(52) == DateRange(date(2019, 12, 24), date(2019, 12, 30))
        assert business_year.last_date_of_week(52) == business_year.end_date

    def test_last_week_fifty_three_weeks(self, long_business_year):
        assert long_business_year.week_range(53) == DateRange(date(2019, 12, 31), date(2020, 1, 6))
        assert long_business_year.last_date_of_week(53) == long_business_year.end_date

    def test_week_fifty_two_of_long_year_is_a_full_week(self, long_business_year):
        assert long_business_year.week_range(52) == DateRange(date(2019, 12, 24), date(2019, 12, 30))

    def test_every_week_is_seven_days(self, long_business_year):
        weeks = list(long_business_year.iter_weeks())
        assert len(weeks) == 53
        assert all(len(week) == 7 for week in weeks)


class TestWeekValidation:

    def test_calendar_year_has_no_weeks(self, calendar_year):
        with pytest.raises(WeeksNotApplicableError) as exc_info:
            calendar_year.week_range(1)
        assert str(exc_info.value) == (
            "Week id is not applicable for non business type financial year."
        )

    def test_applicability_checked_before_id(self, calendar_year):
        with pytest.raises(WeeksNotApplicableError):
            calendar_year.first_date_of_week(99)

    @pytest.mark.parametrize("week_id", [0, -3, 53, 60, False, "1"])
    def test_invalid_week_id(self, business_year, week_id):
        with pytest.raises(WeekNotFoundError) as exc_info:
            business_year.last_date_of_week(week_id)
        assert exc_info.value.weeks == 52

    def test_iter_weeks_on_calendar_year(self, calendar_year):
        with pytest.raises(WeeksNotApplicableError):
            list(calendar_year.iter_weeks())


class TestWeekIdForDate:

    def test_lookup(self, business_year):
        assert business_year.week_id_for_date("2019-01-31") == 5

    def test_boundaries(self, business_year):
        assert business_year.week_id_for_date("2019-01-07") == 1
        assert business_year.week_id_for_date("2019-01-08") == 2
        assert business_year.week_id_for_date("2019-12-30") == 52

    def test_fifty_third_week(self, long_business_year):
        assert long_business_year.week_id_for_date("2020-01-01") == 53

    @pytest.mark.parametrize("value", ["2018-12-31", "2019-12-31"])
    def test_out_of_range(self, business_year, value):
        with pytest.raises(DateOutOfRangeError):
            business_year.week_id_for_date(value)

    def test_calendar_year(self, calendar_year):
        with pytest.raises(WeeksNotApplicableError):
            calendar_year.week_id_for_date("2019-01-31")


class TestPeriodWeekComposition:

    def test_weeks_of_second_period(self, business_year):
        assert business_year.first_week_of_period(2) == DateRange(date(2019, 1, 29), date(2019, 2, 4))
        assert business_year.second_week_of_period(2) == DateRange(date(2019, 2, 5), date(2019, 2, 11))
        assert business_year.third_week_of_period(2) == DateRange(date(2019, 2, 12), date(2019, 2, 18))
        assert business_year.fourth_week_of_period(2) == DateRange(date(2019, 2, 19), date(2019, 2, 25))

    def test_weeks_cover_their_period(self, long_business_year):
        for period_id in range(1, 13):
            period = long_business_year.period_range(period_id)
            assert long_business_year.first_week_of_period(period_id).start == period.start
            assert long_business_year.fourth_week_of_period(period_id).end == period.end

    def test_fourth_week_of_last_period_in_long_year(self, long_business_year):
        # Week 52; the 53rd week is reached through fifty_third_week().
        assert long_business_year.fourth_week_of_period(13) == DateRange(
            date(2019, 12, 24), date(2019, 12, 30)
        )

    def test_fifty_third_week(self, long_business_year):
        assert long_business_year.fifty_third_week() == DateRange(date(2019, 12, 31), date(2020, 1, 6))

    def test_fifty_third_week_missing_in_short_year(self, business_year):
        with pytest.raises(WeekNotFoundError):
            business_year.fifty_third_week()

    def test_invalid_period_id(self, long_business_year):
        with pytest.raises(PeriodNotFoundError):
            long_business_year.first_week_of_period(14)

    def test_calendar_year(self, calendar_year):
        with pytest.raises(WeeksNotApplicableError):
            calendar_year.first_week_of_period(1)
