"""Business-day counting and proportional entitlement rounding."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from portal.vacations.calendar import (
    business_days_between,
    iter_days,
    proportional_annual_entitlement,
    ranges_overlap,
)

# 2026-02-23 is a Monday
MONDAY = date(2026, 2, 23)


class TestBusinessDaysBetween:

    @pytest.mark.parametrize("offset, expected", [(0, 1), (1, 1), (4, 1), (5, 0), (6, 0)])
    def test_single_day(self, offset, expected):
        day = MONDAY + timedelta(days=offset)
        assert business_days_between(day, day) == expected

    def test_monday_to_sunday_is_five(self):
        assert business_days_between(MONDAY, MONDAY + timedelta(days=6)) == 5

    def test_two_full_weeks_is_ten(self):
        assert business_days_between(MONDAY, MONDAY + timedelta(days=13)) == 10

    def test_inverted_range_is_zero(self):
        assert business_days_between(MONDAY + timedelta(days=4), MONDAY) == 0

    def test_weekend_only_is_zero(self):
        saturday = MONDAY + timedelta(days=5)
        assert business_days_between(saturday, saturday + timedelta(days=1)) == 0

    def test_friday_to_monday_skips_weekend(self):
        friday = MONDAY + timedelta(days=4)
        assert business_days_between(friday, friday + timedelta(days=3)) == 2

    def test_year_boundary(self):
        # Mon 2025-12-29 … Fri 2026-01-02
        assert business_days_between(date(2025, 12, 29), date(2026, 1, 2)) == 5


class TestProportionalEntitlement:
    TODAY = date(2026, 10, 19)

    def test_started_previous_year_gets_full_grant(self):
        assert proportional_annual_entitlement(date(2025, 11, 1), 26, today=self.TODAY) == 26

    def test_january_start_gets_full_grant(self):
        assert proportional_annual_entitlement(date(2026, 1, 1), 26, today=self.TODAY) == 26

    def test_july_start_gets_half(self):
        assert proportional_annual_entitlement(date(2026, 7, 1), 26, today=self.TODAY) == 13

    def test_december_start_rounds_up(self):
        # 26 / 12 = 2.17 → 3
        assert proportional_annual_entitlement(date(2026, 12, 1), 26, today=self.TODAY) == 3

    def test_twenty_day_grant_rounds_up(self):
        # 20 / 12 × 5 = 8.33 → 9
        assert proportional_annual_entitlement(date(2026, 8, 15), 20, today=self.TODAY) == 9

    def test_defaults_to_current_year(self):
        this_year = date.today().year
        assert proportional_annual_entitlement(date(this_year, 1, 10), 26) == 26
        assert proportional_annual_entitlement(date(this_year, 7, 1), 26) == 13


class TestHelpers:

    def test_iter_days_inclusive(self):
        days = list(iter_days(MONDAY, MONDAY + timedelta(days=2)))
        assert days == [MONDAY, MONDAY + timedelta(days=1), MONDAY + timedelta(days=2)]

    def test_iter_days_inverted_is_empty(self):
        assert list(iter_days(MONDAY, MONDAY - timedelta(days=1))) == []

    def test_ranges_touching_on_one_day_overlap(self):
        assert ranges_overlap(MONDAY, MONDAY + timedelta(days=2),
                              MONDAY + timedelta(days=2), MONDAY + timedelta(days=5))

    def test_adjacent_ranges_do_not_overlap(self):
        assert not ranges_overlap(MONDAY, MONDAY + timedelta(days=2),
                                  MONDAY + timedelta(days=3), MONDAY + timedelta(days=5))

    def test_iter_days_reaches_last_representable_date(self):
        days = list(iter_days(date.max - timedelta(days=2), date.max))
        assert days[-1] == date.max
        assert len(days) == 3


class TestCalendarEdges:

    def test_last_representable_date_is_a_business_day(self):
        # 9999-12-31 is a Friday
        assert business_days_between(date.max, date.max) == 1

    def test_first_representable_date(self):
        # 0001-01-01 is a Monday
        assert business_days_between(date.min, date.min + timedelta(days=6)) == 5

    def test_whole_calendar_range(self):
        assert business_days_between(date(1, 1, 1), date(9999, 12, 30)) == 2608614

    @pytest.mark.parametrize("start_offset", range(7))
    @pytest.mark.parametrize("length", range(0, 22))
    def test_matches_day_by_day_count(self, start_offset, length):
        start = MONDAY + timedelta(days=start_offset)
        end = start + timedelta(days=length)
        expected = sum(1 for day in iter_days(start, end) if day.weekday() < 5)
        assert business_days_between(start, end) == expected
