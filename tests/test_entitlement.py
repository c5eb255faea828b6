"""Available, remaining and used day accounting."""

from __future__ import annotations

import uuid
from datetime import date

from portal.common.constants import VacationStatus
from portal.vacations.entitlement import (
    available_annual_days,
    build_vacation_summary,
    remaining_on_demand_days,
    used_days_in_year,
)
from tests.factories import make_employee, make_schedule

# Mon 2026-03-02 … Fri 2026-03-06 and Mon 2026-06-01 … Fri 2026-06-05
MARCH_WEEK = (date(2026, 3, 2), date(2026, 3, 6))
JUNE_WEEK = (date(2026, 6, 1), date(2026, 6, 5))


class TestAvailableAnnualDays:

    def test_grant_minus_used_plus_carried(self):
        emp = make_employee(annual_vacation_days=26, vacation_days_used=10,
                            carried_over_vacation_days=4)
        assert available_annual_days(emp) == 20

    def test_over_allocation_stays_negative(self):
        emp = make_employee(annual_vacation_days=20, vacation_days_used=25)
        assert available_annual_days(emp) == -5


class TestRemainingOnDemandDays:

    def test_fresh_employee_has_four(self):
        assert remaining_on_demand_days(make_employee()) == 4

    def test_partial_usage(self):
        assert remaining_on_demand_days(make_employee(on_demand_vacation_days_used=3)) == 1

    def test_never_negative(self):
        assert remaining_on_demand_days(make_employee(on_demand_vacation_days_used=6)) == 0


class TestUsedDaysInYear:

    def test_active_and_completed_are_summed(self):
        uid = uuid.uuid4()
        schedules = [
            make_schedule(uid, *MARCH_WEEK, status=VacationStatus.completed),
            make_schedule(uid, *JUNE_WEEK, status=VacationStatus.active),
        ]
        assert used_days_in_year(uid, 2026, schedules) == 10

    def test_cancelled_and_scheduled_are_ignored(self):
        uid = uuid.uuid4()
        schedules = [
            make_schedule(uid, *MARCH_WEEK, status=VacationStatus.completed),
            make_schedule(uid, *JUNE_WEEK, status=VacationStatus.active),
            make_schedule(uid, date(2026, 9, 7), date(2026, 9, 11),
                          status=VacationStatus.cancelled),
            make_schedule(uid, date(2026, 10, 5), date(2026, 10, 9),
                          status=VacationStatus.scheduled),
        ]
        assert used_days_in_year(uid, 2026, schedules) == 10

    def test_other_users_and_years_are_ignored(self):
        uid = uuid.uuid4()
        schedules = [
            make_schedule(uid, *MARCH_WEEK, status=VacationStatus.completed),
            make_schedule(uuid.uuid4(), *JUNE_WEEK, status=VacationStatus.completed),
            make_schedule(uid, date(2025, 6, 2), date(2025, 6, 6),
                          status=VacationStatus.completed),
        ]
        assert used_days_in_year(uid, 2026, schedules) == 5

    def test_cross_year_schedule_counts_in_full_for_both_years(self):
        uid = uuid.uuid4()
        # Mon 2025-12-29 … Fri 2026-01-02: five business days
        schedules = [
            make_schedule(uid, date(2025, 12, 29), date(2026, 1, 2),
                          status=VacationStatus.completed),
        ]
        assert used_days_in_year(uid, 2025, schedules) == 5
        assert used_days_in_year(uid, 2026, schedules) == 5


class TestVacationSummary:

    def test_summary_fields(self):
        emp = make_employee(
            annual_vacation_days=26,
            vacation_days_used=5,
            carried_over_vacation_days=3,
            on_demand_vacation_days_used=1,
            circumstantial_leave_days_used=2,
            employment_start_date=date(2026, 7, 1),
        )
        schedules = [make_schedule(emp.id, *MARCH_WEEK, status=VacationStatus.completed)]

        summary = build_vacation_summary(emp, schedules, 2026, today=date(2026, 10, 19))

        assert summary.employee_id == emp.id
        assert summary.year == 2026
        assert summary.proportional_entitlement == 13
        assert summary.used_days_in_year == 5
        assert summary.available_annual_days == 24
        assert summary.on_demand_vacation_days_remaining == 3
        assert summary.circumstantial_leave_days_used == 2

    def test_no_start_date_means_no_proportional_figure(self):
        summary = build_vacation_summary(make_employee(), [], 2026)
        assert summary.proportional_entitlement is None
        assert summary.used_days_in_year == 0
