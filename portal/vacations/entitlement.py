"""Used / available / remaining day accounting per leave category."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Iterable, Optional

from portal.common.constants import MAX_ON_DEMAND_DAYS_PER_YEAR, USED_DAY_STATUSES
from portal.vacations.calendar import (
    business_days_between,
    proportional_annual_entitlement,
)
from portal.vacations.schemas import EmployeeSnapshot, ScheduleSnapshot, VacationSummary

logger = logging.getLogger(__name__)


def available_annual_days(employee: EmployeeSnapshot) -> int:
    """Annual grant minus used days plus carry-over.

    Not clamped: a negative value means the employee is over-allocated and
    the caller has to surface it.
    """
    return (
        employee.annual_vacation_days
        - employee.vacation_days_used
        + employee.carried_over_vacation_days
    )


def remaining_on_demand_days(employee: EmployeeSnapshot) -> int:
    """On-demand days left this year, never below zero."""
    return max(0, MAX_ON_DEMAND_DAYS_PER_YEAR - employee.on_demand_vacation_days_used)


def _touches_year(schedule: ScheduleSnapshot, year: int) -> bool:
    return schedule.start_date.year <= year <= schedule.end_date.year


def used_days_in_year(
    user_id: uuid.UUID,
    year: int,
    schedules: Iterable[ScheduleSnapshot],
) -> int:
    """Business days of the user's active/completed schedules touching ``year``.

    A schedule spanning New Year is counted in full towards both years.
    """
    total = sum(
        business_days_between(s.start_date, s.end_date)
        for s in schedules
        if s.user_id == user_id
        and s.status in USED_DAY_STATUSES
        and _touches_year(s, year)
    )
    logger.debug("User %s used %d vacation days in %d", user_id, total, year)
    return total


def build_vacation_summary(
    employee: EmployeeSnapshot,
    schedules: Iterable[ScheduleSnapshot],
    year: int,
    today: Optional[date] = None,
) -> VacationSummary:
    proportional = None
    if employee.employment_start_date is not None:
        proportional = proportional_annual_entitlement(
            employee.employment_start_date,
            employee.annual_vacation_days,
            today=today,
        )

    return VacationSummary(
        employee_id=employee.id,
        year=year,
        annual_vacation_days=employee.annual_vacation_days,
        proportional_entitlement=proportional,
        vacation_days_used=employee.vacation_days_used,
        used_days_in_year=used_days_in_year(employee.id, year, schedules),
        carried_over_vacation_days=employee.carried_over_vacation_days,
        carried_over_expiry_date=employee.carried_over_expiry_date,
        available_annual_days=available_annual_days(employee),
        on_demand_vacation_days_used=employee.on_demand_vacation_days_used,
        on_demand_vacation_days_remaining=remaining_on_demand_days(employee),
        circumstantial_leave_days_used=employee.circumstantial_leave_days_used,
    )
