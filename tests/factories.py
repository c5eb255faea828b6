"""Model factories — engine snapshots and ORM row dicts."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from typing import Optional

from portal.common.constants import LeaveType, VacationStatus
from portal.vacations.schemas import EmployeeSnapshot, ScheduleSnapshot


# ── Engine snapshots ────────────────────────────────────────────────

def make_employee(
    *,
    annual_vacation_days: int = 26,
    vacation_days_used: int = 0,
    carried_over_vacation_days: int = 0,
    on_demand_vacation_days_used: int = 0,
    circumstantial_leave_days_used: int = 0,
    department_id: Optional[uuid.UUID] = None,
    supervisor_id: Optional[uuid.UUID] = None,
    employment_start_date: Optional[date] = None,
    is_active: bool = True,
) -> EmployeeSnapshot:
    return EmployeeSnapshot(
        id=uuid.uuid4(),
        annual_vacation_days=annual_vacation_days,
        vacation_days_used=vacation_days_used,
        carried_over_vacation_days=carried_over_vacation_days,
        on_demand_vacation_days_used=on_demand_vacation_days_used,
        circumstantial_leave_days_used=circumstantial_leave_days_used,
        department_id=department_id,
        supervisor_id=supervisor_id,
        employment_start_date=employment_start_date,
        is_active=is_active,
    )


def make_schedule(
    user_id: uuid.UUID,
    start_date: date,
    end_date: date,
    *,
    status: VacationStatus = VacationStatus.active,
    leave_type: LeaveType = LeaveType.annual,
) -> ScheduleSnapshot:
    return ScheduleSnapshot(
        id=uuid.uuid4(),
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        status=status,
        leave_type=leave_type,
    )


# ── ORM rows ────────────────────────────────────────────────────────

def _make_department(*, name: str = "Engineering") -> dict:
    return dict(
        id=uuid.uuid4(),
        name=name,
        is_active=True,
        created_at=datetime.now(timezone.utc),
    )


def _make_employee(
    *,
    email: Optional[str] = None,
    first_name: str = "Test",
    last_name: str = "User",
    department_id: Optional[uuid.UUID] = None,
    supervisor_id: Optional[uuid.UUID] = None,
    annual_vacation_days: int = 26,
    vacation_days_used: int = 0,
    carried_over_vacation_days: int = 0,
    on_demand_vacation_days_used: int = 0,
    circumstantial_leave_days_used: int = 0,
    employment_start_date: Optional[date] = date(2024, 1, 15),
    is_active: bool = True,
) -> dict:
    return dict(
        id=uuid.uuid4(),
        first_name=first_name,
        last_name=last_name,
        email=email or f"user.{uuid.uuid4().hex[:8]}@portal.test",
        department_id=department_id,
        supervisor_id=supervisor_id,
        employment_start_date=employment_start_date,
        annual_vacation_days=annual_vacation_days,
        vacation_days_used=vacation_days_used,
        carried_over_vacation_days=carried_over_vacation_days,
        on_demand_vacation_days_used=on_demand_vacation_days_used,
        circumstantial_leave_days_used=circumstantial_leave_days_used,
        is_active=is_active,
        created_at=datetime.now(timezone.utc),
    )


def _make_vacation_schedule(
    user_id: uuid.UUID,
    start_date: date,
    end_date: date,
    *,
    status: VacationStatus = VacationStatus.scheduled,
    leave_type: LeaveType = LeaveType.annual,
) -> dict:
    return dict(
        id=uuid.uuid4(),
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        status=status,
        leave_type=leave_type,
        created_at=datetime.now(timezone.utc),
    )
