"""Read path into employee and schedule records.

The engine talks to a ``VacationDataSource``: five synchronous lookups over
data already in memory. ``load_vacation_snapshot`` is the async side that
queries the database once per check and hands back an
``InMemoryVacationDataSource`` holding everything the check needs.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Iterable, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core_hr.models import Employee
from portal.vacations.calendar import ranges_overlap
from portal.vacations.models import VacationSchedule
from portal.vacations.schemas import EmployeeSnapshot, ScheduleSnapshot

logger = logging.getLogger(__name__)


class VacationDataSource(Protocol):
    """Lookups the eligibility validator and conflict detector depend on."""

    def get_employee(self, user_id: uuid.UUID) -> Optional[EmployeeSnapshot]: ...

    def get_schedules_for_user(self, user_id: uuid.UUID) -> list[ScheduleSnapshot]: ...

    def get_department_roster(self, department_id: uuid.UUID) -> list[EmployeeSnapshot]: ...

    def get_department_schedules_in_range(
        self, department_id: uuid.UUID, start: date, end: date,
    ) -> list[ScheduleSnapshot]: ...

    def get_supervisor(self, user_id: uuid.UUID) -> Optional[EmployeeSnapshot]: ...


class InMemoryVacationDataSource:
    """``VacationDataSource`` over plain lists of snapshots."""

    def __init__(
        self,
        employees: Iterable[EmployeeSnapshot] = (),
        schedules: Iterable[ScheduleSnapshot] = (),
    ) -> None:
        self._employees: dict[uuid.UUID, EmployeeSnapshot] = {e.id: e for e in employees}
        self._schedules: list[ScheduleSnapshot] = list(schedules)

    def get_employee(self, user_id: uuid.UUID) -> Optional[EmployeeSnapshot]:
        return self._employees.get(user_id)

    def get_schedules_for_user(self, user_id: uuid.UUID) -> list[ScheduleSnapshot]:
        return [s for s in self._schedules if s.user_id == user_id]

    def get_department_roster(self, department_id: uuid.UUID) -> list[EmployeeSnapshot]:
        return [
            e for e in self._employees.values()
            if e.department_id == department_id and e.is_active
        ]

    def get_department_schedules_in_range(
        self, department_id: uuid.UUID, start: date, end: date,
    ) -> list[ScheduleSnapshot]:
        members = {
            e.id for e in self._employees.values() if e.department_id == department_id
        }
        return [
            s for s in self._schedules
            if s.user_id in members
            and ranges_overlap(s.start_date, s.end_date, start, end)
        ]

    def get_supervisor(self, user_id: uuid.UUID) -> Optional[EmployeeSnapshot]:
        employee = self._employees.get(user_id)
        if employee is None or employee.supervisor_id is None:
            return None
        return self._employees.get(employee.supervisor_id)


# ─────────────────────────────────────────────────────────────────────
# Database loader
# ─────────────────────────────────────────────────────────────────────


async def load_vacation_snapshot(
    db: AsyncSession,
    user_id: uuid.UUID,
    start: date,
    end: date,
    *,
    include_team: bool = True,
) -> InMemoryVacationDataSource:
    """Materialise the subject, its supervisor, its department roster and the
    schedules relevant to [start, end].

    All of the subject's own schedules are loaded regardless of the window,
    so used-day totals for any year can be computed from the same snapshot.
    An unknown ``user_id`` yields an empty source.
    """
    employee = await db.get(Employee, user_id)
    if employee is None:
        logger.info("Snapshot requested for unknown employee %s", user_id)
        return InMemoryVacationDataSource()

    employees: dict[uuid.UUID, Employee] = {employee.id: employee}
    schedules: dict[uuid.UUID, VacationSchedule] = {}

    own = await db.execute(
        select(VacationSchedule).where(VacationSchedule.user_id == user_id)
    )
    schedules.update({s.id: s for s in own.scalars().all()})

    if include_team:
        window = (
            VacationSchedule.start_date <= end,
            VacationSchedule.end_date >= start,
        )

        if employee.supervisor_id is not None:
            supervisor = await db.get(Employee, employee.supervisor_id)
            if supervisor is not None:
                employees[supervisor.id] = supervisor
                sup_result = await db.execute(
                    select(VacationSchedule).where(
                        VacationSchedule.user_id == supervisor.id, *window,
                    )
                )
                schedules.update({s.id: s for s in sup_result.scalars().all()})

        if employee.department_id is not None:
            roster = await db.execute(
                select(Employee).where(
                    Employee.department_id == employee.department_id,
                    Employee.is_active.is_(True),
                )
            )
            employees.update({e.id: e for e in roster.scalars().all()})

            team_result = await db.execute(
                select(VacationSchedule)
                .join(Employee, VacationSchedule.user_id == Employee.id)
                .where(
                    Employee.department_id == employee.department_id,
                    Employee.is_active.is_(True),
                    *window,
                )
            )
            schedules.update({s.id: s for s in team_result.scalars().all()})

    logger.debug(
        "Loaded snapshot for %s: %d employees, %d schedules",
        user_id, len(employees), len(schedules),
    )
    return InMemoryVacationDataSource(
        employees=[EmployeeSnapshot.model_validate(e) for e in employees.values()],
        schedules=[ScheduleSnapshot.model_validate(s) for s in schedules.values()],
    )
