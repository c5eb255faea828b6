"""Vacation service layer — loads snapshots and runs the engine.

The engine modules (calendar, entitlement, eligibility, conflicts) are
synchronous and do no I/O. This layer is the only place that touches the
database: one snapshot per call, then a pure evaluation.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from portal.common.exceptions import NotFoundException
from portal.config import settings
from portal.vacations.conflicts import ConflictDetector
from portal.vacations.eligibility import LeaveEligibilityValidator
from portal.vacations.entitlement import build_vacation_summary
from portal.vacations.repository import load_vacation_snapshot
from portal.vacations.schemas import (
    ConflictCheckRequest,
    ConflictReport,
    EligibilityRequest,
    EligibilityResult,
    VacationSummary,
)


class VacationService:
    """Async vacation checks: eligibility, conflicts, summary."""

    @staticmethod
    async def check_eligibility(
        db: AsyncSession,
        body: EligibilityRequest,
    ) -> EligibilityResult:
        source = await load_vacation_snapshot(
            db, body.employee_id, body.start_date, body.end_date, include_team=False,
        )
        return LeaveEligibilityValidator(source).validate(body)

    @staticmethod
    async def check_conflicts(
        db: AsyncSession,
        body: ConflictCheckRequest,
    ) -> ConflictReport:
        source = await load_vacation_snapshot(
            db, body.employee_id, body.start_date, body.end_date,
        )
        detector = ConflictDetector(
            source, min_coverage_percent=settings.VACATION_MIN_COVERAGE_PERCENT,
        )
        return detector.check(body.employee_id, body.start_date, body.end_date)

    @staticmethod
    async def get_summary(
        db: AsyncSession,
        employee_id: uuid.UUID,
        year: Optional[int] = None,
    ) -> VacationSummary:
        """Entitlement overview; raises NotFoundException for unknown employees."""
        year = year or date.today().year
        source = await load_vacation_snapshot(
            db, employee_id, date(year, 1, 1), date(year, 12, 31), include_team=False,
        )
        employee = source.get_employee(employee_id)
        if employee is None:
            raise NotFoundException("Employee", employee_id)
        return build_vacation_summary(
            employee, source.get_schedules_for_user(employee_id), year,
        )
