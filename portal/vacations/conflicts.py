"""Scheduling-risk analysis for a proposed absence.

Three checks run against the snapshot handed in by the caller:

  1. the requester's own calendar (overlap is critical),
  2. department coverage while the requester is away,
  3. the supervisor's calendar (a warning only).

A report with any critical conflict cannot be auto-approved; warnings only
flag it for manual review.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional

from portal.common.constants import (
    BLOCKING_STATUSES,
    DEFAULT_MIN_COVERAGE_PERCENT,
    MSG_INVALID_RANGE,
    MSG_USER_NOT_FOUND,
    ConflictSeverity,
    ConflictType,
    ErrorKind,
)
from portal.vacations.calendar import iter_days, ranges_overlap
from portal.vacations.repository import VacationDataSource
from portal.vacations.schemas import (
    ConflictEntry,
    ConflictReport,
    CoverageAnalysis,
    EmployeeSnapshot,
    ScheduleSnapshot,
)

logger = logging.getLogger(__name__)


def _blocking_in_window(
    schedules: list[ScheduleSnapshot], start: date, end: date,
) -> list[ScheduleSnapshot]:
    return [
        s for s in schedules
        if s.status in BLOCKING_STATUSES
        and ranges_overlap(s.start_date, s.end_date, start, end)
    ]


class ConflictDetector:
    """Produces a ``ConflictReport`` for one employee and date window."""

    def __init__(
        self,
        source: VacationDataSource,
        min_coverage_percent: float = DEFAULT_MIN_COVERAGE_PERCENT,
    ) -> None:
        self._source = source
        self._min_coverage = min_coverage_percent

    def check(self, user_id: uuid.UUID, start: date, end: date) -> ConflictReport:
        employee = self._source.get_employee(user_id)
        if employee is None:
            logger.warning("Conflict check for unknown user %s", user_id)
            return self._unresolvable(MSG_USER_NOT_FOUND)
        if end < start:
            return self._unresolvable(MSG_INVALID_RANGE)

        conflicts = self._overlapping_vacations(user_id, start, end)

        coverage = CoverageAnalysis()
        if employee.department_id is not None:
            coverage = self._analyze_team_coverage(employee, start, end)
            if not coverage.is_adequate_coverage:
                conflicts.append(
                    ConflictEntry(
                        type=ConflictType.insufficient_coverage,
                        severity=(
                            ConflictSeverity.critical
                            if coverage.coverage_percentage == 0
                            else ConflictSeverity.warning
                        ),
                        description=(
                            "Niewystarczające pokrycie zespołu: "
                            f"{coverage.coverage_percentage:.1f}% dostępności"
                        ),
                        conflict_start_date=start,
                        conflict_end_date=end,
                    )
                )

        conflicts.extend(self._supervisor_conflicts(employee, start, end))

        report = ConflictReport(conflicts=conflicts, coverage_analysis=coverage)
        logger.info(
            "Conflict check for user %s (%s - %s): %d conflicts, approvable=%s",
            user_id, start, end, len(conflicts), report.can_be_approved,
        )
        return report

    # ─────────────────────────────────────────────────────────────────
    # Checks
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def _unresolvable(description: str) -> ConflictReport:
        """Subject or window cannot be evaluated: block auto-approval."""
        return ConflictReport(
            conflicts=[
                ConflictEntry(
                    type=ConflictType.overlapping_vacation,
                    severity=ConflictSeverity.critical,
                    description=description,
                )
            ],
            coverage_analysis=CoverageAnalysis(
                coverage_percentage=0.0, is_adequate_coverage=False,
            ),
            error_kind=ErrorKind.defensive_unknown,
        )

    def _overlapping_vacations(
        self, user_id: uuid.UUID, start: date, end: date,
    ) -> list[ConflictEntry]:
        own = _blocking_in_window(self._source.get_schedules_for_user(user_id), start, end)
        return [
            ConflictEntry(
                type=ConflictType.overlapping_vacation,
                severity=ConflictSeverity.critical,
                description=f"Nakładający się urlop: {s.start_date} - {s.end_date}",
                conflict_start_date=s.start_date,
                conflict_end_date=s.end_date,
                involved_user_ids=[user_id],
            )
            for s in own
        ]

    def _analyze_team_coverage(
        self, employee: EmployeeSnapshot, start: date, end: date,
    ) -> CoverageAnalysis:
        # The requester always belongs to the team, active or not
        roster_ids = {
            e.id for e in self._source.get_department_roster(employee.department_id)
        } | {employee.id}
        team_size = len(roster_ids)

        away = [
            s for s in _blocking_in_window(
                self._source.get_department_schedules_in_range(
                    employee.department_id, start, end,
                ),
                start,
                end,
            )
            if s.user_id != employee.id and s.user_id in roster_ids
        ]

        # Requester counts as away for the whole window
        on_vacation = len({s.user_id for s in away}) + 1
        available = max(0, team_size - on_vacation)
        coverage = 100.0 * available / team_size

        critical_dates: list[date] = []
        for day in iter_days(start, end):
            away_today = len({
                s.user_id for s in away if s.start_date <= day <= s.end_date
            }) + 1
            if 100.0 * max(0, team_size - away_today) / team_size < self._min_coverage:
                critical_dates.append(day)

        return CoverageAnalysis(
            team_size=team_size,
            members_on_vacation=on_vacation,
            members_available=available,
            coverage_percentage=coverage,
            # A fully absent team is never adequate, whatever the threshold
            is_adequate_coverage=available > 0 and coverage >= self._min_coverage,
            critical_coverage_dates=critical_dates,
        )

    def _supervisor_conflicts(
        self, employee: EmployeeSnapshot, start: date, end: date,
    ) -> list[ConflictEntry]:
        if employee.supervisor_id is None:
            return []
        supervisor: Optional[EmployeeSnapshot] = self._source.get_supervisor(employee.id)
        if supervisor is None:
            return []

        away = _blocking_in_window(
            self._source.get_schedules_for_user(supervisor.id), start, end,
        )
        return [
            ConflictEntry(
                type=ConflictType.supervisor_unavailable,
                severity=ConflictSeverity.warning,
                description=f"Przełożony niedostępny: {s.start_date} - {s.end_date}",
                conflict_start_date=s.start_date,
                conflict_end_date=s.end_date,
                involved_user_ids=[supervisor.id],
            )
            for s in away
        ]
