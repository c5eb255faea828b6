"""Vacation Pydantic v2 schemas — engine snapshots, verdicts and request bodies.

Naming conventions:
  - *Snapshot           → read-only inputs handed to the engine
  - *Result / *Report   → verdicts produced fresh per call
  - *Request            → request bodies (pre-submit checks)

Every model is frozen: the engine never mutates what it is given.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from portal.common.constants import (
    MAX_ON_DEMAND_DAYS_PER_YEAR,
    ConflictSeverity,
    ConflictType,
    ErrorKind,
    LeaveType,
    VacationStatus,
)
from portal.config import settings


# ═════════════════════════════════════════════════════════════════════
# Snapshots (engine inputs)
# ═════════════════════════════════════════════════════════════════════


class EmployeeSnapshot(BaseModel):
    """Employee record as of the moment a check was requested."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    annual_vacation_days: int = 26
    vacation_days_used: int = 0
    carried_over_vacation_days: int = 0
    carried_over_expiry_date: Optional[date] = None
    on_demand_vacation_days_used: int = 0
    circumstantial_leave_days_used: int = 0
    department_id: Optional[uuid.UUID] = None
    supervisor_id: Optional[uuid.UUID] = None
    employment_start_date: Optional[date] = None
    is_active: bool = True


class ScheduleSnapshot(BaseModel):
    """A vacation schedule entry, both dates inclusive."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    user_id: uuid.UUID
    start_date: date
    end_date: date
    status: VacationStatus = VacationStatus.scheduled
    leave_type: LeaveType = LeaveType.annual


# ═════════════════════════════════════════════════════════════════════
# Eligibility
# ═════════════════════════════════════════════════════════════════════


def _check_window(start: date, end: date) -> None:
    """Reject windows longer than the configured maximum.

    An inverted window is let through: the engine reports it as
    ``invalid_range`` in the verdict body.
    """
    limit = settings.VACATION_MAX_REQUEST_WINDOW_DAYS
    if (end - start).days > limit:
        raise ValueError(f"Request window cannot span more than {limit} days.")


class EligibilityRequest(BaseModel):
    """Payload for a pre-submit eligibility check."""

    employee_id: uuid.UUID
    start_date: date = Field(..., description="Leave start date (inclusive)")
    end_date: date = Field(..., description="Leave end date (inclusive)")
    leave_type: LeaveType
    reason: Optional[str] = Field(
        None, max_length=200, description="Free-text reason (circumstantial leave)"
    )
    has_documentation: bool = False

    @model_validator(mode="after")
    def validate_window(self) -> "EligibilityRequest":
        _check_window(self.start_date, self.end_date)
        return self


class EligibilityResult(BaseModel):
    """Verdict shared by every leave type."""

    model_config = ConfigDict(frozen=True)

    leave_type: LeaveType
    is_valid: bool
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    days_requested: int = 0
    additional_info: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def can_take(self) -> bool:
        return self.is_valid


class AnnualLeaveResult(EligibilityResult):
    leave_type: Literal[LeaveType.annual] = LeaveType.annual
    days_available: int = 0


class OnDemandLeaveResult(EligibilityResult):
    leave_type: Literal[LeaveType.on_demand] = LeaveType.on_demand
    days_used_this_year: int = 0
    days_remaining: int = 0
    max_allowed_days_per_year: int = MAX_ON_DEMAND_DAYS_PER_YEAR
    year: int = 0


class CircumstantialLeaveResult(EligibilityResult):
    leave_type: Literal[LeaveType.circumstantial] = LeaveType.circumstantial
    reason_category: Optional[str] = None
    max_allowed_days: int = 0
    documentation_required: bool = False
    documentation_sufficient: bool = False


class SickLeaveResult(EligibilityResult):
    leave_type: Literal[LeaveType.sick] = LeaveType.sick


# Response body of the eligibility endpoint, keyed on leave_type
EligibilityVerdict = Annotated[
    Union[AnnualLeaveResult, OnDemandLeaveResult, CircumstantialLeaveResult, SickLeaveResult],
    Field(discriminator="leave_type"),
]


# ═════════════════════════════════════════════════════════════════════
# Conflicts
# ═════════════════════════════════════════════════════════════════════


class ConflictCheckRequest(BaseModel):
    """Payload for a scheduling-risk check."""

    employee_id: uuid.UUID
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def validate_window(self) -> "ConflictCheckRequest":
        _check_window(self.start_date, self.end_date)
        return self


class ConflictEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ConflictType
    severity: ConflictSeverity
    description: str = ""
    conflict_start_date: Optional[date] = None
    conflict_end_date: Optional[date] = None
    involved_user_ids: list[uuid.UUID] = Field(default_factory=list)


class CoverageAnalysis(BaseModel):
    """Department staffing during the requested window."""

    model_config = ConfigDict(frozen=True)

    team_size: int = 0
    members_on_vacation: int = 0
    members_available: int = 0
    coverage_percentage: float = 100.0
    is_adequate_coverage: bool = True
    critical_coverage_dates: list[date] = Field(default_factory=list)


class ConflictReport(BaseModel):
    """Scheduling-risk verdict; any critical conflict blocks auto-approval."""

    model_config = ConfigDict(frozen=True)

    conflicts: list[ConflictEntry] = Field(default_factory=list)
    coverage_analysis: CoverageAnalysis = Field(default_factory=CoverageAnalysis)
    error_kind: Optional[ErrorKind] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_conflicts(self) -> bool:
        return len(self.conflicts) > 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def can_be_approved(self) -> bool:
        return not any(c.severity == ConflictSeverity.critical for c in self.conflicts)


# ═════════════════════════════════════════════════════════════════════
# Summary
# ═════════════════════════════════════════════════════════════════════


class VacationSummary(BaseModel):
    """Entitlement overview for one employee and year."""

    model_config = ConfigDict(frozen=True)

    employee_id: uuid.UUID
    year: int
    annual_vacation_days: int
    proportional_entitlement: Optional[int] = None
    vacation_days_used: int
    used_days_in_year: int
    carried_over_vacation_days: int
    carried_over_expiry_date: Optional[date] = None
    available_annual_days: int
    on_demand_vacation_days_used: int
    on_demand_vacation_days_remaining: int
    circumstantial_leave_days_used: int
