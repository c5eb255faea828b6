"""Per-leave-type admissibility rules (Polish labour code, 2025 edition).

Every rule is a pure function of the employee snapshot and the requested
dates. Refusals come back as result values with a Polish message for the UI;
nothing here raises for a domain failure and nothing mutates the snapshot.

Rules by leave type:
  - annual          business days must fit in annual + carried-over − used
  - on_demand       at most 4 days a year (Art. 167² KP)
  - circumstantial  at most 2 days per life event, proof where the event needs it
  - sick            cannot be refused
"""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from portal.common.constants import (
    MAX_CIRCUMSTANTIAL_DAYS,
    MAX_ON_DEMAND_DAYS_PER_YEAR,
    MSG_INVALID_RANGE,
    MSG_USER_NOT_FOUND,
    ErrorKind,
    LeaveType,
)
from portal.vacations.calendar import business_days_between
from portal.vacations.entitlement import available_annual_days, remaining_on_demand_days
from portal.vacations.repository import VacationDataSource
from portal.vacations.schemas import (
    AnnualLeaveResult,
    CircumstantialLeaveResult,
    EligibilityRequest,
    EligibilityResult,
    EmployeeSnapshot,
    OnDemandLeaveResult,
    SickLeaveResult,
)

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════
# Circumstantial reasons
# ═════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ReasonCategory:
    code: str
    max_days: int
    documentation_required: bool


REASON_CATEGORIES: dict[str, ReasonCategory] = {
    "wedding": ReasonCategory("wedding", 2, True),
    "birth": ReasonCategory("birth", 2, True),
    "death_in_family": ReasonCategory("death_in_family", 2, True),
    "medical": ReasonCategory("medical", 1, True),
    "moving": ReasonCategory("moving", 1, False),
    "other": ReasonCategory("other", 2, False),
}

GENERIC_REASON = REASON_CATEGORIES["other"]

# Polish and English spellings → category code
REASON_SYNONYMS: dict[str, str] = {
    "wedding": "wedding",
    "marriage": "wedding",
    "ślub": "wedding",
    "wesele": "wedding",
    "małżeństwo": "wedding",
    "birth": "birth",
    "child_birth": "birth",
    "narodziny": "birth",
    "poród": "birth",
    "dziecko": "birth",
    "death_in_family": "death_in_family",
    "death": "death_in_family",
    "funeral": "death_in_family",
    "family_funeral": "death_in_family",
    "pogrzeb": "death_in_family",
    "śmierć": "death_in_family",
    "zgon": "death_in_family",
    "medical": "medical",
    "lekarz": "medical",
    "szpital": "medical",
    "moving": "moving",
    "przeprowadzka": "moving",
    "other": "other",
    "inne": "other",
}

_SEPARATORS = re.compile(r"[\s\-]+")


def normalize_reason(reason: Optional[str]) -> str:
    """Lower-case, trim, and join words with underscores ("Child birth" → "child_birth")."""
    if not reason:
        return ""
    return _SEPARATORS.sub("_", reason.strip().lower())


def resolve_reason_category(reason: Optional[str]) -> ReasonCategory:
    """Map a free-text reason to its category; unknown reasons fall back to ``other``."""
    key = normalize_reason(reason)
    code = REASON_SYNONYMS.get(key)
    if code is None:
        if key:
            logger.warning("Unknown circumstantial leave reason %r, using 'other'", reason)
        return GENERIC_REASON
    return REASON_CATEGORIES[code]


# ═════════════════════════════════════════════════════════════════════
# Validator
# ═════════════════════════════════════════════════════════════════════


_PRECHECK_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.not_found: MSG_USER_NOT_FOUND,
    ErrorKind.invalid_range: MSG_INVALID_RANGE,
}


class LeaveEligibilityValidator:
    """Answers "may this employee take this leave on these dates?"."""

    def __init__(self, source: VacationDataSource, today: Optional[date] = None) -> None:
        self._source = source
        self._today = today or date.today()

    # ─────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────

    def _precheck(
        self,
        user_id: uuid.UUID,
        start: date,
        end: date,
    ) -> tuple[Optional[EmployeeSnapshot], Optional[ErrorKind]]:
        employee = self._source.get_employee(user_id)
        if employee is None:
            logger.warning("User %s not found for vacation validation", user_id)
            return None, ErrorKind.not_found
        if end < start:
            return employee, ErrorKind.invalid_range
        return employee, None

    # ─────────────────────────────────────────────────────────────────
    # Entry points
    # ─────────────────────────────────────────────────────────────────

    def validate(self, request: EligibilityRequest) -> EligibilityResult:
        """Run the rule set matching ``request.leave_type``."""
        handler = _HANDLERS[request.leave_type]
        result = handler(self, request)
        logger.info(
            "Eligibility %s for user %s: %s, %d days (%s - %s)",
            "passed" if result.is_valid else "refused",
            request.employee_id, request.leave_type.value, result.days_requested,
            request.start_date, request.end_date,
        )
        return result

    def validate_sick(self, user_id: uuid.UUID, start: date, end: date) -> SickLeaveResult:
        """Sick leave cannot be refused; only the pre-check applies."""
        _, error = self._precheck(user_id, start, end)
        if error is not None:
            return SickLeaveResult(
                is_valid=False,
                error_kind=error,
                error_message=_PRECHECK_MESSAGES[error],
            )
        return SickLeaveResult(
            is_valid=True,
            days_requested=business_days_between(start, end),
        )

    def validate_annual(self, user_id: uuid.UUID, start: date, end: date) -> AnnualLeaveResult:
        employee, error = self._precheck(user_id, start, end)
        requested = business_days_between(start, end)
        if error is None and requested == 0:
            error = ErrorKind.invalid_range
        if error is not None:
            return AnnualLeaveResult(
                is_valid=False,
                error_kind=error,
                error_message=_PRECHECK_MESSAGES[error],
                days_requested=requested,
            )

        available = available_annual_days(employee)
        if requested > available:
            logger.info(
                "User %s requesting %d annual vacation days but only %d available",
                user_id, requested, available,
            )
            return AnnualLeaveResult(
                is_valid=False,
                error_kind=ErrorKind.limit_exceeded,
                error_message=(
                    f"Brak wystarczającej liczby dni urlopu. Dostępne: {available} dni"
                ),
                days_requested=requested,
                days_available=available,
            )

        return AnnualLeaveResult(
            is_valid=True,
            days_requested=requested,
            days_available=available,
            additional_info=(
                f"Po tym urlopie pozostanie {available - requested} dni urlopu wypoczynkowego."
            ),
        )

    def validate_on_demand(
        self, user_id: uuid.UUID, start: date, end: date,
    ) -> OnDemandLeaveResult:
        year = self._today.year
        employee, error = self._precheck(user_id, start, end)
        requested = business_days_between(start, end)
        if error is None and requested == 0:
            error = ErrorKind.invalid_range
        if error is not None:
            return OnDemandLeaveResult(
                is_valid=False,
                error_kind=error,
                error_message=_PRECHECK_MESSAGES[error],
                days_requested=requested,
                year=year,
            )

        used = employee.on_demand_vacation_days_used
        remaining = remaining_on_demand_days(employee)
        refused = dict(
            is_valid=False,
            error_kind=ErrorKind.limit_exceeded,
            days_requested=requested,
            days_used_this_year=used,
            days_remaining=remaining,
            year=year,
        )

        if used >= MAX_ON_DEMAND_DAYS_PER_YEAR:
            logger.info("User %s exhausted on-demand vacation (%d/4 used)", user_id, used)
            return OnDemandLeaveResult(
                error_message="Wykorzystano już wszystkie 4 dni urlopu na żądanie w tym roku.",
                **refused,
            )

        if requested > remaining:
            logger.info(
                "User %s requesting %d on-demand days but only %d available",
                user_id, requested, remaining,
            )
            return OnDemandLeaveResult(
                error_message=(
                    "Brak wystarczającej liczby dni urlopu na żądanie. "
                    f"Dostępne: {remaining} dni, żądano: {requested} dni."
                ),
                **refused,
            )

        left_after = remaining - requested
        info = (
            f"Po tym urlopie pozostanie {left_after} dni urlopu na żądanie."
            if left_after > 0
            else "To będą ostatnie dni urlopu na żądanie w tym roku."
        )
        return OnDemandLeaveResult(
            is_valid=True,
            days_requested=requested,
            days_used_this_year=used,
            days_remaining=left_after,
            year=year,
            additional_info=info,
        )

    def validate_circumstantial(
        self,
        user_id: uuid.UUID,
        start: date,
        end: date,
        reason: Optional[str],
        has_documentation: bool,
    ) -> CircumstantialLeaveResult:
        employee, error = self._precheck(user_id, start, end)
        requested = business_days_between(start, end)
        if error is None and requested == 0:
            error = ErrorKind.invalid_range
        if error is not None:
            return CircumstantialLeaveResult(
                is_valid=False,
                error_kind=error,
                error_message=_PRECHECK_MESSAGES[error],
                days_requested=requested,
            )

        category = resolve_reason_category(reason)
        max_days = min(category.max_days, MAX_CIRCUMSTANTIAL_DAYS)
        details = dict(
            days_requested=requested,
            reason_category=category.code,
            max_allowed_days=max_days,
            documentation_required=category.documentation_required,
        )

        if requested > max_days:
            return CircumstantialLeaveResult(
                is_valid=False,
                error_kind=ErrorKind.limit_exceeded,
                error_message=(
                    f"Urlop okolicznościowy typu '{category.code}' może trwać "
                    f"maksymalnie {max_days} dni. Żądano: {requested} dni."
                ),
                documentation_sufficient=has_documentation or not category.documentation_required,
                **details,
            )

        if category.documentation_required and not has_documentation:
            return CircumstantialLeaveResult(
                is_valid=False,
                error_kind=ErrorKind.documentation_missing,
                error_message=(
                    f"Urlop okolicznościowy typu '{category.code}' wymaga "
                    "załączenia dokumentacji potwierdzającej."
                ),
                documentation_sufficient=False,
                **details,
            )

        used = employee.circumstantial_leave_days_used
        info = (
            f"Wykorzystano już {used} dni urlopu okolicznościowego w tym roku."
            if used > 0
            else None
        )
        return CircumstantialLeaveResult(
            is_valid=True,
            documentation_sufficient=True,
            additional_info=info,
            **details,
        )


# One handler per leave type; a new LeaveType member without a handler
# fails at import.
_HANDLERS: dict[
    LeaveType, Callable[[LeaveEligibilityValidator, EligibilityRequest], EligibilityResult]
] = {
    LeaveType.annual: lambda v, r: v.validate_annual(r.employee_id, r.start_date, r.end_date),
    LeaveType.on_demand: lambda v, r: v.validate_on_demand(
        r.employee_id, r.start_date, r.end_date,
    ),
    LeaveType.circumstantial: lambda v, r: v.validate_circumstantial(
        r.employee_id, r.start_date, r.end_date, r.reason, r.has_documentation,
    ),
    LeaveType.sick: lambda v, r: v.validate_sick(r.employee_id, r.start_date, r.end_date),
}

_unhandled = set(LeaveType) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"No eligibility handler for leave types: {sorted(_unhandled)}")
