"""Enums and constants for the vacation engine — matching PostgreSQL ENUM types."""

from __future__ import annotations

import enum


# ── Leave ───────────────────────────────────────────────────────────

class LeaveType(str, enum.Enum):
    annual = "annual"
    on_demand = "on_demand"
    circumstantial = "circumstantial"
    sick = "sick"


class VacationStatus(str, enum.Enum):
    scheduled = "scheduled"
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


# Statuses whose business days are counted as used.
USED_DAY_STATUSES: frozenset[VacationStatus] = frozenset(
    {VacationStatus.active, VacationStatus.completed}
)

# Statuses that occupy the calendar for overlap and coverage checks.
BLOCKING_STATUSES: frozenset[VacationStatus] = frozenset(
    {VacationStatus.scheduled, VacationStatus.active, VacationStatus.completed}
)


# ── Validation / conflicts ──────────────────────────────────────────

class ErrorKind(str, enum.Enum):
    not_found = "not_found"
    invalid_range = "invalid_range"
    limit_exceeded = "limit_exceeded"
    documentation_missing = "documentation_missing"
    defensive_unknown = "defensive_unknown"


class ConflictType(str, enum.Enum):
    overlapping_vacation = "overlapping_vacation"
    insufficient_coverage = "insufficient_coverage"
    supervisor_unavailable = "supervisor_unavailable"


class ConflictSeverity(str, enum.Enum):
    critical = "critical"
    warning = "warning"


# ── Statutory limits (Kodeks Pracy) ─────────────────────────────────

MAX_ON_DEMAND_DAYS_PER_YEAR = 4
MAX_CIRCUMSTANTIAL_DAYS = 2
MONTHS_PER_YEAR = 12

# Minimum share of a department that must stay at work (engine default;
# deployments override it through settings).
DEFAULT_MIN_COVERAGE_PERCENT = 50.0

# Longest request window (end − start, in days) accepted at the HTTP edge.
DEFAULT_MAX_REQUEST_WINDOW_DAYS = 366


# ── User-facing messages (Polish) ───────────────────────────────────

MSG_USER_NOT_FOUND = "Użytkownik nie istnieje"
MSG_INVALID_RANGE = "Nieprawidłowy zakres dat urlopu"
