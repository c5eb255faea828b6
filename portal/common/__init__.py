"""Common module — shared constants, exceptions and logging setup."""

from portal.common.constants import (
    BLOCKING_STATUSES,
    MAX_CIRCUMSTANTIAL_DAYS,
    MAX_ON_DEMAND_DAYS_PER_YEAR,
    USED_DAY_STATUSES,
    ConflictSeverity,
    ConflictType,
    ErrorKind,
    LeaveType,
    VacationStatus,
)
from portal.common.exceptions import (
    AppException,
    NotFoundException,
    register_exception_handlers,
)
from portal.common.log import setup_logging

__all__ = [
    # Constants / Enums
    "BLOCKING_STATUSES",
    "MAX_CIRCUMSTANTIAL_DAYS",
    "MAX_ON_DEMAND_DAYS_PER_YEAR",
    "USED_DAY_STATUSES",
    "ConflictSeverity",
    "ConflictType",
    "ErrorKind",
    "LeaveType",
    "VacationStatus",
    # Exceptions
    "AppException",
    "NotFoundException",
    "register_exception_handlers",
    # Logging
    "setup_logging",
]
