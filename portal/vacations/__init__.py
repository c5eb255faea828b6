"""Vacation module — entitlement accounting, eligibility rules, conflict detection."""

from portal.vacations.conflicts import ConflictDetector
from portal.vacations.eligibility import LeaveEligibilityValidator
from portal.vacations.repository import InMemoryVacationDataSource, VacationDataSource

__all__ = [
    "ConflictDetector",
    "InMemoryVacationDataSource",
    "LeaveEligibilityValidator",
    "VacationDataSource",
]
