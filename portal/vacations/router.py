"""Vacation router — pre-submit eligibility and conflict checks, summaries.

Checks always answer 200; a refusal is part of the verdict body, not an
HTTP error. Only an unknown employee on the summary endpoint is a 404.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from portal.database import get_db
from portal.vacations.schemas import (
    ConflictCheckRequest,
    ConflictReport,
    EligibilityRequest,
    EligibilityVerdict,
    VacationSummary,
)
from portal.vacations.service import VacationService

router = APIRouter(prefix="", tags=["vacations"])


# ── POST /eligibility ───────────────────────────────────────────────

@router.post("/eligibility", response_model=EligibilityVerdict)
async def check_eligibility(
    body: EligibilityRequest,
    db: AsyncSession = Depends(get_db),
):
    """Validate a leave request against the rules of its leave type."""
    return await VacationService.check_eligibility(db, body)


# ── POST /conflicts ─────────────────────────────────────────────────

@router.post("/conflicts", response_model=ConflictReport)
async def check_conflicts(
    body: ConflictCheckRequest,
    db: AsyncSession = Depends(get_db),
):
    """Overlaps, team coverage and supervisor availability for a date window."""
    return await VacationService.check_conflicts(db, body)


# ── GET /employees/{employee_id}/summary ────────────────────────────

@router.get("/employees/{employee_id}/summary", response_model=VacationSummary)
async def vacation_summary(
    employee_id: uuid.UUID,
    year: Optional[int] = Query(None, ge=2000, le=2100),
    db: AsyncSession = Depends(get_db),
):
    """Annual, carried-over, on-demand and circumstantial day counts."""
    return await VacationService.get_summary(db, employee_id, year)
