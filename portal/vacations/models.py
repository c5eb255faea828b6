"""Vacation ORM models: VacationSchedule."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.common.constants import LeaveType, VacationStatus
from portal.database import Base

if TYPE_CHECKING:
    from portal.core_hr.models import Employee


class VacationSchedule(Base):
    """An approved (or pending) absence on the calendar, dates inclusive.

    Lifecycle: scheduled → active → completed, or cancelled at any point
    before completion. Status transitions are driven by the workflow.
    """

    __tablename__ = "vacation_schedules"
    __table_args__ = (
        sa.CheckConstraint("end_date >= start_date", name="ck_vacation_dates"),
        sa.Index("ix_vacation_user_dates", "user_id", "start_date", "end_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), sa.ForeignKey("employees.id"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(sa.Date, nullable=False)
    end_date: Mapped[date] = mapped_column(sa.Date, nullable=False)
    status: Mapped[VacationStatus] = mapped_column(
        sa.Enum(VacationStatus, name="vacation_status"),
        nullable=False,
        default=VacationStatus.scheduled,
    )
    leave_type: Mapped[LeaveType] = mapped_column(
        sa.Enum(LeaveType, name="leave_type"),
        nullable=False,
        default=LeaveType.annual,
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), server_default=sa.func.now()
    )

    # Relationships
    employee: Mapped[Employee] = relationship(
        back_populates="vacation_schedules"
    )

    def __repr__(self) -> str:
        return (
            f"<VacationSchedule {self.user_id} "
            f"{self.start_date}..{self.end_date} {self.status.value}>"
        )
