"""Core HR ORM models: Department, Employee.

SQLAlchemy 2.0 async-compatible models with Mapped[] annotations. The
portal's CRUD layer owns these tables; the vacation engine only reads
them, including the vacation counters maintained by the approval workflow.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.database import Base

if TYPE_CHECKING:
    from portal.vacations.models import VacationSchedule


# ═════════════════════════════════════════════════════════════════════
# Department
# ═════════════════════════════════════════════════════════════════════


class Department(Base):
    """Organisational department."""

    __tablename__ = "departments"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(sa.String(150), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(sa.Text)
    is_active: Mapped[bool] = mapped_column(
        sa.Boolean, server_default=sa.text("TRUE"),
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), server_default=sa.func.now(),
    )

    # ── Relationships ───────────────────────────────────────────────
    employees: Mapped[list[Employee]] = relationship(
        back_populates="department",
    )

    def __repr__(self) -> str:
        return f"<Department {self.name!r}>"


# ═════════════════════════════════════════════════════════════════════
# Employee
# ═════════════════════════════════════════════════════════════════════


class Employee(Base):
    """Portal user record with the vacation counters the engine reads."""

    __tablename__ = "employees"

    # ── Primary key ─────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ── Identity ────────────────────────────────────────────────────
    first_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        sa.String(255), unique=True, nullable=False,
    )

    # ── Org hierarchy ───────────────────────────────────────────────
    department_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True), sa.ForeignKey("departments.id"),
    )
    supervisor_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True), sa.ForeignKey("employees.id"),
    )
    position: Mapped[Optional[str]] = mapped_column(sa.String(150))

    # ── Employment ──────────────────────────────────────────────────
    employment_start_date: Mapped[Optional[date]] = mapped_column(sa.Date)

    # ── Vacation counters ───────────────────────────────────────────
    annual_vacation_days: Mapped[int] = mapped_column(
        sa.Integer, nullable=False, server_default=sa.text("26"),
    )
    vacation_days_used: Mapped[int] = mapped_column(
        sa.Integer, nullable=False, server_default=sa.text("0"),
    )
    on_demand_vacation_days_used: Mapped[int] = mapped_column(
        sa.Integer, nullable=False, server_default=sa.text("0"),
    )
    circumstantial_leave_days_used: Mapped[int] = mapped_column(
        sa.Integer, nullable=False, server_default=sa.text("0"),
    )
    carried_over_vacation_days: Mapped[int] = mapped_column(
        sa.Integer, nullable=False, server_default=sa.text("0"),
    )
    carried_over_expiry_date: Mapped[Optional[date]] = mapped_column(sa.Date)

    # ── Status / Timestamps ─────────────────────────────────────────
    is_active: Mapped[bool] = mapped_column(
        sa.Boolean, server_default=sa.text("TRUE"),
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), server_default=sa.func.now(),
    )

    # ── Relationships ───────────────────────────────────────────────
    department: Mapped[Optional[Department]] = relationship(
        back_populates="employees",
    )
    supervisor: Mapped[Optional[Employee]] = relationship(
        remote_side=[id], foreign_keys=[supervisor_id],
    )
    vacation_schedules: Mapped[list[VacationSchedule]] = relationship(
        back_populates="employee",
    )

    def __repr__(self) -> str:
        return f"<Employee {self.email} {self.first_name} {self.last_name}>"
