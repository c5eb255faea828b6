"""Core HR module — Employee and Department read models."""

from portal.core_hr.models import Department, Employee

__all__ = ["Employee", "Department"]
