"""Domain models."""

from .employee import EMPLOYEE_FIELDS, Employee

__all__ = ["EMPLOYEE_FIELDS", "Employee"]
