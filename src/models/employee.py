"""Employee record model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Employee:
    """One row of employee data, as loaded from sample data or CSV."""

    employee_id: int
    first_name: str
    last_name: str
    email: str
    department: str
    position: str
    salary: float
    hire_date: date
    phone: str
    address: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# Column order of the delimited text format
EMPLOYEE_FIELDS = (
    "employee_id",
    "first_name",
    "last_name",
    "email",
    "department",
    "position",
    "salary",
    "hire_date",
    "phone",
    "address",
)
