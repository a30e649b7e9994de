"""In-memory employee record set with the queries reports need."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from models import EMPLOYEE_FIELDS, Employee
from processing import load_employees_csv, sample_employees

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    """Holds the current employee list (sample data until a CSV is loaded)."""

    def __init__(self, employees: Optional[Iterable[Employee]] = None) -> None:
        self._employees: list[Employee] = list(employees) if employees is not None else sample_employees()

    @property
    def count(self) -> int:
        return len(self._employees)

    def all(self) -> list[Employee]:
        return list(self._employees)

    def load_csv(self, path: Union[str, Path]) -> int:
        """Replace the records with the contents of ``path``.

        The current records are kept when loading fails.
        """
        employees = load_employees_csv(path)
        previous = len(self._employees)
        self._employees = employees
        logger.info(
            f"Replaced {previous} employees with {len(employees)} from {path}",
            extra={"event": "directory_reloaded", "file": str(path)},
        )
        return len(employees)

    def reset_to_sample(self) -> None:
        self._employees = sample_employees()

    def by_department(self, department: str) -> list[Employee]:
        wanted = department.casefold()
        return [emp for emp in self._employees if emp.department.casefold() == wanted]

    def high_earners(self, threshold: float) -> list[Employee]:
        return [emp for emp in self._employees if emp.salary > threshold]

    def hired_in_year(self, year: int) -> list[Employee]:
        return [emp for emp in self._employees if emp.hire_date.year == year]

    def departments(self) -> list[str]:
        """Distinct department names, sorted.

        Names that differ only in case are one department, listed under the
        first spelling seen, matching ``by_department``.
        """
        names: dict[str, str] = {}
        for emp in self._employees:
            names.setdefault(emp.department.casefold(), emp.department)
        return [names[key] for key in sorted(names)]

    def average_salary(self) -> float:
        if not self._employees:
            return 0.0
        return float(self.to_frame()["salary"].mean())

    def to_frame(self) -> pd.DataFrame:
        return employees_frame(self._employees)


def employees_frame(employees: Iterable[Employee]) -> pd.DataFrame:
    """Build a DataFrame with one column per employee field."""
    records = [asdict(emp) for emp in employees]
    frame = pd.DataFrame(records, columns=list(EMPLOYEE_FIELDS))
    frame["salary"] = frame["salary"].astype(float)
    return frame
