"""Aggregate statistics shown in report summary sections and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

import numpy as np

from models import Employee
from services.employee_directory import employees_frame

# Lower bounds of the upper salary bands
SALARY_BAND_EDGES = (60000, 80000)
SALARY_BAND_LABELS = ("Under $60,000", "$60,000 - $80,000", "Over $80,000")


@dataclass(frozen=True)
class SummaryStats:
    count: int
    average_salary: float
    min_salary: float
    max_salary: float
    department_count: int
    latest_hire: Optional[date]


@dataclass(frozen=True)
class DepartmentStats:
    department: str
    count: int
    average_salary: float
    unique_positions: int


@dataclass(frozen=True)
class SalaryAnalysis:
    average_salary: float
    above_average: int
    below_average: int
    highest_paid: str


def average_salary(employees: Sequence[Employee]) -> float:
    if not employees:
        return 0.0
    return float(employees_frame(employees)["salary"].mean())


def summary_stats(employees: Sequence[Employee]) -> SummaryStats:
    if not employees:
        return SummaryStats(0, 0.0, 0.0, 0.0, 0, None)

    frame = employees_frame(employees)
    salaries = frame["salary"]
    return SummaryStats(
        count=len(frame),
        average_salary=float(salaries.mean()),
        min_salary=float(salaries.min()),
        max_salary=float(salaries.max()),
        department_count=int(frame["department"].str.casefold().nunique()),
        latest_hire=max(frame["hire_date"]),
    )


def department_stats(employees: Sequence[Employee], department: str) -> DepartmentStats:
    if not employees:
        return DepartmentStats(department, 0, 0.0, 0)

    frame = employees_frame(employees)
    return DepartmentStats(
        department=department,
        count=len(frame),
        average_salary=float(frame["salary"].mean()),
        unique_positions=int(frame["position"].nunique()),
    )


def salary_analysis(employees: Sequence[Employee]) -> SalaryAnalysis:
    if not employees:
        return SalaryAnalysis(0.0, 0, 0, "N/A")

    frame = employees_frame(employees)
    salaries = frame["salary"]
    mean = float(salaries.mean())
    top = employees[int(salaries.to_numpy().argmax())]
    return SalaryAnalysis(
        average_salary=mean,
        above_average=int((salaries > mean).sum()),
        below_average=int((salaries < mean).sum()),
        highest_paid=top.full_name,
    )


def above_average_earners(employees: Sequence[Employee]) -> list[Employee]:
    """Employees paid strictly more than the average, highest salary first."""
    mean = average_salary(employees)
    earners = [emp for emp in employees if emp.salary > mean]
    return sorted(earners, key=lambda emp: emp.salary, reverse=True)


def department_breakdown(employees: Sequence[Employee]) -> dict[str, int]:
    """Employee count per department (case-insensitive), ordered by department name."""
    if not employees:
        return {}
    frame = employees_frame(employees)
    keys = frame["department"].str.casefold().rename("department_key")
    grouped = frame.groupby(keys, sort=True)["department"]
    return {str(name): int(count) for name, count in zip(grouped.first(), grouped.size())}


def salary_distribution(employees: Sequence[Employee]) -> list[tuple[str, int]]:
    salaries = np.array([emp.salary for emp in employees], dtype=float)
    bands = np.digitize(salaries, SALARY_BAND_EDGES)
    counts = np.bincount(bands, minlength=len(SALARY_BAND_LABELS))
    return [(label, int(count)) for label, count in zip(SALARY_BAND_LABELS, counts)]


def format_money(value: float, decimals: int = 0) -> str:
    return f"${value:,.{decimals}f}"


def summary_lines(stats: SummaryStats) -> list[str]:
    latest = stats.latest_hire.isoformat() if stats.latest_hire else "N/A"
    return [
        f"Average Salary: {format_money(stats.average_salary, 2)}",
        f"Salary Range: {format_money(stats.min_salary)} - {format_money(stats.max_salary)}",
        f"Departments: {stats.department_count}",
        f"Latest Hire: {latest}",
    ]


def department_lines(stats: DepartmentStats) -> list[str]:
    return [
        f"Department: {stats.department}",
        f"Employee Count: {stats.count}",
        f"Average Salary: {format_money(stats.average_salary, 2)}",
        f"Unique Positions: {stats.unique_positions}",
    ]


def salary_lines(analysis: SalaryAnalysis) -> list[str]:
    return [
        f"Average Salary: {format_money(analysis.average_salary, 2)}",
        f"Above Average: {analysis.above_average} employees",
        f"Below Average: {analysis.below_average} employees",
        f"Highest Paid: {analysis.highest_paid}",
    ]
