"""Load employee records from comma-separated text.

Format: ``id,firstName,lastName,email,department,position,salary,hireDate,phone,address``
with one header row. Fields are split on every comma (no quoting). Dates
use ``YYYY-MM-DD``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from models import EMPLOYEE_FIELDS, Employee

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
INTEGER_PATTERN = r"[+-]?\d+"
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


class DataLoadError(OSError):
    """Raised when an employee file has a malformed field. Nothing is loaded."""


def read_employee_frame(path: Union[str, Path]) -> pd.DataFrame:
    """Read raw string fields into a DataFrame indexed by source line number.

    Rows with fewer than ten fields are skipped; fields past the tenth are
    ignored.
    """
    csv_path = Path(path)
    try:
        text = csv_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise DataLoadError(f"{csv_path.name} is not UTF-8 text (byte {e.start})") from e

    rows: list[list[str]] = []
    line_numbers: list[int] = []
    for line_number, line in enumerate(text.splitlines()[1:], start=2):
        if not line.strip():
            continue
        values = line.split(",")
        if len(values) < len(EMPLOYEE_FIELDS):
            logger.warning(
                f"Skipping line {line_number} of {csv_path.name}: expected {len(EMPLOYEE_FIELDS)} fields, got {len(values)}",
                extra={"event": "csv_row_skipped", "line": line_number, "file": str(csv_path)},
            )
            continue
        rows.append([value.strip() for value in values[: len(EMPLOYEE_FIELDS)]])
        line_numbers.append(line_number)

    return pd.DataFrame(
        rows,
        columns=list(EMPLOYEE_FIELDS),
        index=pd.Index(line_numbers, name="line"),
        dtype=str,
    )


def _first_bad(frame: pd.DataFrame, column: str, bad: pd.Series, label: str) -> DataLoadError:
    line = bad.idxmax()
    return DataLoadError(f"Invalid {label} {frame.at[line, column]!r} on line {line}")


def convert_employee_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Convert id, salary and hire date columns, failing on the first bad value."""
    converted = frame.copy()

    bad_ids = ~frame["employee_id"].str.fullmatch(INTEGER_PATTERN)
    if bad_ids.any():
        raise _first_bad(frame, "employee_id", bad_ids, "employee id")
    ids = frame["employee_id"].map(int)
    out_of_range = (ids < INT64_MIN) | (ids > INT64_MAX)
    if out_of_range.any():
        raise _first_bad(frame, "employee_id", out_of_range, "employee id")

    salaries = pd.to_numeric(frame["salary"], errors="coerce")
    bad_salaries = salaries.isna()
    if bad_salaries.any():
        raise _first_bad(frame, "salary", bad_salaries, "salary")

    hire_dates = pd.to_datetime(frame["hire_date"], format=DATE_FORMAT, errors="coerce")
    bad_dates = hire_dates.isna()
    if bad_dates.any():
        raise _first_bad(frame, "hire_date", bad_dates, "hire date")

    converted["employee_id"] = ids.astype("int64")
    converted["salary"] = salaries.astype(float)
    converted["hire_date"] = hire_dates
    return converted


def load_employees_csv(path: Union[str, Path]) -> list[Employee]:
    """Parse a CSV file into employees.

    Raises:
        FileNotFoundError: the file does not exist
        DataLoadError: the file is not UTF-8 text, or an id, salary or date field is malformed
    """
    frame = convert_employee_frame(read_employee_frame(path))

    employees = [
        Employee(
            employee_id=int(row.employee_id),
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            department=row.department,
            position=row.position,
            salary=float(row.salary),
            hire_date=row.hire_date.date(),
            phone=row.phone,
            address=row.address,
        )
        for row in frame.itertuples(index=False)
    ]
    logger.info(
        f"Loaded {len(employees)} employees from {path}",
        extra={"event": "csv_loaded", "file": str(path), "count": len(employees)},
    )
    return employees
