"""Tests for the in-memory employee directory."""

from dataclasses import replace

import pytest

from processing import DataLoadError
from services.employee_directory import EmployeeDirectory, employees_frame

VALID_ROW = "2001,Ada,Lovelace,ada@example.com,Engineering,Analyst,91000,2020-01-06,+1-555-0100,1 Byron Rd"


class TestQueries:
    """Queries over the built-in sample data."""

    @pytest.fixture
    def directory(self):
        return EmployeeDirectory()

    def test_starts_with_sample_data(self, directory):
        assert directory.count == 10

    def test_by_department_ignores_case(self, directory):
        matches = directory.by_department("engineering")
        assert [emp.employee_id for emp in matches] == [1001, 1005, 1007]

    def test_unknown_department(self, directory):
        assert directory.by_department("Legal") == []

    def test_high_earners_strictly_above(self, directory):
        earners = directory.high_earners(72000)
        assert sorted(emp.salary for emp in earners) == [75000, 78000, 85000]

    def test_hired_in_year(self, directory):
        assert [emp.employee_id for emp in directory.hired_in_year(2023)] == [1003, 1006, 1008]

    def test_departments_sorted_distinct(self, directory):
        assert directory.departments() == ["Engineering", "Finance", "HR", "Marketing", "Sales"]

    def test_average_salary(self, directory):
        assert directory.average_salary() == pytest.approx(67500.0)

    def test_all_returns_copy(self, directory):
        directory.all().clear()
        assert directory.count == 10

    def test_frame_columns(self, directory):
        frame = directory.to_frame()
        assert len(frame) == 10
        assert "hire_date" in frame.columns
        assert frame["salary"].dtype == float


class TestEmptyDirectory:
    def test_empty_queries(self):
        directory = EmployeeDirectory([])

        assert directory.count == 0
        assert directory.departments() == []
        assert directory.average_salary() == 0.0
        assert len(employees_frame([])) == 0


class TestReload:
    def test_load_replaces_records(self, write_csv):
        directory = EmployeeDirectory()
        count = directory.load_csv(write_csv(VALID_ROW))

        assert count == 1
        assert directory.departments() == ["Engineering"]

    def test_failed_load_keeps_current_records(self, write_csv):
        directory = EmployeeDirectory()
        bad = write_csv(VALID_ROW, "2002,B,C,d@e.com,Ops,Lead,n/a,2020-01-01,p,a")

        with pytest.raises(DataLoadError):
            directory.load_csv(bad)
        assert directory.count == 10

    def test_missing_file_keeps_current_records(self, tmp_path):
        directory = EmployeeDirectory()

        with pytest.raises(FileNotFoundError):
            directory.load_csv(tmp_path / "nope.csv")
        assert directory.count == 10

    def test_reset_to_sample(self, write_csv):
        directory = EmployeeDirectory()
        directory.load_csv(write_csv(VALID_ROW))
        directory.reset_to_sample()

        assert directory.count == 10


class TestDepartmentCase:
    """Department names that differ only in case are one department."""

    @pytest.fixture
    def directory(self, employees):
        mixed = [
            replace(employees[0], employee_id=3001, department="IT"),
            replace(employees[1], employee_id=3002, department="it"),
            replace(employees[2], employee_id=3003, department="Finance"),
        ]
        return EmployeeDirectory(mixed)

    def test_listed_once_under_first_spelling(self, directory):
        assert directory.departments() == ["Finance", "IT"]

    def test_every_member_reported(self, directory):
        for department in directory.departments():
            assert len(directory.by_department(department)) == {"Finance": 1, "IT": 2}[department]
