"""Interactive report generation menu."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from reporting import ReportAssembler, statistics
from services.employee_directory import EmployeeDirectory
from utils.error_handling import handle_report_error

MENU_TEXT = """
=== Report Generation Menu ===
1. Generate Complete Employee Report
2. Generate Department Report
3. Generate Salary Analysis Report
4. Generate All Reports (Batch)
5. View Employee Statistics
6. Load Custom CSV Data
7. Exit"""

EXIT_CHOICE = 7


class ReportMenu:
    """Numbered menu loop. Errors are reported and the loop keeps running."""

    def __init__(
        self,
        directory: EmployeeDirectory,
        assembler: ReportAssembler,
        output_dir: Path,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.directory = directory
        self.assembler = assembler
        self.output_dir = Path(output_dir)
        self._input = input_func
        self._out = output
        self._actions: dict[int, Callable[[], None]] = {
            1: self.generate_complete_report,
            2: self.generate_department_report,
            3: self.generate_salary_report,
            4: self.generate_batch_reports,
            5: self.view_statistics,
            6: self.load_custom_data,
        }

    def run(self) -> None:
        while True:
            self._out(MENU_TEXT)
            try:
                keep_going = self.handle_choice(self._input("\nEnter your choice (1-7): "))
            except EOFError:
                return
            if not keep_going:
                self._out("Thank you for using Employee PDF Report Generator!")
                return

    def handle_choice(self, raw: str) -> bool:
        """Run one menu action. Returns False when the user chose to exit."""
        try:
            choice = int(raw.strip())
        except ValueError:
            self._out("Invalid input. Please enter a valid number.")
            return True

        if choice == EXIT_CHOICE:
            return False

        action = self._actions.get(choice)
        if action is None:
            self._out("Invalid choice. Please enter a number between 1-7.")
            return True

        action()
        return True

    def generate_complete_report(self) -> None:
        self._out("\nGenerating complete employee report...")
        try:
            path = self.assembler.generate_employee_report(self.directory.all(), self.output_dir)
        except OSError as e:
            self._out(handle_report_error(e, "Error generating complete report"))
            return
        self._out(f"✓ Complete employee report generated successfully! ({path.name})")

    def generate_department_report(self) -> None:
        departments = self.directory.departments()
        if not departments:
            self._out("No departments available.")
            return

        self._out("\nAvailable Departments:")
        for number, name in enumerate(departments, start=1):
            self._out(f"{number}. {name}")

        try:
            index = int(self._input(f"Select department (1-{len(departments)}): ").strip()) - 1
        except ValueError:
            self._out("Invalid department selection.")
            return
        if not 0 <= index < len(departments):
            self._out("Invalid department selection.")
            return

        department = departments[index]
        self._out(f"Generating report for {department} department...")
        try:
            path = self.assembler.generate_department_report(
                self.directory.by_department(department), department, self.output_dir
            )
        except OSError as e:
            self._out(handle_report_error(e, "Error generating department report", department))
            return
        self._out(f"✓ Department report generated successfully! ({path.name})")

    def generate_salary_report(self) -> None:
        self._out("\nGenerating salary analysis report...")
        try:
            path = self.assembler.generate_salary_report(self.directory.all(), self.output_dir)
        except OSError as e:
            self._out(handle_report_error(e, "Error generating salary report"))
            return
        self._out(f"✓ Salary analysis report generated successfully! ({path.name})")

    def generate_batch_reports(self) -> None:
        self._out("\nGenerating all reports...")
        result = self.assembler.generate_all(self.directory, self.output_dir)
        for path in result.generated:
            self._out(f"✓ {path.name}")
        for error in result.errors:
            self._out(f"✗ {error}")

        if result.ok:
            self._out("")
            self._out("All reports generated successfully!")
        self._out(f"Total reports created: {len(result.generated)}")

    def view_statistics(self) -> None:
        employees = self.directory.all()

        self._out("\n=== Employee Statistics ===")
        self._out(f"Total Employees: {self.directory.count}")
        self._out(f"Average Salary: ${self.directory.average_salary():.2f}")
        self._out(f"Departments: {len(self.directory.departments())}")

        self._out("\nDepartment Breakdown:")
        for department, count in statistics.department_breakdown(employees).items():
            self._out(f"  {department}: {count} employees")

        self._out("\nSalary Distribution:")
        for label, count in statistics.salary_distribution(employees):
            self._out(f"  {label}: {count} employees")

    def load_custom_data(self) -> None:
        self._out("\nTo load custom data, place your CSV file in the project directory.")
        self._out("CSV format: id,firstName,lastName,email,department,position,salary,hireDate,phone,address")
        self._out("Date format: yyyy-MM-dd")
        filename = self._input("Enter CSV filename (or press Enter to skip): ").strip()
        if not filename:
            return

        try:
            count = self.directory.load_csv(filename)
        except OSError as e:
            self._out(handle_report_error(e, "Error loading CSV file", filename))
            self._out("Continuing with current data...")
            return
        self._out("✓ Custom data loaded successfully!")
        self._out(f"New employee count: {count}")
