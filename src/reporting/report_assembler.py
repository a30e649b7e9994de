"""Assemble complete employee reports and hand them to the PDF renderer."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence, Union

from config.report_layout import SECTION_GAP
from models import Employee
from services.employee_directory import EmployeeDirectory
from utils.error_handling import ErrorCollector
from utils.timing import PhaseTimer

from . import statistics
from .draw_commands import PageBatch, merge_page_batches
from .qt_renderer import QtPdfRenderer
from .report_blocks import stats_section, table_heading, title_block
from .table_layout import ColumnSpec, PageCursor, PageGeometry, TableLayoutEngine

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

EMPLOYEE_COLUMNS = (
    ColumnSpec("ID", 50),
    ColumnSpec("Name", 90),
    ColumnSpec("Department", 80),
    ColumnSpec("Position", 110),
    ColumnSpec("Salary", 70),
    ColumnSpec("Hire Date", 80),
)


class Renderer(Protocol):
    def render(self, pages: Sequence[PageBatch], output_path: Union[str, Path], title: str = "") -> Path:
        ...


def employee_row(employee: Employee) -> list[str]:
    """Project an employee onto the report table columns."""
    return [
        str(employee.employee_id),
        employee.full_name,
        employee.department,
        employee.position,
        f"${int(employee.salary):,}",
        employee.hire_date.isoformat(),
    ]


def department_file_label(department: str) -> str:
    return re.sub(r"\s+", "_", department.strip())


@dataclass
class BatchResult:
    generated: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    timings: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class ReportAssembler:
    """Build the full, department and salary reports.

    Each ``build_*`` method is pure and returns page batches; each
    ``generate_*`` method also writes the PDF and returns its path.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        page: PageGeometry = PageGeometry(),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.page = page
        self.renderer = renderer if renderer is not None else QtPdfRenderer(page)
        self.table_engine = TableLayoutEngine(EMPLOYEE_COLUMNS, page)
        self._clock = clock

    # ------------------------------------------------------------------
    # Page building
    # ------------------------------------------------------------------

    def _compose(
        self,
        title: str,
        employees: Sequence[Employee],
        generated_at: datetime,
        stats_heading: str,
        stats_lines: Sequence[str],
        table_rows: Sequence[Employee],
        heading: Optional[str] = None,
    ) -> list[PageBatch]:
        cursor = PageCursor.top_of_page(self.page)

        title_commands, cursor = title_block(title, len(employees), generated_at, cursor, self.page)
        cursor = cursor.advance(SECTION_GAP)

        stats_commands, cursor = stats_section(stats_heading, stats_lines, cursor, self.page)
        cursor = cursor.advance(SECTION_GAP)

        intro = PageBatch(cursor.page_index, title_commands + stats_commands)
        if heading:
            heading_commands, cursor = table_heading(heading, cursor, self.page)
            intro.commands.extend(heading_commands)

        table = self.table_engine.layout([employee_row(emp) for emp in table_rows], cursor)
        return merge_page_batches([intro], table.pages)

    def build_employee_report(self, employees: Sequence[Employee], generated_at: datetime) -> list[PageBatch]:
        lines = statistics.summary_lines(statistics.summary_stats(employees))
        return self._compose("Employee Report", employees, generated_at, "Summary Statistics", lines, employees)

    def build_department_report(
        self,
        employees: Sequence[Employee],
        department: str,
        generated_at: datetime,
    ) -> list[PageBatch]:
        lines = statistics.department_lines(statistics.department_stats(employees, department))
        return self._compose(
            f"{department} Department Report",
            employees,
            generated_at,
            "Department Statistics",
            lines,
            employees,
        )

    def build_salary_report(self, employees: Sequence[Employee], generated_at: datetime) -> list[PageBatch]:
        lines = statistics.salary_lines(statistics.salary_analysis(employees))
        return self._compose(
            "Salary Analysis Report",
            employees,
            generated_at,
            "Salary Analysis",
            lines,
            statistics.above_average_earners(employees),
            heading="Above Average Earners",
        )

    # ------------------------------------------------------------------
    # File output
    # ------------------------------------------------------------------

    def _write(self, pages: Sequence[PageBatch], output_dir: Union[str, Path], filename: str, title: str) -> Path:
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = self.renderer.render(pages, directory / filename, title=title)
        logger.info(
            f"{title} generated: {path}",
            extra={"event": "report_generated", "path": str(path), "pages": len(pages)},
        )
        return path

    def generate_employee_report(self, employees: Sequence[Employee], output_dir: Union[str, Path]) -> Path:
        now = self._clock()
        pages = self.build_employee_report(employees, now)
        filename = f"Employee_Report_{now.strftime(TIMESTAMP_FORMAT)}.pdf"
        return self._write(pages, output_dir, filename, "Employee Report")

    def generate_department_report(
        self,
        employees: Sequence[Employee],
        department: str,
        output_dir: Union[str, Path],
    ) -> Path:
        now = self._clock()
        pages = self.build_department_report(employees, department, now)
        filename = f"Department_Report_{department_file_label(department)}_{now.strftime(TIMESTAMP_FORMAT)}.pdf"
        return self._write(pages, output_dir, filename, f"{department} Department Report")

    def generate_salary_report(self, employees: Sequence[Employee], output_dir: Union[str, Path]) -> Path:
        now = self._clock()
        pages = self.build_salary_report(employees, now)
        filename = f"Salary_Analysis_{now.strftime(TIMESTAMP_FORMAT)}.pdf"
        return self._write(pages, output_dir, filename, "Salary Analysis Report")

    def generate_all(self, directory: EmployeeDirectory, output_dir: Union[str, Path]) -> BatchResult:
        """Full report, one report per department, then the salary report.

        A failing report is logged and recorded; the others still run.
        """
        collector = ErrorCollector("Batch report generation")
        timer = PhaseTimer({"output_dir": str(output_dir)})
        result = BatchResult()
        employees = directory.all()

        with collector.catch("Complete employee report"), timer.measure("employee_report"):
            result.generated.append(self.generate_employee_report(employees, output_dir))

        for department in directory.departments():
            with collector.catch(f"{department} department report"), \
                    timer.measure("department_report", {"department": department}):
                result.generated.append(
                    self.generate_department_report(directory.by_department(department), department, output_dir)
                )

        with collector.catch("Salary analysis report"), timer.measure("salary_report"):
            result.generated.append(self.generate_salary_report(employees, output_dir))

        result.errors = list(collector.errors)
        result.timings = timer.as_list()
        logger.info(
            collector.get_summary(),
            extra={"event": "batch_complete", "reports": len(result.generated), "seconds": round(timer.total(), 3)},
        )
        return result
