"""Reporting package for PDF report generation.

This package provides components for generating employee PDF reports:
- TableLayoutEngine: paginated, bordered, striped table layout as draw commands
- report_blocks: title header and statistics sections
- statistics: salary and department aggregates
- ReportAssembler: full, department, salary and batch report generation
- QtPdfRenderer: QPdfWriter-based PDF output
"""

from .report_assembler import EMPLOYEE_COLUMNS, BatchResult, ReportAssembler, employee_row
from .qt_renderer import QtPdfRenderer, ReportWriteError
from .table_layout import (
    ColumnSpec,
    InvalidColumnSpec,
    InvalidPageGeometry,
    LayoutError,
    PageCursor,
    PageGeometry,
    RowShapeMismatch,
    TableGeometry,
    TableLayout,
    TableLayoutEngine,
    truncate_cell,
)

__all__ = [
    "EMPLOYEE_COLUMNS",
    "BatchResult",
    "ColumnSpec",
    "InvalidColumnSpec",
    "InvalidPageGeometry",
    "LayoutError",
    "PageCursor",
    "PageGeometry",
    "QtPdfRenderer",
    "ReportAssembler",
    "ReportWriteError",
    "RowShapeMismatch",
    "TableGeometry",
    "TableLayout",
    "TableLayoutEngine",
    "employee_row",
    "truncate_cell",
]
