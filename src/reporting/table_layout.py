"""Table layout and pagination engine.

Lays an ordered list of row records into a fixed-width grid: a styled
header band, striped row bands with dividers and per-page outer borders
with column separators. The engine is pure. It returns draw commands
grouped per page and never touches a document.

The vertical position is carried in a ``PageCursor`` value that each step
receives and returns, so one engine instance can lay out any number of
tables without sharing state between them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence

from config.report_layout import (
    A4_HEIGHT_PT,
    A4_WIDTH_PT,
    AVERAGE_CHAR_WIDTH,
    COLUMN_SEPARATOR_WIDTH,
    HEADER_RULE_WIDTH,
    HEADER_TEXT_BASELINE,
    OUTER_BORDER_WIDTH,
    PAGE_MARGIN,
    PAGE_SAFETY_MARGIN,
    ROW_DIVIDER_WIDTH,
    ROW_TEXT_BASELINE,
    TABLE_CELL_PADDING,
    TABLE_HEADER_HEIGHT,
    TABLE_ROW_HEIGHT,
)
from config.report_style import PRINT_COLORS, TABLE_BODY_FONT_SIZE, TABLE_HEADER_FONT_SIZE
from utils.error_handling import timed

from .draw_commands import DrawCommand, DrawText, FillRect, FontSpec, PageBatch, StrokeLine

logger = logging.getLogger(__name__)

ELLIPSIS = "..."

RowRecord = Sequence[str]


class LayoutError(ValueError):
    """Base class for caller-input errors detected before layout starts."""


class RowShapeMismatch(LayoutError):
    """A row's cell count differs from the column count."""


class InvalidColumnSpec(LayoutError):
    """Columns are missing, non-positive or wider than the printable area."""


class InvalidPageGeometry(LayoutError):
    """Page dimensions leave no room for a table."""


@dataclass(frozen=True)
class PageGeometry:
    width: float = A4_WIDTH_PT
    height: float = A4_HEIGHT_PT
    margin: float = PAGE_MARGIN

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        """Cursor position at the top of a fresh page."""
        return self.height - self.margin


@dataclass(frozen=True)
class TableGeometry:
    header_height: float = TABLE_HEADER_HEIGHT
    row_height: float = TABLE_ROW_HEIGHT
    cell_padding: float = TABLE_CELL_PADDING
    average_char_width: float = AVERAGE_CHAR_WIDTH
    header_baseline: float = HEADER_TEXT_BASELINE
    row_baseline: float = ROW_TEXT_BASELINE
    safety_margin: float = PAGE_SAFETY_MARGIN
    header_rule_width: float = HEADER_RULE_WIDTH
    divider_width: float = ROW_DIVIDER_WIDTH
    border_width: float = OUTER_BORDER_WIDTH
    separator_width: float = COLUMN_SEPARATOR_WIDTH
    header_font: FontSpec = FontSpec(size=TABLE_HEADER_FONT_SIZE, bold=True)
    body_font: FontSpec = FontSpec(size=TABLE_BODY_FONT_SIZE)

    def char_budget(self, column_width: float) -> int:
        """Number of characters that fit in a column of the given width."""
        usable = column_width - 2 * self.cell_padding
        return max(0, math.floor(usable / self.average_char_width))


DEFAULT_TABLE_GEOMETRY = TableGeometry()


@dataclass(frozen=True)
class ColumnSpec:
    header: str
    width: float

    def max_chars(self, geometry: TableGeometry = DEFAULT_TABLE_GEOMETRY) -> int:
        return geometry.char_budget(self.width)


@dataclass(frozen=True)
class PageCursor:
    """Position of the next thing to draw: page index and baseline y."""

    page_index: int
    y: float
    margin: float

    @classmethod
    def top_of_page(cls, page: PageGeometry, page_index: int = 0) -> "PageCursor":
        return cls(page_index=page_index, y=page.top, margin=page.margin)

    @property
    def remaining(self) -> float:
        return self.y - self.margin

    def advance(self, amount: float) -> "PageCursor":
        return replace(self, y=self.y - amount)

    def next_page(self, page: PageGeometry) -> "PageCursor":
        return PageCursor.top_of_page(page, self.page_index + 1)


@dataclass(frozen=True)
class PlacedRow:
    record_index: int
    page_index: int
    row_on_page: int
    top: float
    striped: bool
    cells: tuple[str, ...]


@dataclass(frozen=True)
class TableSegment:
    """Vertical extent of the table on one page."""

    page_index: int
    top: float
    bottom: float


@dataclass
class TableLayout:
    pages: List[PageBatch]
    cursor: PageCursor
    table_width: float
    rows: List[PlacedRow] = field(default_factory=list)
    segments: List[TableSegment] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def commands(self) -> list[DrawCommand]:
        return [command for batch in self.pages for command in batch.commands]


def truncate_cell(text: str, budget: int) -> str:
    """Cut ``text`` to ``budget`` characters, ending with an ellipsis when cut."""
    if len(text) <= budget:
        return text
    return text[: max(budget - len(ELLIPSIS), 0)] + ELLIPSIS


class TableLayoutEngine:
    """Lay out bordered, striped tables with a fixed column set."""

    def __init__(
        self,
        columns: Sequence[ColumnSpec],
        page: PageGeometry = PageGeometry(),
        geometry: TableGeometry = DEFAULT_TABLE_GEOMETRY,
        origin_x: Optional[float] = None,
    ) -> None:
        self.columns = tuple(columns)
        self.page = page
        self.geometry = geometry
        self._validate_page()
        self._validate_columns()
        self.origin_x = page.margin if origin_x is None else origin_x
        self.table_width = sum(column.width for column in self.columns)
        self._budgets = tuple(column.max_chars(geometry) for column in self.columns)

    def _validate_page(self) -> None:
        page, g = self.page, self.geometry
        if page.height <= 0 or page.width <= 0:
            raise InvalidPageGeometry(f"Page size must be positive, got {page.width}x{page.height}")
        if page.margin < 0:
            raise InvalidPageGeometry(f"Page margin must not be negative, got {page.margin}")
        if page.printable_width <= 0:
            raise InvalidPageGeometry("Page margins leave no printable width")
        needed = g.header_height + g.row_height + g.safety_margin
        if page.height - 2 * page.margin < needed:
            raise InvalidPageGeometry(
                f"Printable height {page.height - 2 * page.margin} cannot hold a header and one row ({needed})"
            )

    def _validate_columns(self) -> None:
        if not self.columns:
            raise InvalidColumnSpec("At least one column is required")
        for column in self.columns:
            if column.width <= 0:
                raise InvalidColumnSpec(f"Column {column.header!r} has non-positive width {column.width}")
        total = sum(column.width for column in self.columns)
        if total > self.page.printable_width:
            raise InvalidColumnSpec(
                f"Columns are {total} wide but the printable width is {self.page.printable_width}"
            )

    def _validate_rows(self, rows: Sequence[RowRecord]) -> None:
        expected = len(self.columns)
        for index, row in enumerate(rows):
            if len(row) != expected:
                raise RowShapeMismatch(f"Row {index} has {len(row)} cells, expected {expected}")

    @timed
    def layout(self, rows: Iterable[RowRecord], cursor: Optional[PageCursor] = None) -> TableLayout:
        """Lay out ``rows`` starting at ``cursor`` (top of page 0 by default).

        Raises a ``LayoutError`` subclass before producing any command when
        the input is malformed.
        """
        records = [[str(cell) for cell in row] for row in rows]
        self._validate_rows(records)

        g = self.geometry
        if cursor is None:
            cursor = PageCursor.top_of_page(self.page)

        # The header must fit, and must not sit alone at the bottom of a page
        needed = g.header_height + (g.row_height + g.safety_margin if records else 0)
        if cursor.remaining < needed:
            cursor = cursor.next_page(self.page)

        pages: list[PageBatch] = []
        placed: list[PlacedRow] = []
        segments: list[TableSegment] = []

        segment_top = cursor.y
        commands, cursor = self._header_band(cursor)
        batch = PageBatch(cursor.page_index, commands)
        row_on_page = 0

        for record_index, record in enumerate(records):
            if cursor.remaining < g.row_height + g.safety_margin:
                batch.commands.extend(self._segment_borders(segment_top, cursor.y))
                segments.append(TableSegment(cursor.page_index, segment_top, cursor.y))
                pages.append(batch)

                cursor = cursor.next_page(self.page)
                segment_top = cursor.y
                commands, cursor = self._header_band(cursor)
                batch = PageBatch(cursor.page_index, commands)
                row_on_page = 0

            cells = tuple(truncate_cell(text, budget) for text, budget in zip(record, self._budgets))
            striped = row_on_page % 2 == 1
            batch.commands.extend(self._row_band(cursor.y, cells, striped))
            placed.append(PlacedRow(record_index, cursor.page_index, row_on_page, cursor.y, striped, cells))

            cursor = cursor.advance(g.row_height)
            row_on_page += 1

        batch.commands.extend(self._segment_borders(segment_top, cursor.y))
        segments.append(TableSegment(cursor.page_index, segment_top, cursor.y))
        pages.append(batch)

        logger.debug(
            f"Laid out {len(records)} rows on {len(pages)} page(s)",
            extra={"event": "table_layout", "rows": len(records), "pages": len(pages)},
        )
        return TableLayout(
            pages=pages,
            cursor=cursor,
            table_width=self.table_width,
            rows=placed,
            segments=segments,
        )

    def _header_band(self, cursor: PageCursor) -> tuple[list[DrawCommand], PageCursor]:
        g = self.geometry
        x, width = self.origin_x, self.table_width
        bottom = cursor.y - g.header_height

        commands: list[DrawCommand] = [FillRect(x, bottom, width, g.header_height, PRINT_COLORS["header_bg"])]
        column_x = x
        for column in self.columns:
            commands.append(
                DrawText(
                    column_x + g.cell_padding,
                    cursor.y - g.header_baseline,
                    column.header,
                    g.header_font,
                    PRINT_COLORS["header_text"],
                )
            )
            column_x += column.width
        commands.append(StrokeLine(x, bottom, x + width, bottom, g.header_rule_width, PRINT_COLORS["header_rule"]))
        return commands, cursor.advance(g.header_height)

    def _row_band(self, top: float, cells: Sequence[str], striped: bool) -> list[DrawCommand]:
        g = self.geometry
        x, width = self.origin_x, self.table_width
        bottom = top - g.row_height

        commands: list[DrawCommand] = []
        if striped:
            commands.append(FillRect(x, bottom, width, g.row_height, PRINT_COLORS["row_alt"]))

        column_x = x
        for column, text in zip(self.columns, cells):
            commands.append(
                DrawText(column_x + g.cell_padding, top - g.row_baseline, text, g.body_font, PRINT_COLORS["text"])
            )
            column_x += column.width

        commands.append(StrokeLine(x, bottom, x + width, bottom, g.divider_width, PRINT_COLORS["divider"]))
        return commands

    def _segment_borders(self, top: float, bottom: float) -> list[DrawCommand]:
        g = self.geometry
        left, right = self.origin_x, self.origin_x + self.table_width
        border = PRINT_COLORS["border"]

        commands: list[DrawCommand] = [
            StrokeLine(left, top, right, top, g.border_width, border),
            StrokeLine(left, bottom, right, bottom, g.border_width, border),
            StrokeLine(left, top, left, bottom, g.border_width, border),
            StrokeLine(right, top, right, bottom, g.border_width, border),
        ]

        column_x = left
        for column in self.columns[:-1]:
            column_x += column.width
            commands.append(StrokeLine(column_x, top, column_x, bottom, g.separator_width, PRINT_COLORS["separator"]))
        return commands
