"""Text blocks placed above report tables: title header and statistics sections."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from config.report_layout import (
    SECTION_HEADING_GAP,
    STAT_LINE_GAP,
    SUBTITLE_LINE_GAP,
    TABLE_HEADING_GAP,
    TITLE_GAP,
    TITLE_RULE_GAP,
    TITLE_RULE_WIDTH,
)
from config.report_style import (
    PRINT_COLORS,
    SECTION_FONT_SIZE,
    STAT_FONT_SIZE,
    SUBTITLE_FONT_SIZE,
    TITLE_FONT_SIZE,
)

from .draw_commands import DrawCommand, DrawText, FontSpec, StrokeLine
from .table_layout import PageCursor, PageGeometry

GENERATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


def title_block(
    title: str,
    employee_count: int,
    generated_at: datetime,
    cursor: PageCursor,
    page: PageGeometry,
) -> tuple[list[DrawCommand], PageCursor]:
    """Report title, generation time, employee count and an accent rule."""
    left = page.margin
    subtitle_font = FontSpec(size=SUBTITLE_FONT_SIZE)

    commands: list[DrawCommand] = [
        DrawText(left, cursor.y, title, FontSpec(size=TITLE_FONT_SIZE, bold=True), PRINT_COLORS["accent"])
    ]
    cursor = cursor.advance(TITLE_GAP)

    commands.append(
        DrawText(
            left,
            cursor.y,
            f"Generated on: {generated_at.strftime(GENERATED_AT_FORMAT)}",
            subtitle_font,
            PRINT_COLORS["text_muted"],
        )
    )
    cursor = cursor.advance(SUBTITLE_LINE_GAP)

    commands.append(
        DrawText(left, cursor.y, f"Total Employees: {employee_count}", subtitle_font, PRINT_COLORS["text_muted"])
    )
    cursor = cursor.advance(SUBTITLE_LINE_GAP)

    commands.append(
        StrokeLine(left, cursor.y, page.width - page.margin, cursor.y, TITLE_RULE_WIDTH, PRINT_COLORS["accent"])
    )
    return commands, cursor.advance(TITLE_RULE_GAP)


def stats_section(
    heading: str,
    lines: Sequence[str],
    cursor: PageCursor,
    page: PageGeometry,
) -> tuple[list[DrawCommand], PageCursor]:
    """Section heading followed by one text line per statistic."""
    commands: list[DrawCommand] = [
        DrawText(page.margin, cursor.y, heading, FontSpec(size=SECTION_FONT_SIZE, bold=True), PRINT_COLORS["accent"])
    ]
    cursor = cursor.advance(SECTION_HEADING_GAP)

    body_font = FontSpec(size=STAT_FONT_SIZE)
    for line in lines:
        commands.append(DrawText(page.margin, cursor.y, line, body_font, PRINT_COLORS["text"]))
        cursor = cursor.advance(STAT_LINE_GAP)
    return commands, cursor


def table_heading(text: str, cursor: PageCursor, page: PageGeometry) -> tuple[list[DrawCommand], PageCursor]:
    command = DrawText(page.margin, cursor.y, text, FontSpec(size=SECTION_FONT_SIZE, bold=True), PRINT_COLORS["text"])
    return [command], cursor.advance(TABLE_HEADING_GAP)
