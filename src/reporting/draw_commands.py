"""Backend-agnostic drawing instructions produced by the report layout code.

Coordinates are PDF points with the origin at the bottom-left of the page.
A renderer adapter (see ``qt_renderer``) turns them into real paint calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Union

from config.report_style import FONT_FAMILY


@dataclass(frozen=True)
class FontSpec:
    family: str = FONT_FAMILY
    size: float = 10
    bold: bool = False


@dataclass(frozen=True)
class FillRect:
    """Filled rectangle; (x, y) is the bottom-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class StrokeLine:
    x1: float
    y1: float
    x2: float
    y2: float
    line_width: float
    color: str


@dataclass(frozen=True)
class DrawText:
    """Single line of text; (x, y) is the left end of the baseline."""

    x: float
    y: float
    text: str
    font: FontSpec
    color: str


DrawCommand = Union[FillRect, StrokeLine, DrawText]


@dataclass
class PageBatch:
    """Draw commands for one page, in paint order."""

    page_index: int
    commands: List[DrawCommand] = field(default_factory=list)


def merge_page_batches(*groups: Iterable[PageBatch]) -> list[PageBatch]:
    """Combine batches from successive layout steps into one batch per page.

    Commands keep the order of ``groups``. Pages with no commands between
    the first and last page are kept as empty batches so the document page
    count stays contiguous.
    """
    by_page: dict[int, PageBatch] = {}
    for group in groups:
        for batch in group:
            target = by_page.setdefault(batch.page_index, PageBatch(batch.page_index))
            target.commands.extend(batch.commands)

    if not by_page:
        return []

    last = max(by_page)
    return [by_page.get(index, PageBatch(index)) for index in range(last + 1)]
