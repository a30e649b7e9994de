"""PDF output using PyQt6's QPdfWriter.

Paints the page batches produced by the layout code. The writer runs at
72 dpi with zero page margins so one device unit is one PDF point; only
the y axis needs flipping (PDF is bottom-up, Qt is top-down).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence, Union

from PyQt6.QtCore import QMarginsF, QPointF, QRectF, QSizeF
from PyQt6.QtGui import (
    QColor,
    QFont,
    QGuiApplication,
    QPageLayout,
    QPageSize,
    QPainter,
    QPdfWriter,
    QPen,
)

from .draw_commands import DrawCommand, DrawText, FillRect, PageBatch, StrokeLine
from .table_layout import PageGeometry

logger = logging.getLogger(__name__)

PDF_RESOLUTION = 72


class ReportWriteError(OSError):
    """The PDF file could not be opened for writing."""


def ensure_qt_app() -> QGuiApplication:
    """Return the running Qt application, creating a headless one if needed."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([])
    return app


class QtPdfRenderer:
    """Render draw-command pages into a PDF file."""

    def __init__(self, page: PageGeometry = PageGeometry(), creator: str = "Employee PDF Reports") -> None:
        self.page = page
        self.creator = creator

    def render(self, pages: Sequence[PageBatch], output_path: Union[str, Path], title: str = "") -> Path:
        """Write ``pages`` to ``output_path`` and return the path."""
        ensure_qt_app()
        path = Path(output_path)

        writer = self._setup_writer(path, title)

        painter = QPainter()
        if not painter.begin(writer):
            raise ReportWriteError(f"Failed to open PDF for writing: {path}")

        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            for number, batch in enumerate(pages):
                if number > 0:
                    writer.newPage()
                for command in batch.commands:
                    self._paint(painter, command)
        finally:
            painter.end()

        logger.info(
            f"Wrote {len(pages)} page(s) to {path}",
            extra={"event": "pdf_written", "path": str(path), "pages": len(pages)},
        )
        return path

    def _setup_writer(self, path: Path, title: str) -> QPdfWriter:
        writer = QPdfWriter(str(path))
        writer.setResolution(PDF_RESOLUTION)
        writer.setPageSize(QPageSize(QSizeF(self.page.width, self.page.height), QPageSize.Unit.Point))
        writer.setPageOrientation(QPageLayout.Orientation.Portrait)
        writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Point)
        writer.setCreator(self.creator)
        if title:
            writer.setTitle(title)
        return writer

    def _flip(self, y: float) -> float:
        return self.page.height - y

    def _paint(self, painter: QPainter, command: DrawCommand) -> None:
        if isinstance(command, FillRect):
            rect = QRectF(command.x, self._flip(command.y + command.height), command.width, command.height)
            painter.fillRect(rect, QColor(command.color))
        elif isinstance(command, StrokeLine):
            painter.setPen(QPen(QColor(command.color), command.line_width))
            painter.drawLine(
                QPointF(command.x1, self._flip(command.y1)),
                QPointF(command.x2, self._flip(command.y2)),
            )
        elif isinstance(command, DrawText):
            font = QFont(command.font.family)
            font.setPointSizeF(command.font.size)
            font.setBold(command.font.bold)
            painter.setFont(font)
            painter.setPen(QColor(command.color))
            painter.drawText(QPointF(command.x, self._flip(command.y)), command.text)
        else:
            raise TypeError(f"Unsupported draw command: {type(command).__name__}")
