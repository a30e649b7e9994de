"""Pytest configuration and fixtures."""

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from processing import sample_employees
from reporting.table_layout import PageGeometry


CSV_HEADER = "id,firstName,lastName,email,department,position,salary,hireDate,phone,address"


# ---------------------------------------------------------------------------
# Qt
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def qt_app():
    """Provide a headless QGuiApplication for PDF rendering tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from reporting.qt_renderer import ensure_qt_app

    app = ensure_qt_app()
    yield app
    app.processEvents()


# ---------------------------------------------------------------------------
# Data Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def employees():
    """The ten built-in sample employees."""
    return sample_employees()


@pytest.fixture
def short_page() -> PageGeometry:
    """A page whose table body holds exactly five rows after the header."""
    return PageGeometry(width=595.28, height=300, margin=50)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 17, 9, 30, 15)


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write CSV rows (header added) to a temp file and return its path."""

    def _write(*lines: str, name: str = "employees.csv", header: bool = True) -> Path:
        path = tmp_path / name
        body = ([CSV_HEADER] if header else []) + list(lines)
        path.write_text("\n".join(body) + "\n", encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Renderer Fixtures
# ---------------------------------------------------------------------------

class RecordingRenderer:
    """Renderer double that records calls and writes a placeholder file."""

    def __init__(self, fail_when=None):
        self.calls = []
        self._fail_when = fail_when

    def render(self, pages, output_path, title=""):
        if self._fail_when is not None and self._fail_when(title):
            raise OSError(f"disk full while writing {title}")
        path = Path(output_path)
        path.write_bytes(b"%PDF-placeholder")
        self.calls.append({"pages": list(pages), "path": path, "title": title})
        return path


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def renderer_factory():
    return RecordingRenderer
