"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import os

import pytest

from ghosttext.editor.context import CursorContext

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qt_app():
    """Provide a shared QApplication instance, skipping when Qt cannot load."""

    qtwidgets = pytest.importorskip("PySide6.QtWidgets")
    return qtwidgets.QApplication.instance() or qtwidgets.QApplication([])


@pytest.fixture
def make_context():
    """Build a context from buffer text with the cursor at ``line``/``column``.

    A negative column counts back from the end of the line.
    """

    def _make(text: str = "", line: int = 0, column: int | None = None, language_id: str | None = None):
        lines = text.split("\n")
        if column is None:
            column = len(lines[line])
        elif column < 0:
            column = len(lines[line]) + column
        return CursorContext.from_text(text, line, column, language_id)

    return _make
