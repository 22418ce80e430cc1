"""Inline ghost-text completions for a plain text editor."""
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QTimer, Qt
from PySide6.QtGui import QColor, QKeyEvent, QPainter
from PySide6.QtWidgets import QPlainTextEdit

from ghosttext.core.config import ConfigManager
from ghosttext.core.logging import configure_logging
from ghosttext.editor.qt_context import cursor_context_from_editor
from ghosttext.formatter import CompletionFormatter, should_skip_completion

logger = logging.getLogger(__name__)

CompletionProvider = Callable[[str], str]

PROMPT_PREFIX_CHARS = 500


class InlineCompletionController(QObject):
    def __init__(
        self,
        editor: QPlainTextEdit,
        config: ConfigManager | None,
        provider: CompletionProvider,
        language_id: str | None = None,
    ) -> None:
        super().__init__(editor)
        if config:
            configure_logging(config.log_level())
        self.editor = editor
        self.config = config
        self.provider = provider
        self.language_id = language_id
        self.formatter = CompletionFormatter(config.completion_settings() if config else None)
        self.ghost_text = ""
        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.setInterval(config.inline_delay_ms() if config else 600)
        self.timer.timeout.connect(self.request_completion)
        self.editor.textChanged.connect(self._arm_timer)

    def _arm_timer(self) -> None:
        self.ghost_text = ""
        self.editor.viewport().update()
        if self.config and not self.config.inline_enabled():
            return
        self.timer.start()

    def request_completion(self) -> None:
        context = cursor_context_from_editor(
            self.editor, self.language_id, self.formatter.settings.duplicate_line_lookahead
        )
        if should_skip_completion(context):
            logger.debug(f"Skipping completion at {context.line}:{context.column}")
            return
        cursor = self.editor.textCursor()
        prefix = self.editor.toPlainText()[: cursor.position()]
        raw = self.provider(prefix[-PROMPT_PREFIX_CHARS:])
        if not raw:
            return
        self.ghost_text = self.formatter.format(raw, context)
        self.editor.viewport().update()

    def handle_key(self, event: QKeyEvent) -> bool:
        if self.ghost_text:
            if event.key() == Qt.Key_Tab:
                text = self.ghost_text
                self.ghost_text = ""
                self.editor.insertPlainText(text)
                self.timer.stop()
                return True
            if event.key() == Qt.Key_Escape:
                self.ghost_text = ""
                self.editor.viewport().update()
                return False
        return False

    def paint_hint(self) -> None:
        if not self.ghost_text:
            return
        painter = QPainter(self.editor.viewport())
        painter.setPen(QColor(150, 150, 150, 160))
        rect = self.editor.cursorRect()
        painter.drawText(rect.topLeft(), self.ghost_text)
        painter.end()
