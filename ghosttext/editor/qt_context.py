"""Build a :class:`CursorContext` from a Qt text document."""
from __future__ import annotations

from dataclasses import replace

from PySide6.QtGui import QTextCursor, QTextDocument
from PySide6.QtWidgets import QPlainTextEdit

from ghosttext.editor.context import DEFAULT_LOOKAHEAD, CursorContext


def cursor_context_from_document(
    document: QTextDocument,
    cursor: QTextCursor,
    language_id: str | None = None,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> CursorContext:
    """Snapshot the cursor block, everything before it, and the next ``lookahead`` blocks."""

    block = cursor.block()
    line = block.blockNumber()
    lines = [document.findBlockByNumber(index).text() for index in range(line + 1)]
    following = block.next()
    while following.isValid() and len(lines) <= line + lookahead:
        lines.append(following.text())
        following = following.next()

    context = CursorContext.from_lines(lines, line, cursor.positionInBlock(), language_id, lookahead)
    # Only a window of the buffer was copied; report the real size.
    return replace(context, total_line_count=document.blockCount())


def cursor_context_from_editor(
    editor: QPlainTextEdit,
    language_id: str | None = None,
    lookahead: int = DEFAULT_LOOKAHEAD,
) -> CursorContext:
    return cursor_context_from_document(editor.document(), editor.textCursor(), language_id, lookahead)
