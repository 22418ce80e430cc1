"""Frozen snapshot of the buffer around the cursor."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

DEFAULT_LOOKAHEAD = 3
# Reported when nothing but whitespace precedes the cursor.
BLANK_PREFIX_MARKER = "="

_LINE_SPLIT = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class CursorContext:
    """Everything the formatter may read about the buffer, captured once per call.

    ``following_lines`` holds the lines directly below the cursor line, at most
    the lookahead that was requested when the snapshot was taken.
    """

    line: int
    column: int
    line_text: str
    text_after_cursor: str
    char_before_cursor: str
    char_after_cursor: str
    language_id: str | None
    total_line_count: int
    following_lines: tuple[str, ...] = ()
    last_non_space_before_cursor: str = BLANK_PREFIX_MARKER

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        line: int,
        column: int,
        language_id: str | None = None,
        lookahead: int = DEFAULT_LOOKAHEAD,
    ) -> "CursorContext":
        buffer = list(lines) or [""]
        if not 0 <= line < len(buffer):
            raise ValueError(f"line {line} outside buffer of {len(buffer)} lines")
        line_text = buffer[line]
        if not 0 <= column <= len(line_text):
            raise ValueError(f"column {column} outside line of length {len(line_text)}")

        text_after = line_text[column:]
        return cls(
            line=line,
            column=column,
            line_text=line_text,
            text_after_cursor=text_after,
            char_before_cursor=line_text[column - 1] if column > 0 else "",
            char_after_cursor=text_after[:1],
            language_id=language_id,
            total_line_count=len(buffer),
            following_lines=tuple(buffer[line + 1 : line + 1 + max(lookahead, 0)]),
            last_non_space_before_cursor=_last_non_space(buffer, line, column),
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        line: int,
        column: int,
        language_id: str | None = None,
        lookahead: int = DEFAULT_LOOKAHEAD,
    ) -> "CursorContext":
        return cls.from_lines(_LINE_SPLIT.split(text), line, column, language_id, lookahead)

    def line_text_at(self, offset: int) -> str | None:
        """Text of the line ``offset`` lines below the cursor, if it was captured."""

        if offset < 1 or offset > len(self.following_lines):
            return None
        if self.line + offset >= self.total_line_count:
            return None
        return self.following_lines[offset - 1]


def _last_non_space(buffer: Sequence[str], line: int, column: int) -> str:
    prefix = buffer[line][:column]
    for index in range(line, -1, -1):
        stripped = prefix.rstrip()
        if stripped:
            return stripped[-1]
        if index:
            prefix = buffer[index - 1]
    return BLANK_PREFIX_MARKER
