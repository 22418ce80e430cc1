"""Cursor positions where asking the model for a completion is pointless."""
from __future__ import annotations

from ghosttext.editor.context import CursorContext
from ghosttext.formatter.text import is_only_brackets

SKIP_DECLARATION_SYMBOLS = ("=",)
IMPORT_SEPARATORS = (",", "{")
SKIP_IMPORT_KEYWORDS_AFTER = ("from", "as", "import")


def skip_variable_declaration(char_before: str, text_after: str) -> bool:
    """Right-hand side of an assignment that already has text after the cursor."""

    return (
        char_before.strip() in SKIP_DECLARATION_SYMBOLS
        and bool(text_after)
        and not is_only_brackets(text_after)
    )


def skip_import_declaration(char_before: str, text_after: str) -> bool:
    for keyword in SKIP_IMPORT_KEYWORDS_AFTER:
        if keyword in text_after and char_before not in IMPORT_SEPARATORS and char_before != " ":
            return True
    return False


def should_skip_completion(context: CursorContext) -> bool:
    char_before = context.last_non_space_before_cursor
    text_after = context.text_after_cursor
    return skip_variable_declaration(char_before, text_after) or skip_import_declaration(char_before, text_after)
