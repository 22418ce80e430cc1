"""Character classes and normalization shared by the formatting stages."""
from __future__ import annotations

import re

from ghosttext.lang.languages import LanguageSyntax

QUOTES = ("'", '"', "`")
OPENING_BRACKETS = ("(", "[", "{")
CLOSING_BRACKETS = (")", "]", "}")
BRACKET_PAIRS = {"(": ")", "[": "]", "{": "}"}

_WORD_CHAR = re.compile(r"\w", re.ASCII)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def normalize(text: str) -> str:
    return text.strip()


def normalize_for_comparison(text: str, syntax: LanguageSyntax | None) -> str:
    """Trim ``text`` and drop one leading comment-start token of the language."""

    normalized = text.strip()
    if syntax and syntax.comment_start and normalized.startswith(syntax.comment_start):
        normalized = normalized[len(syntax.comment_start) :].strip()
    return normalized


def is_word_char(char: str) -> bool:
    return bool(char) and _WORD_CHAR.fullmatch(char) is not None


def line_break_count(text: str) -> int:
    return len(_LINE_BREAK.findall(text))


def split_lines(text: str) -> tuple[list[str], str]:
    """Split on any line break; also return the first break seen, defaulting to ``\\n``."""

    match = _LINE_BREAK.search(text)
    return _LINE_BREAK.split(text), match.group(0) if match else "\n"


def is_only_brackets(text: str) -> bool:
    if not text:
        return False
    return all(char in OPENING_BRACKETS or char in CLOSING_BRACKETS for char in text)


def is_single_bracket(text: str) -> bool:
    return len(text) == 1 and is_only_brackets(text)
