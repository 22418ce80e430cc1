"""Individual completion formatting stages.

Every stage takes a :class:`PipelineState` and returns one whose ``working``
value may have changed. ``original`` and ``context`` are never touched.
"""
from __future__ import annotations

import re

from ghosttext.editor.context import CursorContext
from ghosttext.formatter.brackets import match_completion_brackets
from ghosttext.formatter.similarity import string_similarity
from ghosttext.formatter.state import PipelineState
from ghosttext.formatter.text import (
    QUOTES,
    is_word_char,
    line_break_count,
    normalize,
    normalize_for_comparison,
    split_lines,
)

DEFAULT_COMMENT_START = "//"
_META_TAG = re.compile(r"\b(Language|File|End):\s*(.*)\b")
_NON_SPACE = re.compile(r"\S")


def is_cursor_mid_word(context: CursorContext) -> bool:
    """True when word characters sit on both sides of the cursor."""

    # TODO: confirm with product whether `$` in script languages and `_` need
    # separate handling; both currently count as plain word characters.
    return is_word_char(context.char_after_cursor) and is_word_char(context.char_before_cursor)


def match_brackets(state: PipelineState) -> PipelineState:
    return state.with_working(match_completion_brackets(state.original))


def filter_comment_meta_lines(state: PipelineState) -> PipelineState:
    """Drop ``File:``/``Language:``/``End:`` comment lines the model likes to emit."""

    comment_start = state.syntax.comment_start if state.syntax else DEFAULT_COMMENT_START
    normalized = normalize(state.working)
    if normalized == comment_start or normalized.startswith(f"{comment_start} File:"):
        return state.with_working("")

    if not state.syntax or line_break_count(state.working) > 1:
        return state

    lines, separator = split_lines(state.working)
    kept = [
        line
        for line in lines
        if not (line.startswith(comment_start) and _META_TAG.search(line))
    ]
    if not kept:
        return state
    return state.with_working(separator.join(kept))


def prevent_duplicate_line(state: PipelineState) -> PipelineState:
    context = state.context
    lookahead = state.settings.duplicate_line_lookahead
    for offset in range(1, lookahead + 1):
        next_line = context.line_text_at(offset)
        if next_line is None:
            break
        candidate = normalize_for_comparison(next_line, state.syntax)
        if candidate == state.normalized_original:
            return state.with_working("")
        if string_similarity(candidate, state.normalized_original) > state.settings.duplicate_line_similarity:
            return state.with_working("")
    return state


def remove_duplicate_quotes(state: PipelineState) -> PipelineState:
    working = state.working
    char_after = state.context.char_after_cursor.strip()
    normalized = normalize(working)

    if char_after and (
        normalized.endswith(("',", '",', "`,")) or (normalized.endswith(",") and char_after in QUOTES)
    ):
        return state.with_working(working[:-2])
    if normalized.endswith(QUOTES) and char_after in QUOTES:
        return state.with_working(working[:-1])
    if normalized and normalized[-1] in QUOTES and normalized[-1] == char_after:
        return state.with_working(working[:-1])
    return state


def remove_unnecessary_middle_quotes(state: PipelineState) -> PipelineState:
    if not is_cursor_mid_word(state.context):
        return state
    working = state.working
    if working[:1] in QUOTES:
        working = working[1:]
    if working[-1:] in QUOTES:
        working = working[:-1]
    return state.with_working(working)


def ignore_blank_lines(state: PipelineState) -> PipelineState:
    if not state.working.strip() and state.original != "\n":
        return state.with_working("")
    return state


def remove_invalid_line_breaks(state: PipelineState) -> PipelineState:
    if state.context.text_after_cursor:
        return state.with_working(state.working.rstrip())
    return state


def remove_duplicate_text(state: PipelineState) -> PipelineState:
    """Cut the longest completion suffix that repeats the start of the text after the cursor.

    Whitespace exposed by the cut is trimmed, since text follows the cursor.
    """

    after = normalize(state.context.text_after_cursor)
    working = state.working
    if not after or not working:
        return state
    for length in range(min(len(working), len(after)), 0, -1):
        if working[-length:] == after[:length]:
            return state.with_working(working[:-length].rstrip())
    return state


def skip_middle_of_word(state: PipelineState) -> PipelineState:
    if is_cursor_mid_word(state.context):
        return state.with_working("")
    return state


def skip_similar_completions(state: PipelineState) -> PipelineState:
    score = string_similarity(state.context.text_after_cursor, state.working)
    if score > state.settings.current_line_similarity:
        return state.with_working("")
    return state


def trim_start(state: PipelineState) -> PipelineState:
    match = _NON_SPACE.search(state.working)
    if match and match.start() > 0 and state.context.column <= match.start():
        return state.with_working(state.working.lstrip())
    return state
