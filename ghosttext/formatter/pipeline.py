"""Completion formatting pipeline."""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from ghosttext.core.config import CompletionSettings
from ghosttext.editor.context import CursorContext
from ghosttext.formatter import stages
from ghosttext.formatter.state import PipelineState

logger = logging.getLogger(__name__)

Stage = Callable[[PipelineState], PipelineState]
StageHook = Callable[[str, str], None]

# Order is significant: several stages read the raw original rather than the
# progressively edited working value.
PIPELINE: Sequence[tuple[str, Stage]] = (
    ("match_brackets", stages.match_brackets),
    ("filter_comment_meta_lines", stages.filter_comment_meta_lines),
    ("prevent_duplicate_line", stages.prevent_duplicate_line),
    ("remove_duplicate_quotes", stages.remove_duplicate_quotes),
    ("remove_unnecessary_middle_quotes", stages.remove_unnecessary_middle_quotes),
    ("ignore_blank_lines", stages.ignore_blank_lines),
    ("remove_invalid_line_breaks", stages.remove_invalid_line_breaks),
    ("remove_duplicate_text", stages.remove_duplicate_text),
    ("skip_middle_of_word", stages.skip_middle_of_word),
    ("skip_similar_completions", stages.skip_similar_completions),
    ("trim_start", stages.trim_start),
)


class CompletionFormatter:
    """Reconciles a raw model suggestion with the buffer around the cursor.

    The formatter holds configuration only. Each :meth:`format` call builds its
    own :class:`PipelineState`, so one instance can serve concurrent callers.
    """

    def __init__(self, settings: CompletionSettings | None = None, on_stage: StageHook | None = None) -> None:
        self.settings = settings or CompletionSettings()
        self.on_stage = on_stage

    def format(self, raw: str, context: CursorContext) -> str:
        """Return the text to insert, or ``""`` when the suggestion should be dropped."""

        state = PipelineState.start(raw, context, self.settings)
        logger.debug(
            f"Formatting completion at {context.line}:{context.column} "
            f"(language={context.language_id}, after={context.text_after_cursor!r}, "
            f"char_after={context.char_after_cursor!r}, original={raw!r})"
        )
        for name, stage in PIPELINE:
            state = stage(state)
            if self.settings.debug:
                logger.debug(f"{name}: {state.working!r}")
            if self.on_stage:
                self.on_stage(name, state.working)

        if not state.working.strip():
            return ""
        return state.working


def format_completion(
    raw: str,
    context: CursorContext,
    settings: CompletionSettings | None = None,
) -> str:
    """Convenience wrapper around :class:`CompletionFormatter`."""

    return CompletionFormatter(settings).format(raw, context)
