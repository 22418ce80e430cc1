"""Clean-up of raw code-completion suggestions before they reach the editor."""

from ghosttext.editor.context import CursorContext
from ghosttext.formatter import CompletionFormatter, format_completion, should_skip_completion

__all__ = ["CompletionFormatter", "CursorContext", "format_completion", "should_skip_completion"]
