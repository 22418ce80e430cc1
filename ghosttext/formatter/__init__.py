"""Completion formatting exports."""

from .pipeline import PIPELINE, CompletionFormatter, format_completion
from .similarity import string_similarity
from .skip_rules import should_skip_completion
from .state import PipelineState

__all__ = [
    "PIPELINE",
    "CompletionFormatter",
    "PipelineState",
    "format_completion",
    "should_skip_completion",
    "string_similarity",
]
