"""Call-scoped state threaded through the formatting stages."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ghosttext.core.config import CompletionSettings
from ghosttext.editor.context import CursorContext
from ghosttext.formatter.text import normalize_for_comparison
from ghosttext.lang.languages import LanguageSyntax, language_syntax


@dataclass(frozen=True)
class PipelineState:
    original: str
    normalized_original: str
    working: str
    context: CursorContext
    syntax: LanguageSyntax | None
    settings: CompletionSettings

    @classmethod
    def start(cls, raw: str, context: CursorContext, settings: CompletionSettings) -> "PipelineState":
        syntax = language_syntax(context.language_id)
        return cls(
            original=raw,
            normalized_original=normalize_for_comparison(raw, syntax),
            working="",
            context=context,
            syntax=syntax,
            settings=settings,
        )

    def with_working(self, working: str) -> "PipelineState":
        if working == self.working:
            return self
        return replace(self, working=working)
