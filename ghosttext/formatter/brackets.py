"""Truncate a completion at its first unbalanced closing bracket."""
from __future__ import annotations

from dataclasses import dataclass

from ghosttext.formatter.text import BRACKET_PAIRS, CLOSING_BRACKETS, OPENING_BRACKETS, QUOTES


@dataclass
class QuoteState:
    in_string: bool = False
    quote_char: str = ""

    def feed(self, char: str) -> None:
        if char not in QUOTES:
            return
        if not self.in_string:
            self.in_string = True
            self.quote_char = char
        elif char == self.quote_char:
            self.in_string = False
            self.quote_char = ""


def match_completion_brackets(completion: str) -> str:
    """Return the longest bracket-consistent prefix of ``completion``.

    Brackets inside quoted strings are ignored. The first closing bracket that
    does not pair with the innermost open one stops the scan. When nothing was
    accepted the whole completion is kept; either way trailing whitespace is
    dropped.
    """

    accepted: list[str] = []
    stack: list[str] = []
    quotes = QuoteState()

    for char in completion:
        quotes.feed(char)
        if not quotes.in_string and char not in QUOTES:
            if char in OPENING_BRACKETS:
                stack.append(char)
            elif char in CLOSING_BRACKETS:
                if stack and BRACKET_PAIRS[stack[-1]] == char:
                    stack.pop()
                else:
                    break
        accepted.append(char)

    return "".join(accepted).rstrip() or completion.rstrip()
