from __future__ import annotations

from ghosttext.core.config import CompletionSettings
from ghosttext.formatter import stages
from ghosttext.formatter.state import PipelineState


def _state(make_context, working: str, text: str = "", column: int | None = None, language_id=None, raw=None):
    context = make_context(text, column=column, language_id=language_id)
    state = PipelineState.start(working if raw is None else raw, context, CompletionSettings())
    return state.with_working(working)


class TestCommentMetaFilter:
    def test_drops_file_header_comment(self, make_context) -> None:
        state = _state(make_context, "// File: src/app.ts")
        assert stages.filter_comment_meta_lines(state).working == ""

    def test_drops_bare_comment_token(self, make_context) -> None:
        state = _state(make_context, "  #  ", language_id="shellscript")
        assert stages.filter_comment_meta_lines(state).working == ""

    def test_removes_meta_lines_from_short_completions(self, make_context) -> None:
        state = _state(make_context, "# Language: bash\necho hi", language_id="shellscript")
        assert stages.filter_comment_meta_lines(state).working == "echo hi"

    def test_keeps_ordinary_comments(self, make_context) -> None:
        state = _state(make_context, "# install deps\npip install", language_id="shellscript")
        assert stages.filter_comment_meta_lines(state).working == "# install deps\npip install"

    def test_multi_line_completions_pass_through(self, make_context) -> None:
        working = "# Language: sh\necho a\necho b"
        state = _state(make_context, working, language_id="shellscript")
        assert stages.filter_comment_meta_lines(state).working == working

    def test_crlf_completions_keep_their_line_endings(self, make_context) -> None:
        state = _state(make_context, "# Language: bash\r\necho hi", language_id="shellscript")
        assert stages.filter_comment_meta_lines(state).working == "echo hi"

        kept = _state(make_context, "echo a\r\necho b", language_id="shellscript")
        assert stages.filter_comment_meta_lines(kept).working == "echo a\r\necho b"

    def test_unknown_language_skips_line_filtering(self, make_context) -> None:
        state = _state(make_context, "# Language: text\nhello")
        assert stages.filter_comment_meta_lines(state).working == "# Language: text\nhello"


class TestDuplicateLineGuard:
    def test_exact_duplicate_below_is_suppressed(self, make_context) -> None:
        state = _state(make_context, "line2", text="line1\nline2\nline3", column=5)
        assert stages.prevent_duplicate_line(state).working == ""

    def test_similar_duplicate_is_suppressed(self, make_context) -> None:
        text = "a\nb\n    return values.sum()"
        state = _state(make_context, "return values.sum();", text=text, column=1)
        assert stages.prevent_duplicate_line(state).working == ""

    def test_comment_token_is_ignored_when_comparing(self, make_context) -> None:
        state = _state(make_context, "setup()", text="\n# setup()", column=0, language_id="shellscript")
        assert stages.prevent_duplicate_line(state).working == ""

    def test_duplicate_at_last_lookahead_line_is_suppressed(self, make_context) -> None:
        state = _state(make_context, "target", text="x\n1\n2\ntarget", column=1)
        assert stages.prevent_duplicate_line(state).working == ""

    def test_similarity_equal_to_threshold_is_kept(self, make_context) -> None:
        state = _state(make_context, "abcde", text="x\nabcdx", column=1)
        assert stages.prevent_duplicate_line(state).working == "abcde"

    def test_lines_beyond_lookahead_are_not_checked(self, make_context) -> None:
        state = _state(make_context, "target", text="x\n1\n2\n3\ntarget", column=1)
        assert stages.prevent_duplicate_line(state).working == "target"

    def test_compares_raw_original_not_working(self, make_context) -> None:
        state = _state(make_context, "something else", text="x\nline2", column=1, raw="line2")
        assert stages.prevent_duplicate_line(state).working == ""


class TestQuoteReconciler:
    def test_drops_quote_and_comma_before_text(self, make_context) -> None:
        state = _state(make_context, "'b',", text="['a', ]", column=6)
        assert stages.remove_duplicate_quotes(state).working == "'b"

    def test_drops_comma_before_quote(self, make_context) -> None:
        state = _state(make_context, "value,", text="f('')", column=3)
        assert stages.remove_duplicate_quotes(state).working == "valu"

    def test_drops_trailing_quote_before_quote(self, make_context) -> None:
        state = _state(make_context, "template`", text="`template`", column=9)
        assert stages.remove_duplicate_quotes(state).working == "template"

    def test_leaves_completion_without_quote_after_cursor(self, make_context) -> None:
        state = _state(make_context, "name'", text="x = ", column=4)
        assert stages.remove_duplicate_quotes(state).working == "name'"


class TestMiddleOfWord:
    def test_mid_word_detection(self, make_context) -> None:
        assert stages.is_cursor_mid_word(make_context("word", column=2))
        assert stages.is_cursor_mid_word(make_context("$el_x", column=3))
        assert not stages.is_cursor_mid_word(make_context("word", column=4))
        assert not stages.is_cursor_mid_word(make_context("a b", column=1))

    def test_strips_surrounding_quotes_mid_word(self, make_context) -> None:
        state = _state(make_context, "'ork'", text="word", column=2)
        assert stages.remove_unnecessary_middle_quotes(state).working == "ork"

    def test_blanks_completion_mid_word(self, make_context) -> None:
        state = _state(make_context, "smithery", text="word", column=2)
        assert stages.skip_middle_of_word(state).working == ""


class TestWhitespaceStages:
    def test_blank_completion_collapses(self, make_context) -> None:
        state = _state(make_context, "  \n ", raw="  \n ")
        assert stages.ignore_blank_lines(state).working == ""

    def test_single_newline_is_kept(self, make_context) -> None:
        state = _state(make_context, "\n", raw="\n")
        assert stages.ignore_blank_lines(state).working == "\n"

    def test_trailing_breaks_trimmed_when_line_continues(self, make_context) -> None:
        state = _state(make_context, "foo\n\n", text="x)", column=1)
        assert stages.remove_invalid_line_breaks(state).working == "foo"

    def test_trailing_breaks_kept_at_end_of_line(self, make_context) -> None:
        state = _state(make_context, "foo\n", text="x", column=1)
        assert stages.remove_invalid_line_breaks(state).working == "foo\n"

    def test_leading_indent_trimmed_when_cursor_is_before_it(self, make_context) -> None:
        state = _state(make_context, "    pass", text="  ", column=2)
        assert stages.trim_start(state).working == "pass"

    def test_leading_indent_kept_when_cursor_is_past_it(self, make_context) -> None:
        state = _state(make_context, "  pass", text="        ", column=8)
        assert stages.trim_start(state).working == "  pass"


class TestOverlapRemover:
    def test_removes_longest_overlap(self, make_context) -> None:
        state = _state(make_context, "foo(a, b))", text="call()) ", column=5)
        assert stages.remove_duplicate_text(state).working == "foo(a, b"

    def test_no_overlap_is_noop(self, make_context) -> None:
        state = _state(make_context, "foo", text="x;", column=1)
        assert stages.remove_duplicate_text(state).working == "foo"

    def test_trailing_space_left_by_overlap_is_trimmed(self, make_context) -> None:
        state = _state(make_context, "hello a", text="(a b c d", column=1)
        assert stages.remove_duplicate_text(state).working == "hello"

    def test_nothing_after_cursor_is_noop(self, make_context) -> None:
        state = _state(make_context, "foo)", text="x   ", column=1)
        assert stages.remove_duplicate_text(state).working == "foo)"


class TestSimilaritySuppressor:
    def test_similarity_equal_to_threshold_is_kept(self, make_context) -> None:
        state = _state(make_context, "abcde", text="abcxy", column=0)
        assert stages.skip_similar_completions(state).working == "abcde"

    def test_echo_of_rest_of_line_is_dropped(self, make_context) -> None:
        state = _state(make_context, "items.append(x)", text="items.append(x);", column=0)
        assert stages.skip_similar_completions(state).working == ""

    def test_different_text_is_kept(self, make_context) -> None:
        state = _state(make_context, "word", text="'word')}", column=5)
        assert stages.skip_similar_completions(state).working == "word"
