"""Tests for function detection, comment presence and snippet extraction."""

import pytest

from ai_comments.commenting.detection import (
    FunctionMatch,
    build_snippet,
    detect_function,
    has_comment_above,
)


class TestDetectFunction:
    """Test the line-based function detector."""

    @pytest.mark.parametrize(
        "line, name",
        [
            ("function foo(a, b) {", "foo"),
            ("const bar = (x) => {", "bar"),
            ("const baz = async (x) => {", "baz"),
            ("const qux = x => {", "qux"),
            ("const noArgs = () => 1;", "noArgs"),
            ("function $el_2(node) {", "$el_2"),
            ("    function indented() {", "indented"),
            ("const bare = => 1", "bare"),
        ],
    )
    def test_recognised_shapes(self, line, name):
        match = detect_function(line)
        assert match is not None
        assert match.name == name

    @pytest.mark.parametrize(
        "line",
        [
            "export function exported() {",
            "let notConst = (x) => x;",
            "const value = compute(x);",
            "function",
            "function multiLine",
            "",
            "   ",
            "return function inner() {",
        ],
    )
    def test_unrecognised_lines(self, line):
        assert detect_function(line) is None

    def test_match_keeps_raw_line_and_index(self):
        line = "  const load = async () => {"
        match = detect_function(line, 12)

        assert match == FunctionMatch(name="load", line_index=12, raw_line=line)

    def test_match_inside_string_is_still_a_match(self):
        # Lexical matching only; strings and comments are not understood.
        match = detect_function("function fake() {} // not real")
        assert match is not None
        assert match.name == "fake"

    def test_non_ascii_identifier_is_not_matched(self):
        assert detect_function("function café() {") is None


class TestHasCommentAbove:
    """Test the comment presence check."""

    @pytest.mark.parametrize("line", ["// note", "   // indented", "/* block */", "/**", "  /* open"])
    def test_comment_lines(self, line):
        assert has_comment_above(line)

    @pytest.mark.parametrize("line", [None, "", "   ", "}", "const x = 1; // trailing", "* continuation", "# hash"])
    def test_non_comment_lines(self, line):
        assert not has_comment_above(line)


class TestBuildSnippet:
    """Test snippet extraction."""

    def test_default_window_is_eight_lines(self):
        lines = [f"line {i}" for i in range(20)]
        snippet = build_snippet(lines, 3)

        assert snippet.split("\n") == lines[3:11]

    def test_window_is_clipped_at_end(self):
        lines = ["a", "b", "c"]
        assert build_snippet(lines, 1) == "b\nc"

    def test_custom_window(self):
        lines = ["a", "b", "c", "d"]
        assert build_snippet(lines, 0, max_lines=2) == "a\nb"

    def test_start_past_end_is_empty(self):
        assert build_snippet(["a"], 5) == ""

    def test_input_is_not_mutated(self):
        lines = ["a", "b", "c"]
        build_snippet(lines, 0)
        assert lines == ["a", "b", "c"]
