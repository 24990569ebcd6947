"""Tests for mean_lint._source_text."""

from __future__ import annotations

from mean_lint._source_text import blank_comments, iter_blocks, line_of, matching_close


class TestBlankComments:
    """Tests for blank_comments."""

    def test_line_comment_blanked_newline_kept(self) -> None:
        text = "a // gone\nb"
        out = blank_comments(text)
        assert len(out) == len(text)
        assert "gone" not in out
        assert out.split("\n") == ["a" + " " * 8, "b"]

    def test_block_comment_keeps_line_count(self) -> None:
        text = "a /* one\ntwo */ b"
        out = blank_comments(text)
        assert out == "a" + " " * 7 + "\n" + " " * 7 + "b"

    def test_slashes_inside_string_are_not_a_comment(self) -> None:
        text = "var u = 'http://example.com';"
        assert blank_comments(text) == text

    def test_strings_blanked_on_request(self) -> None:
        assert blank_comments("f(')')", strings=True) == "f(' ')"

    def test_css_keeps_double_slash(self) -> None:
        text = "a { background: url(//cdn/x.png); }"
        assert blank_comments(text, line_comments=False) == text

    def test_unquoted_url_survives_line_comments(self) -> None:
        text = "a { background: url(http://cdn/x.png); } // note"
        assert blank_comments(text) == text[:-7] + " " * 7

    def test_url_call_in_js_is_not_special(self) -> None:
        text = "getUrl(a) // x"
        assert blank_comments(text) == "getUrl(a)     "


class TestLineOf:
    """Tests for line_of."""

    def test_first_and_third_line(self) -> None:
        text = "a\nb\nc"
        assert line_of(text, 0) == 1
        assert line_of(text, 4) == 3


class TestMatchingClose:
    """Tests for matching_close."""

    def test_nested_parens(self) -> None:
        assert matching_close("f(a(b))", 1) == 6

    def test_unbalanced_returns_none(self) -> None:
        assert matching_close("f(a(b)", 1) is None


class TestIterBlocks:
    """Tests for iter_blocks."""

    def test_nesting_counts_selector_blocks(self) -> None:
        blocks = list(iter_blocks(".a { .b { color: red; } }"))
        assert blocks == [(".a", 0, 1), (".b", 5, 2)]

    def test_at_rules_do_not_deepen(self) -> None:
        blocks = list(iter_blocks("@media print { .a { } }"))
        assert [(p, d) for p, _, d in blocks] == [("@media print", 0), (".a", 1)]

    def test_nested_property_is_not_a_selector(self) -> None:
        blocks = list(iter_blocks(".a { font: { family: x; } }"))
        assert [(p, d) for p, _, d in blocks] == [(".a", 1), ("font:", 0)]

    def test_interpolation_stepped_over(self) -> None:
        blocks = list(iter_blocks(".icon-#{$name} { }"))
        assert [(p, d) for p, _, d in blocks] == [(".icon-#{$name}", 1)]
