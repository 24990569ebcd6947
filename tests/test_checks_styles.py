"""Tests for the stylesheet and template rules."""

from __future__ import annotations

from pathlib import Path

from mean_lint._check_id_selector import check_id_selector
from mean_lint._check_important import check_important
from mean_lint._check_inline_style import check_inline_style
from mean_lint._check_scss_nesting import check_scss_nesting
from mean_lint._scanner import SourceFile


def _source(root: Path, rel: str, text: str) -> SourceFile:
    path = root / rel
    path.write_text(text, encoding="utf-8")
    return SourceFile(rel, str(path))


class TestImportant:
    """Tests for check_important."""

    def test_flags_each_use(self, tmp_path: Path, args) -> None:
        code = ".a { color: red !important; }\n.b {\n  margin: 0 ! important;\n}\n"
        findings = check_important(_source(tmp_path, "a.scss", code), args)
        assert [f.line for f in findings] == [1, 3]

    def test_comments_ignored(self, tmp_path: Path, args) -> None:
        code = "/* never !important */\n// nor !important here\n.a { color: red; }\n"
        assert check_important(_source(tmp_path, "a.scss", code), args) == []

    def test_css_url_with_double_slash(self, tmp_path: Path, args) -> None:
        code = "a { background: url(//cdn/x.png) !important; }\n"
        findings = check_important(_source(tmp_path, "a.css", code), args)
        assert [f.line for f in findings] == [1]

    def test_scss_unquoted_url_is_not_a_comment(self, tmp_path: Path, args) -> None:
        code = ".a { background: url(http://cdn/x.png) !important; }\n"
        findings = check_important(_source(tmp_path, "a.scss", code), args)
        assert [f.line for f in findings] == [1]


class TestIdSelector:
    """Tests for check_id_selector."""

    def test_top_level_and_nested(self, tmp_path: Path, args) -> None:
        code = "#header { }\n.a {\n  #main { }\n}\n"
        findings = check_id_selector(_source(tmp_path, "a.scss", code), args)
        assert [(f.line, f.message) for f in findings] == [
            (1, "id selector '#header'; use a class"),
            (3, "id selector '#main'; use a class"),
        ]

    def test_hex_colors_and_attribute_values_pass(self, tmp_path: Path, args) -> None:
        code = ".a { color: #fff; }\na[href='#top'] { color: #000; }\n"
        assert check_id_selector(_source(tmp_path, "a.scss", code), args) == []

    def test_interpolation_passes(self, tmp_path: Path, args) -> None:
        code = ".icon-#{$name} { width: 1px; }\n"
        assert check_id_selector(_source(tmp_path, "a.scss", code), args) == []


class TestScssNesting:
    """Tests for check_scss_nesting."""

    def test_too_deep(self, tmp_path: Path, args) -> None:
        code = (
            ".a {\n"
            "  .b {\n"
            "    .c {\n"
            "      .d {\n"
            "      }\n"
            "    }\n"
            "  }\n"
            "}\n"
        )
        findings = check_scss_nesting(_source(tmp_path, "a.scss", code), args)
        assert [(f.line, f.message) for f in findings] == [(4, "'.d' nested 4 deep, limit 3")]

    def test_media_queries_do_not_count(self, tmp_path: Path, args) -> None:
        code = "@media print { .a { .b { .c { } } } }\n"
        assert check_scss_nesting(_source(tmp_path, "a.scss", code), args) == []

    def test_limit_is_configurable(self, tmp_path: Path, args) -> None:
        args.nesting_max = 1
        code = ".a { .b { } }\n"
        findings = check_scss_nesting(_source(tmp_path, "a.scss", code), args)
        assert [f.message for f in findings] == ["'.b' nested 2 deep, limit 1"]

    def test_url_does_not_swallow_following_rules(self, tmp_path: Path, args) -> None:
        code = ".a { background: url(http://cdn/x.png); }\n.b { .c { .d { } } }\n"
        assert check_scss_nesting(_source(tmp_path, "a.scss", code), args) == []


class TestInlineStyle:
    """Tests for check_inline_style."""

    def test_style_attribute(self, tmp_path: Path, args) -> None:
        code = '<div class="a">\n  <p style="color: red">x</p>\n</div>\n'
        findings = check_inline_style(_source(tmp_path, "a.html", code), args)
        assert [(f.line, f.message) for f in findings] == [(2, "style attribute in template")]

    def test_attribute_on_later_line_of_tag(self, tmp_path: Path, args) -> None:
        code = '<div\n  class="a"\n  style="x">\n</div>\n'
        findings = check_inline_style(_source(tmp_path, "a.html", code), args)
        assert [f.line for f in findings] == [3]

    def test_style_block(self, tmp_path: Path, args) -> None:
        code = "<p>x</p>\n<style>\n.a { }\n</style>\n"
        findings = check_inline_style(_source(tmp_path, "a.html", code), args)
        assert [(f.line, f.message) for f in findings] == [(2, "<style> block in template")]

    def test_ng_style_and_comments_pass(self, tmp_path: Path, args) -> None:
        code = '<div ng-style="box"></div>\n<!-- <p style="x"></p> -->\n'
        assert check_inline_style(_source(tmp_path, "a.html", code), args) == []

    def test_custom_element_named_like_style_passes(self, tmp_path: Path, args) -> None:
        code = "<style-guide>\n  <p>x</p>\n</style-guide>\n"
        assert check_inline_style(_source(tmp_path, "a.html", code), args) == []
