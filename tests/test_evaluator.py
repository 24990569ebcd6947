"""Tests for mean_lint._evaluator."""

from __future__ import annotations

from pathlib import Path

from mean_lint._evaluator import check_entry, evaluate
from mean_lint._rules import select_rules
from mean_lint._scanner import SourceFile


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _project(root: Path) -> None:
    _write(root / "src" / "app" / "index.js", "module.exports = angular.module('app', []);\n")
    _write(
        root / "src" / "app" / "widgets.js",
        "// mean-lint:vetted - filter and directive ship together\n"
        "app.filter('a', [function() {}]);\n"
        "app.directive('b', [function() {}]);\n",
    )
    _write(root / "src" / "app" / "user.js", "app.controller('U', function($scope) {});\n")
    _write(root / "src" / "app" / "users" / "list.js", "app.service('L', [function() {}]);\n")


class TestEvaluate:
    """Tests for evaluate."""

    def test_vetted_findings_separated(self, tmp_path: Path, args) -> None:
        _project(tmp_path)
        rules = select_rules(enable=["one-component", "di-array", "module-index"])
        violations, vetted = evaluate(str(tmp_path), args, rules)

        assert [(f.rule, f.path) for f in violations] == [
            ("di-array", "src/app/user.js"),
            ("module-index", "src/app/users"),
        ]
        assert [(f.rule, f.path) for f in vetted] == [("one-component", "src/app/widgets.js")]

    def test_threads_keep_scan_order(self, tmp_path: Path, args) -> None:
        _project(tmp_path)
        rules = select_rules()
        serial = evaluate(str(tmp_path), args, rules)
        args.jobs = 4
        assert evaluate(str(tmp_path), args, rules) == serial

    def test_ignore_applies(self, tmp_path: Path, args) -> None:
        _project(tmp_path)
        args.ignore = ["user.js"]
        violations, _ = evaluate(str(tmp_path), args, select_rules(enable=["di-array"]))
        assert violations == []


    def test_ignored_spec_still_pairs(self, tmp_path: Path, args) -> None:
        _write(tmp_path / "src" / "app" / "user.service.js", "x;\n")
        _write(tmp_path / "src" / "app" / "user.service.spec.js", "x;\n")
        args.ignore = ["*.spec.js"]
        violations, _ = evaluate(str(tmp_path), args, select_rules(enable=["spec-pairing"]))
        assert violations == []

class TestCheckEntry:
    """Tests for check_entry."""

    def test_findings_in_rule_order(self, tmp_path: Path, args) -> None:
        _write(tmp_path / "Bad.scss", ".a { color: red !important; }\n")
        entry = SourceFile("Bad.scss", str(tmp_path / "Bad.scss"))
        findings = check_entry(entry, select_rules(), args)
        assert [f.rule for f in findings] == ["important", "file-name"]
