"""Conventions checker: scan a MEAN-stack front end for layout and style violations.

The guide says how an Angular/Browserify front end should be laid out:
folders are modules with an index.js, one component per file, injected
functions carry array annotations, styles live in SCSS and never inline,
every script has a spec beside it, and Gulp/Browserify/Karma come from
package.json. Prose doesn't enforce itself. mean-lint does.

mean-lint reports every violation it finds. A reviewer decides which are
acceptable; files they have looked at get a `mean-lint:vetted` comment
and move to the acknowledged section. They still show: nothing hides.

Usage:
    python3 -m mean_lint .                        # scan current dir
    python3 -m mean_lint . --strict               # exit 1 on unvetted violations
    python3 -m mean_lint . --ignore "vendor/*"    # skip patterns
    python3 -m mean_lint . --format json          # machine-readable report
"""

import argparse
import logging
import os
import sys

from mean_lint._config import ConfigError, apply_config, load_config
from mean_lint._evaluator import evaluate
from mean_lint._finding import Finding
from mean_lint._logging import setup_logging
from mean_lint._report import print_json, print_laws, print_report
from mean_lint._rules import RULE_NAMES, RULES, select_rules
from mean_lint._scanner import walk

__version__ = "0.1.0"
__all__ = [
    "Finding", "RULES", "evaluate", "main", "print_json", "print_laws",
    "print_report", "select_rules", "walk",
]


def _parser():
    parser = argparse.ArgumentParser(
        prog="mean-lint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
mean-lint: MEAN-stack front-end conventions checker.

Scan: walks every .js, .scss, .css and .html file under a directory
(and every directory), runs the rules below, reports violations.
Files with 'mean-lint:vetted' in a comment in their first 10 lines
still show in output but are separated into the "vetted" section and
don't block --strict. Directory and project findings can't be vetted.

Rules:
  build-tooling        gulpfile.js + package.json declaring gulp,
                       browserify, karma, karma-jasmine (--require)
  module-index         folders under --app-dir with scripts have index.js
  module-export        index.js declares angular.module and exports it
  index-router         index.js holds at most --entry-max functions
  one-component        one angular component registered per file
  di-array             injected functions use ['dep', function(dep)]
  spec-pairing         every script under --app-dir has <name>.spec.js
  focused-spec         no fdescribe/fit/ddescribe/iit in specs
  http-backend-verify  $httpBackend specs call both verifyNoOutstanding*
  important            no !important
  id-selector          no #id selectors
  scss-nesting         selectors nest at most --nesting-max deep
  inline-style         no style="" or <style> in templates
  file-name            lowercase-dashed file names
  loc                  --source-max / --test-max line limits

Skips: .git, node_modules, bower_components, dist, build, coverage,
  .tmp, .sass-cache, .idea, .vscode
  Specs are *.spec.js and *.test.js; user_spec.js is not a spec name.

Config: .meanlintrc.json at the root, or "meanLint" in package.json,
  or --config FILE. Keys are the long options with underscores.
  Command-line values win; --ignore patterns add up.

Exit status: 0 clean or not --strict, 1 unvetted violations under
  --strict, 2 usage or configuration error.

Known rules: {", ".join(RULE_NAMES)}""",
    )
    parser.add_argument("path", nargs="?", default=".", help="Project root to scan")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="CI gate: exit 1 on unvetted violations only")
    parser.add_argument("--ignore", action="append", default=None, metavar="GLOB",
                        help="Glob patterns to skip, matched against names and relative paths")
    parser.add_argument("--source-max", type=int, help="Max LOC for source files (default: 800)")
    parser.add_argument("--test-max", type=int, help="Max LOC for spec files (default: 500)")
    parser.add_argument("--nesting-max", type=int, help="Max SCSS selector nesting (default: 3)")
    parser.add_argument("--entry-max", type=int, help="Max functions in a module index.js (default: 3)")
    parser.add_argument("--app-dir", help="Root of the angular app, relative to path (default: src/app)")
    parser.add_argument("--require", dest="required_tools", action="append", metavar="PACKAGE",
                        help="npm package package.json must declare (replaces the default list)")
    parser.add_argument("--enable", action="append", metavar="RULE", help="Run only these rules")
    parser.add_argument("--disable", action="append", metavar="RULE", help="Skip these rules")
    parser.add_argument("--lines", action="store_true", help="Show line ranges for each component")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Report format")
    parser.add_argument("--jobs", "-j", type=int, default=1, help="Check files on N threads")
    parser.add_argument("--config", metavar="FILE", help="Config file (default: .meanlintrc.json)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    parser = _parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    root = os.path.abspath(args.path)
    if not os.path.isdir(root):
        parser.error(f"{args.path}: not a directory")
    try:
        apply_config(args, load_config(root, args.config))
        rules = select_rules(args.enable, args.disable)
    except ConfigError as exc:
        parser.error(str(exc))

    if args.format == "json":
        violations, vetted = evaluate(root, args, rules)
        print_json(violations, vetted)
    else:
        print_laws(args, rules)
        violations, vetted = evaluate(root, args, rules)
        print_report(violations, vetted, lines=args.lines)

    if args.strict and violations:
        sys.exit(1)
