"""The rule registry: every law, what it looks at, and who enforces it.

Rules are data. Adding one means writing a _check_*.py module and a
line here; the scanner, evaluator and reporter never change.
"""

from typing import Callable, FrozenSet, NamedTuple, Optional

from mean_lint._check_build_tooling import check_build_tooling
from mean_lint._check_di_array import check_di_array
from mean_lint._check_file_name import check_file_name
from mean_lint._check_focused_spec import check_focused_spec
from mean_lint._check_http_backend_verify import check_http_backend_verify
from mean_lint._check_id_selector import check_id_selector
from mean_lint._check_important import check_important
from mean_lint._check_index_router import check_index_router
from mean_lint._check_inline_style import check_inline_style
from mean_lint._check_loc import check_loc
from mean_lint._check_module_export import check_module_export
from mean_lint._check_module_index import check_module_index
from mean_lint._check_one_component import check_one_component
from mean_lint._check_scss_nesting import check_scss_nesting
from mean_lint._check_spec_pairing import check_spec_pairing
from mean_lint._config import ConfigError


class Rule(NamedTuple):
    name: str
    scope: str  # "file", "dir" or "project"
    law: str  # str.format'ed with the active options
    check: Callable
    extensions: FrozenSet[str] = frozenset()
    # True: specs only, False: sources only, None: both.
    specs: Optional[bool] = None

    def applies_to(self, entry):
        if self.scope == "project":
            return entry.scope == "dir" and entry.rel == "."
        if self.scope != entry.scope:
            return False
        if self.scope == "dir":
            return True
        if entry.ext not in self.extensions:
            return False
        return self.specs is None or self.specs == entry.is_spec


_WEB = frozenset({".js", ".scss", ".css", ".html"})
_JS = frozenset({".js"})
_STYLES = frozenset({".scss", ".css"})

RULES = (
    Rule("build-tooling", "project",
         "Gulp + Browserify build, Karma + Jasmine tests, declared in package.json ({required_tools})",
         check_build_tooling),
    Rule("module-index", "dir",
         "Every module folder under {app_dir} has an index.js",
         check_module_index),
    Rule("module-export", "file",
         "Module index files declare angular.module(...) and export it",
         check_module_export, _JS),
    Rule("index-router", "file",
         "Module index files wire modules: at most {entry_max} function definitions",
         check_index_router, _JS),
    Rule("one-component", "file",
         "One Angular component per file",
         check_one_component, _JS, specs=False),
    Rule("di-array", "file",
         "Injected functions use the ['dep', function(dep) {{...}}] array annotation",
         check_di_array, _JS, specs=False),
    Rule("spec-pairing", "file",
         "Every script under {app_dir} has a sibling .spec.js",
         check_spec_pairing, _JS),
    Rule("focused-spec", "file",
         "No fdescribe/fit/ddescribe/iit left in specs",
         check_focused_spec, _JS, specs=True),
    Rule("http-backend-verify", "file",
         "Specs using $httpBackend verify outstanding expectations and requests",
         check_http_backend_verify, _JS, specs=True),
    Rule("important", "file",
         "No !important in stylesheets",
         check_important, _STYLES),
    Rule("id-selector", "file",
         "Style with classes, never #id selectors",
         check_id_selector, _STYLES),
    Rule("scss-nesting", "file",
         "SCSS selectors nest at most {nesting_max} deep",
         check_scss_nesting, frozenset({".scss"})),
    Rule("inline-style", "file",
         "No style attributes or <style> blocks in templates",
         check_inline_style, frozenset({".html"})),
    Rule("file-name", "file",
         "Filenames are lowercase and dash-separated",
         check_file_name, _WEB),
    Rule("loc", "file",
         "Source files ≤{source_max} LOC, spec files ≤{test_max} LOC",
         check_loc, _WEB),
)

RULE_NAMES = tuple(rule.name for rule in RULES)


def select_rules(enable=(), disable=()):
    """Active rules, registry order kept. An empty enable list means all."""
    unknown = sorted((set(enable) | set(disable)) - set(RULE_NAMES))
    if unknown:
        raise ConfigError(
            f"unknown rule(s): {', '.join(unknown)} (known: {', '.join(RULE_NAMES)})"
        )
    return [
        rule for rule in RULES
        if (not enable or rule.name in enable) and rule.name not in disable
    ]


def applicable(rules, entry):
    return [rule for rule in rules if rule.applies_to(entry)]
