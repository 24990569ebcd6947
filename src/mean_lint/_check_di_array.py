"""Minifiers rename function parameters, and Angular injects by parameter
name. A bare `function($scope, $http)` works in dev and dies in the
bundle. The inline array form spells the names out as strings:

    .controller('UserCtrl', ['$scope', '$http', function($scope, $http) {...}])
"""

import re

from mean_lint._finding import Finding
from mean_lint._laws import INJECTABLES
from mean_lint._source_text import blank_comments, line_of

_FN = r"(?:function\b\s*[\w$]*\s*\((?P<params>[^)]*)\)|\((?P<arrow>[^)]*)\)\s*=>)"

_BARE_INJECTION = re.compile(
    r"\.\s*(?P<kind>" + "|".join(INJECTABLES) + r")\s*\(\s*"
    r"(?:(?P<q>['\"])[^'\"\n]*(?P=q)\s*,\s*)?" + _FN
)

# controller: function($scope) {...} inside a directive definition.
_BARE_DIRECTIVE_CTRL = re.compile(r"\bcontroller\s*:\s*" + _FN)


def check_di_array(entry, args):
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text)

    findings = []
    for pattern in (_BARE_INJECTION, _BARE_DIRECTIVE_CTRL):
        for m in pattern.finditer(code):
            params = m.group("params") if m.group("params") is not None else m.group("arrow")
            names = [p.strip() for p in params.split(",") if p.strip()]
            if not names:
                continue
            kind = m.groupdict().get("kind") or "directive controller"
            quoted = ", ".join(f"'{n}'" for n in names)
            findings.append(Finding(
                "di-array", entry.rel, line_of(code, m.start()),
                f"{kind} injects {', '.join(names)} by parameter name; "
                f"use [{quoted}, function(...)]",
            ))
    findings.sort(key=lambda f: f.line)
    return findings
