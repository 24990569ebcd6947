"""index.js files should wire modules together, not hold logic.
When they accumulate functions they become the monolith the folder
layout was meant to prevent."""

import re

from mean_lint._finding import Finding
from mean_lint._source_text import blank_comments, line_of

_DEF = re.compile(r"\bfunction\b\s*(?P<name>[\w$]*)\s*\(|(?:\([^()]*\)|[\w$]+)\s*=>")


def check_index_router(entry, args):
    if entry.basename != "index.js":
        return []
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text)

    defs = [
        ((m.group("name") or "<anonymous>"), line_of(code, m.start()))
        for m in _DEF.finditer(code)
    ]
    if len(defs) > args.entry_max:
        listed = ", ".join(f"{name}@L{line}" for name, line in defs[:5])
        return [Finding(
            "index-router", entry.rel, defs[0][1],
            f"{len(defs)} function definitions in module index, limit {args.entry_max} ({listed})",
        )]
    return []
