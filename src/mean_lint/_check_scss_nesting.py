"""Deep nesting compiles to selectors as specific as the markup is deep.
Past a few levels the stylesheet mirrors the DOM and breaks on every
template change."""

from mean_lint._finding import Finding
from mean_lint._source_text import blank_comments, iter_blocks, line_of


def check_scss_nesting(entry, args):
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text, strings=True)
    return [
        Finding(
            "scss-nesting", entry.rel, line_of(code, offset),
            f"'{' '.join(prelude.split())}' nested {depth} deep, limit {args.nesting_max}",
        )
        for prelude, offset, depth in iter_blocks(code)
        if depth > args.nesting_max
    ]
