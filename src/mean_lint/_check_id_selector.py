"""Style classes, not ids. An id selector outweighs any number of
classes and can only ever match one element."""

import re

from mean_lint._finding import Finding
from mean_lint._source_text import blank_comments, iter_blocks, line_of

_ID = re.compile(r"(?<![\w&$-])#(?P<id>[A-Za-z_-][\w-]*)")


def check_id_selector(entry, args):
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text, strings=True, line_comments=entry.ext == ".scss")

    findings = []
    for prelude, offset, depth in iter_blocks(code):
        if not depth:
            continue
        for m in _ID.finditer(prelude):
            findings.append(Finding(
                "id-selector", entry.rel, line_of(code, offset + m.start()),
                f"id selector '#{m.group('id')}'; use a class",
            ))
    return findings
