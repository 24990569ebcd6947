"""!important ends the cascade. Once one lands, the next fix needs
another, and specificity stops meaning anything."""

import re

from mean_lint._finding import Finding
from mean_lint._source_text import blank_comments, line_of

_IMPORTANT = re.compile(r"!\s*important\b", re.IGNORECASE)


def check_important(entry, args):
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text, line_comments=entry.ext == ".scss")
    return [
        Finding("important", entry.rel, line_of(code, m.start()), "!important in stylesheet")
        for m in _IMPORTANT.finditer(code)
    ]
