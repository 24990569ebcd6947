"""The core layout law: one Angular component per file. When you `ls`
a module folder, each filename IS a component. Output includes the
count and names so the reviewer can judge: a filter riding along with
its controller in 40 lines is cohesive, five services in one file is not."""

import re

from mean_lint._finding import Finding
from mean_lint._laws import REGISTRATIONS
from mean_lint._source_text import blank_comments, line_of, matching_close

_REGISTRATION = re.compile(
    r"\.\s*(?P<kind>" + "|".join(REGISTRATIONS) + r")\s*(?P<paren>\()"
    r"\s*(?P<q>['\"])(?P<name>[^'\"\n]+)(?P=q)"
)


def check_one_component(entry, args):
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text)
    # Same offsets, string bodies blanked, for bracket matching.
    bare = blank_comments(text, strings=True)

    spans = []
    for m in _REGISTRATION.finditer(code):
        start = line_of(code, m.start("kind"))
        close = matching_close(bare, m.start("paren"))
        end = start if close is None else line_of(code, close)
        spans.append((f"{m.group('kind')} {m.group('name')}", start, end))

    if len(spans) <= 1:
        return []
    names = ", ".join(name for name, _, _ in spans[:5])
    return [Finding(
        "one-component", entry.rel, spans[0][1],
        f"{len(spans)} components, {len(entry.lines)} LOC ({names})",
        spans,
    )]
