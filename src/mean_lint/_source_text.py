"""Offset-preserving views of JS and SCSS source.

The checks use regexes, and regexes can't tell code from comments.
Blanking comments with spaces (newlines kept) lets every check match
against plain code while reporting line numbers from the original.
"""

_OPENERS = "([{"
_CLOSERS = ")]}"


def blank_comments(text, strings=False, line_comments=True):
    """Return text with comments replaced by spaces, same length.

    strings=True also blanks string bodies (quotes stay) so bracket
    matching isn't thrown off by a ')' inside a literal. Plain CSS
    has no // comments: pass line_comments=False. An unquoted url(...)
    is kept whole either way, so the // in url(http://...) survives.
    """
    out = list(text)
    i, n = 0, len(text)
    while i < n:
        c = text[i]
        if c in "'\"`":
            j = i + 1
            while j < n and text[j] != c:
                if text[j] == "\\":
                    j += 1
                elif text[j] == "\n" and c != "`":
                    break
                j += 1
            if strings:
                _blank(out, i + 1, min(j, n))
            i = j + 1
        elif text[i:i + 4].lower() == "url(" and _is_css_url(text, i):
            j = text.find(")", i + 4)
            i = n if j == -1 else j + 1
        elif line_comments and text.startswith("//", i):
            j = text.find("\n", i)
            j = n if j == -1 else j
            _blank(out, i, j)
            i = j
        elif text.startswith("/*", i):
            j = text.find("*/", i + 2)
            j = n if j == -1 else j + 2
            _blank(out, i, j)
            i = j
        else:
            i += 1
    return "".join(out)


def _is_css_url(text, i):
    if i and (text[i - 1].isalnum() or text[i - 1] in "_$"):
        return False
    i += 4
    while i < len(text) and text[i] in " \t":
        i += 1
    return i < len(text) and text[i] not in "'\""


def _blank(out, start, end):
    for k in range(start, end):
        if out[k] != "\n":
            out[k] = " "


def line_of(text, offset):
    """1-based line number of a character offset."""
    return text.count("\n", 0, offset) + 1


def iter_blocks(code):
    """Yield (prelude, offset, nesting) for every '{' block in a stylesheet.

    code should already have comments and strings blanked. prelude is
    the stripped text before the brace, offset where that text starts.
    nesting counts enclosing selector blocks including this one; at-rules
    (@media, @include ...) and nested properties (font: {...}) are
    yielded with nesting 0 and don't deepen their children. SCSS
    interpolation #{...} is stepped over.
    """
    stack = []
    start = 0
    i, n = 0, len(code)
    while i < n:
        c = code[i]
        if c == "#" and code.startswith("#{", i):
            close = code.find("}", i)
            i = n if close == -1 else close + 1
            continue
        if c == "{":
            raw = code[start:i]
            prelude = raw.strip()
            offset = start + len(raw) - len(raw.lstrip())
            selector = bool(prelude) and not prelude.startswith("@") and not prelude.endswith(":")
            stack.append(selector)
            yield prelude, offset, (sum(stack) if selector else 0)
            start = i + 1
        elif c == "}":
            if stack:
                stack.pop()
            start = i + 1
        elif c == ";":
            start = i + 1
        i += 1


def matching_close(text, index):
    """Offset of the bracket that closes the one at index, or None."""
    depth = 0
    for i in range(index, len(text)):
        c = text[i]
        if c in _OPENERS:
            depth += 1
        elif c in _CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return None
