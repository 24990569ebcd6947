"""Templates carry structure, stylesheets carry looks. A style=""
attribute or a <style> block is a rule nobody will find when grepping
the SCSS. ng-style is left alone: it binds state, not looks."""

import re

from mean_lint._finding import Finding
from mean_lint._source_text import line_of

_HTML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_STYLE_ATTR = re.compile(r"<[A-Za-z][\w-]*\b[^>]*?\sstyle\s*=", re.IGNORECASE)
_STYLE_BLOCK = re.compile(r"<style(?=[\s>/])", re.IGNORECASE)


def _blank_html_comments(text):
    return _HTML_COMMENT.sub(lambda m: re.sub(r"[^\n]", " ", m.group()), text)


def check_inline_style(entry, args):
    text = entry.text
    if text is None:
        return []
    markup = _blank_html_comments(text)

    findings = [
        Finding("inline-style", entry.rel, line_of(markup, m.end() - 1), "style attribute in template")
        for m in _STYLE_ATTR.finditer(markup)
    ]
    findings += [
        Finding("inline-style", entry.rel, line_of(markup, m.start()), "<style> block in template")
        for m in _STYLE_BLOCK.finditer(markup)
    ]
    findings.sort(key=lambda f: f.line)
    return findings
