"""Specs that mock $httpBackend must verify it afterwards, usually in
an afterEach:

    afterEach(function() {
        $httpBackend.verifyNoOutstandingExpectation();
        $httpBackend.verifyNoOutstandingRequest();
    });

Without both, an expected request that never fires passes silently."""

import re

from mean_lint._finding import Finding
from mean_lint._source_text import blank_comments, line_of

_VERIFY_CALLS = ("verifyNoOutstandingExpectation", "verifyNoOutstandingRequest")
_BACKEND = re.compile(r"\$httpBackend")


def check_http_backend_verify(entry, args):
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text)
    first = _BACKEND.search(code)
    if first is None:
        return []

    missing = [
        call for call in _VERIFY_CALLS
        if not re.search(r"\.\s*" + call + r"\s*\(", code)
    ]
    if not missing:
        return []
    return [Finding(
        "http-backend-verify", entry.rel, line_of(code, first.start()),
        f"uses $httpBackend without {' or '.join(f'{c}()' for c in missing)}",
    )]
