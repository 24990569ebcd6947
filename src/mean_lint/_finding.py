"""One thing the checker found: where it is and what's wrong."""

from typing import NamedTuple, Optional


class Finding(NamedTuple):
    rule: str
    path: str
    line: Optional[int]
    message: str
    # (name, start, end) per component, expanded by --lines.
    spans: Optional[list] = None

    @property
    def location(self):
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"

    def as_dict(self):
        data = {
            "rule": self.rule,
            "path": self.path,
            "line": self.line,
            "message": self.message,
        }
        if self.spans:
            data["spans"] = [
                {"name": name, "start": start, "end": end}
                for name, start, end in self.spans
            ]
        return data
