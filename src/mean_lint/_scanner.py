"""Walk the project tree and hand out entries: nothing is judged here.

Directories come before the files in them, names sorted, so two runs
over the same tree report in the same order. File content is read on
first use: a rule that only cares about names never touches the disk.
"""

import fnmatch
import logging
import os

from mean_lint._laws import SKIP_DIRS, SOURCE_EXTS, SPEC_PATTERNS, VETTED_MARK

log = logging.getLogger(__name__)

_UNREAD = object()


class SourceDir:
    scope = "dir"

    def __init__(self, rel, full, filenames, subdirs):
        self.rel = rel
        self.full = full
        self.filenames = filenames
        self.subdirs = subdirs

    def __repr__(self):
        return f"SourceDir({self.rel!r})"


class SourceFile:
    scope = "file"

    def __init__(self, rel, full, siblings=()):
        self.rel = rel
        self.full = full
        self.basename = os.path.basename(rel)
        self.ext = os.path.splitext(self.basename)[1].lower()
        self.siblings = frozenset(siblings)
        self._text = _UNREAD

    def __repr__(self):
        return f"SourceFile({self.rel!r})"

    @property
    def text(self):
        """File content, or None when it can't be read as UTF-8."""
        if self._text is _UNREAD:
            try:
                with open(self.full, encoding="utf-8-sig") as f:
                    self._text = f.read()
            except (OSError, UnicodeDecodeError) as exc:
                log.debug("unreadable %s: %s", self.rel, exc)
                self._text = None
        return self._text

    @property
    def lines(self):
        text = self.text
        return [] if text is None else text.splitlines()

    @property
    def is_spec(self):
        return is_spec(self.basename)


def is_spec(basename):
    return any(fnmatch.fnmatch(basename, pat) for pat in SPEC_PATTERNS)


def in_app_dir(rel, app_dir):
    """True for app_dir itself and anything below it."""
    app_dir = app_dir.strip("/") or "."
    if app_dir == ".":
        return True
    return rel == app_dir or rel.startswith(app_dir + "/")


def is_vetted(entry):
    """The mark belongs near the top: a file comment or the header.
    Only the first 10 lines count so it can't hide mid-file.
    Directories have no header, so their findings are never vetted."""
    if not isinstance(entry, SourceFile):
        return False
    return any(VETTED_MARK in line for line in entry.lines[:10])


def _ignored(name, rel, ignore):
    return any(fnmatch.fnmatch(name, pat) or fnmatch.fnmatch(rel, pat) for pat in ignore)


def walk(root, ignore=()):
    """Yield a SourceDir for every directory under root, followed by a
    SourceFile for each source file directly inside it."""
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = _rel(dirpath, root)
        kept = []
        for d in sorted(dirnames):
            rel = _join(rel_dir, d)
            if d in SKIP_DIRS or _ignored(d, rel, ignore):
                log.debug("skipping %s", rel)
                continue
            kept.append(d)
        dirnames[:] = kept

        # --ignore drops files from checking, not from the directory:
        # an ignored spec still pairs with its source file.
        names = sorted(filenames)
        yield SourceDir(rel_dir, dirpath, names, list(kept))

        for fname in names:
            if os.path.splitext(fname)[1].lower() not in SOURCE_EXTS:
                continue
            rel = _join(rel_dir, fname)
            if _ignored(fname, rel, ignore):
                continue
            yield SourceFile(rel, os.path.join(dirpath, fname), names)


def _rel(path, root):
    rel = os.path.relpath(path, root)
    return rel.replace(os.sep, "/")


def _join(rel_dir, name):
    return name if rel_dir == "." else f"{rel_dir}/{name}"
