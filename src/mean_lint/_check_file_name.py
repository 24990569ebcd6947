"""Filenames are lowercase, words split by dashes, roles split by dots:
user-profile.controller.js, _buttons.scss. Mixed case breaks on
case-insensitive file systems the moment someone renames a file."""

import re

from mean_lint._finding import Finding

_NAME = re.compile(r"^[a-z0-9]+(?:[.-][a-z0-9]+)*$")


def check_file_name(entry, args):
    name = entry.basename
    # SCSS partials are imported, never compiled on their own.
    if entry.ext == ".scss" and name.startswith("_"):
        name = name[1:]
    if _NAME.match(name):
        return []
    return [Finding(
        "file-name", entry.rel, None,
        f"'{entry.basename}' is not lowercase-dashed (e.g. user-list.controller.js)",
    )]
