"""Specs sit next to the code they test: user.service.js beside
user.service.spec.js. Karma globs them from the same tree Browserify
bundles, and a missing neighbour is visible in any `ls`."""

from mean_lint._finding import Finding
from mean_lint._scanner import in_app_dir


def check_spec_pairing(entry, args):
    if entry.is_spec or entry.basename == "index.js":
        return []
    if not in_app_dir(entry.rel, args.app_dir):
        return []
    stem = entry.basename[:-len(".js")]
    candidates = (f"{stem}.spec.js", f"{stem}.test.js")
    if any(name in entry.siblings for name in candidates):
        return []
    return [Finding("spec-pairing", entry.rel, None, f"no {candidates[0]} beside it")]
