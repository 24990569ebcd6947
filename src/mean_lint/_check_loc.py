"""Long files hide components. Specs are denser, so they get their own limit."""

from mean_lint._finding import Finding


def check_loc(entry, args):
    loc = len(entry.lines)
    limit = args.test_max if entry.is_spec else args.source_max
    if loc > limit:
        kind = "spec" if entry.is_spec else "source"
        return [Finding(
            "loc", entry.rel, None,
            f"{loc} lines ({kind}, limit {limit}, over by {loc - limit})",
        )]
    return []
