"""Every folder under the app is an angular module, and index.js is
where it says so. A folder of loose scripts has no name to require."""

from mean_lint._finding import Finding
from mean_lint._scanner import in_app_dir, is_spec


def check_module_index(entry, args):
    if not in_app_dir(entry.rel, args.app_dir):
        return []
    sources = [f for f in entry.filenames if f.endswith(".js") and not is_spec(f)]
    if not sources or "index.js" in entry.filenames:
        return []
    listed = ", ".join(sources[:5])
    return [Finding(
        "module-index", entry.rel, None,
        f"{len(sources)} script(s) but no index.js ({listed})",
    )]
