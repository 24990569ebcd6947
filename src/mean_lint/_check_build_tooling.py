"""The build is Gulp driving Browserify, the tests Karma driving Jasmine.
Anyone cloning the project should get all of it from `npm install`
and a gulpfile: no globally installed tool assumed."""

import json
import os

from mean_lint._finding import Finding


def check_build_tooling(entry, args):
    findings = []
    if "gulpfile.js" not in entry.filenames:
        findings.append(Finding("build-tooling", "gulpfile.js", None, "no gulpfile.js at project root"))

    if "package.json" not in entry.filenames:
        findings.append(Finding("build-tooling", "package.json", None, "no package.json at project root"))
        return findings

    try:
        with open(os.path.join(entry.full, "package.json"), encoding="utf-8") as f:
            package = json.load(f)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        findings.append(Finding("build-tooling", "package.json", None, f"unreadable package.json: {exc}"))
        return findings
    if not isinstance(package, dict):
        findings.append(Finding("build-tooling", "package.json", None, "package.json is not an object"))
        return findings

    declared = set()
    for section in ("dependencies", "devDependencies"):
        deps = package.get(section)
        if isinstance(deps, dict):
            declared.update(deps)
    missing = [tool for tool in args.required_tools if tool not in declared]
    if missing:
        findings.append(Finding(
            "build-tooling", "package.json", None,
            f"not declared in dependencies/devDependencies: {', '.join(missing)}",
        ))
    return findings
