"""How mean-lint communicates: laws first, then the verdict."""

import json

from mean_lint._laws import PRINCIPLES, VETTED_MARK


def _law_options(args):
    options = dict(vars(args))
    options["required_tools"] = ", ".join(args.required_tools)
    return options


def print_laws(args, rules):
    """State the law before enforcing it: no secret rules.
    Limits are configurable, so the active values are printed."""
    options = _law_options(args)
    print("Laws:")
    for i, rule in enumerate(rules, 1):
        print(f"  {i}. [{rule.name}] {rule.law.format(**options)}")
    print()
    print("Principles:")
    for principle in PRINCIPLES:
        print(f"  - {principle}")
    print()


def print_report(violations, vetted, lines=False):
    """Two sections: unvetted (actionable) and vetted (acknowledged).
    Everything is visible: nothing hides. --strict only counts unvetted."""
    if not violations and not vetted:
        print("No violations found.")
        return

    # Unvetted: nobody has reviewed these yet.
    if violations:
        by_rule = {}
        for f in violations:
            by_rule.setdefault(f.rule, []).append(f)

        print(f"\n{'Rule':<20}  {'Count':>5}  Detail")
        print("-" * 88)
        for rule, entries in sorted(by_rule.items()):
            for i, f in enumerate(entries):
                label = rule if i == 0 else ""
                count = str(len(entries)) if i == 0 else ""
                print(f"{label:<20}  {count:>5}  {f.location}: {f.message}")
                if lines and f.spans:
                    for name, start, end in f.spans:
                        print(f"{'':>28}  {name:<36s} L{start}-L{end}")
        print(f"\n{len(violations)} violation(s)")
        print(f"To vet a file: add '{VETTED_MARK}' in a comment within its first 10 lines.")

    # Vetted: reviewed and accepted. Still visible, but won't block CI.
    if vetted:
        print(f"\n--- vetted ({len(vetted)}) ---")
        for f in vetted:
            print(f"  [{f.rule}] {f.location}: {f.message}")
            if lines and f.spans:
                for name, start, end in f.spans:
                    print(f"{'':>4}  {name:<36s} L{start}-L{end}")

    if not violations:
        print("No unvetted violations.")


def summarize(violations, vetted):
    by_rule = {}
    for f in violations:
        by_rule[f.rule] = by_rule.get(f.rule, 0) + 1
    return {
        "violations": len(violations),
        "vetted": len(vetted),
        "by_rule": dict(sorted(by_rule.items())),
    }


def print_json(violations, vetted):
    """Machine-readable report for CI annotations and editors."""
    print(json.dumps({
        "violations": [f.as_dict() for f in violations],
        "vetted": [f.as_dict() for f in vetted],
        "summary": summarize(violations, vetted),
    }, indent=2))
