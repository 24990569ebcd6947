"""Apply every active rule to every entry, sort findings into buckets.

The evaluator runs each check regardless of vetting. The mean-lint:vetted
mark only decides which bucket (violations vs vetted) the findings
land in: nothing hides.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from mean_lint._rules import applicable
from mean_lint._scanner import is_vetted, walk

log = logging.getLogger(__name__)


def check_entry(entry, rules, args):
    """All findings for one entry, in rule order."""
    findings = []
    for rule in applicable(rules, entry):
        findings.extend(rule.check(entry, args))
    return findings


def evaluate(root, args, rules):
    """Walk root and return (violations, vetted), both in scan order.

    Entries are independent, so --jobs N fans them out over a thread
    pool; map() keeps results in submission order.
    """
    violations = []
    vetted = []

    def run(entry):
        return entry, check_entry(entry, rules, args)

    entries = walk(root, args.ignore)
    jobs = getattr(args, "jobs", 1) or 1
    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results = list(pool.map(run, entries))
    else:
        results = map(run, entries)

    scanned = 0
    for entry, findings in results:
        scanned += 1
        if not findings:
            continue
        bucket = vetted if is_vetted(entry) else violations
        bucket.extend(findings)

    log.debug("scanned %d entries: %d violation(s), %d vetted", scanned, len(violations), len(vetted))
    return violations, vetted
