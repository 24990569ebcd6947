"""A module's index.js is its public face. Browserify stitches modules
together through require(), so the index must declare the angular
module and export it. Otherwise the parent can't list it as a
dependency:

    module.exports = angular.module('app.users', [require('./detail').name]);
"""

import re

from mean_lint._finding import Finding
from mean_lint._scanner import in_app_dir
from mean_lint._source_text import blank_comments

# Only the setter form declares: angular.module('x') just looks one up.
_DECLARES = re.compile(r"\bangular\s*\.\s*module\s*\(\s*(['\"])[^'\"\n]+\1\s*,\s*\[")
_EXPORTS = re.compile(r"\bmodule\s*\.\s*exports\s*=(?!=)")


def check_module_export(entry, args):
    if entry.basename != "index.js" or not in_app_dir(entry.rel, args.app_dir):
        return []
    text = entry.text
    if text is None:
        return []
    code = blank_comments(text)

    missing = []
    if not _DECLARES.search(code):
        missing.append("angular.module(...)")
    if not _EXPORTS.search(code):
        missing.append("module.exports")
    if missing:
        return [Finding(
            "module-export", entry.rel, None,
            f"module index is missing {' and '.join(missing)}",
        )]
    return []
