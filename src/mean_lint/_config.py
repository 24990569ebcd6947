"""Where options come from: built-in defaults, then a config file,
then the command line, each layer overriding the one before.

The config file is --config FILE, else .meanlintrc.json at the root,
else the "meanLint" key of the root package.json. Keys are the long
option names with underscores:

    {"source_max": 400, "app_dir": "client/app", "disable": ["id-selector"]}
"""

import json
import logging
import os

from mean_lint._laws import DEFAULTS

log = logging.getLogger(__name__)

CONFIG_FILE = ".meanlintrc.json"
PACKAGE_KEY = "meanLint"

_TYPES = {
    "source_max": int,
    "test_max": int,
    "nesting_max": int,
    "entry_max": int,
    "app_dir": str,
    "ignore": list,
    "enable": list,
    "disable": list,
    "required_tools": list,
    "strict": bool,
}

# Patterns from the file and the command line add up; every other
# option is replaced outright by the later layer.
_ADDITIVE = {"ignore"}


class ConfigError(ValueError):
    """Bad configuration file, option value, or rule name."""


def _read_json(path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc


def validate(data, source):
    """Check keys and value types; return a plain dict."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a JSON object, got {type(data).__name__}")
    for key, value in data.items():
        expected = _TYPES.get(key)
        if expected is None:
            raise ConfigError(f"{source}: unknown option '{key}' (known: {', '.join(sorted(_TYPES))})")
        # bool is an int subclass; a "source_max": true is a mistake.
        if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"{source}: '{key}' must be an integer")
        if expected is int and value < 0:
            raise ConfigError(f"{source}: '{key}' must not be negative")
        if expected is not int and not isinstance(value, expected):
            raise ConfigError(f"{source}: '{key}' must be a {expected.__name__}")
        if expected is list and not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{source}: '{key}' must be a list of strings")
    return dict(data)


def load_config(root, path=None):
    """Find and validate the config for root. No config file is not an error."""
    if path:
        return validate(_read_json(path), path)

    rc = os.path.join(root, CONFIG_FILE)
    if os.path.isfile(rc):
        log.debug("config from %s", rc)
        return validate(_read_json(rc), CONFIG_FILE)

    pkg = os.path.join(root, "package.json")
    if os.path.isfile(pkg):
        try:
            package = _read_json(pkg)
        except ConfigError as exc:
            # build-tooling reports the broken package.json itself.
            log.debug("ignoring package.json for config: %s", exc)
            return {}
        if isinstance(package, dict) and PACKAGE_KEY in package:
            log.debug("config from package.json#%s", PACKAGE_KEY)
            return validate(package[PACKAGE_KEY], f"package.json#{PACKAGE_KEY}")
    return {}


def apply_config(args, config):
    """Fill every option the command line left unset. Mutates args."""
    for key, default in DEFAULTS.items():
        cli = getattr(args, key, None)
        if key in _ADDITIVE:
            merged = list(config.get(key, default)) + list(cli or [])
            setattr(args, key, merged)
        elif cli is None:
            value = config.get(key, default)
            setattr(args, key, list(value) if isinstance(value, list) else value)
    for key in ("source_max", "test_max", "nesting_max", "entry_max"):
        if getattr(args, key) < 0:
            raise ConfigError(f"--{key.replace('_', '-')} must not be negative")
    return args
