"""What mean-lint watches for: constants shared by the checks."""

SKIP_DIRS = {
    ".git", "node_modules", "bower_components", "dist", "build",
    "coverage", ".tmp", ".sass-cache", ".idea", ".vscode",
}

# Extensions the scanner hands to file rules. Everything else is
# walked past silently.
SOURCE_EXTS = {".js", ".scss", ".css", ".html"}

# Jasmine specs. Karma picks these up, so they follow test rules,
# not source rules.
SPEC_PATTERNS = ["*.spec.js", "*.test.js"]

# Methods on an angular.module that register a named component.
REGISTRATIONS = (
    "controller", "service", "factory", "directive", "filter",
    "provider", "component",
)

# Registrations that take an injectable function. config/run have
# no name but still get injected.
INJECTABLES = (
    "controller", "service", "factory", "directive", "filter",
    "provider", "decorator", "config", "run",
)

FOCUSED_SPECS = ("fdescribe", "fit", "ddescribe", "iit")

VETTED_MARK = "mean-lint:vetted"

DEFAULTS = {
    "source_max": 800,
    "test_max": 500,
    "nesting_max": 3,
    "entry_max": 3,
    "app_dir": "src/app",
    "required_tools": ["gulp", "browserify", "karma", "karma-jasmine"],
    "ignore": [],
    "enable": [],
    "disable": [],
    "strict": False,
}

# Printed under the laws so anyone reading the output knows how
# the guide wants a front end laid out.
PRINCIPLES = [
    "Folders are modules: each one has an index.js that names it",
    "One component per file, named after what it is",
    "Styles live in SCSS partials, never inline",
    "Every source file ships with the spec that proves it",
]
