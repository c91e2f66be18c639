"""safefilename - sanitize arbitrary strings for use as filenames."""

from .exceptions import EmptyResultError
from .rules import DEFAULT_RULESET, Rule, RuleKind, RuleSet, build_ruleset
from .sanitizer import Sanitizer, sanitize
from .version import APP_VERSION as __version__

__all__ = [
    "DEFAULT_RULESET",
    "EmptyResultError",
    "Rule",
    "RuleKind",
    "RuleSet",
    "Sanitizer",
    "build_ruleset",
    "sanitize",
    "__version__",
]
