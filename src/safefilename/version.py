"""Version information for safefilename."""

from .rules import DEFAULT_RULESET

# Application version (should match pyproject.toml)
APP_VERSION: str = "0.1.0"


def get_version_info() -> dict:
    """Return version information as a dictionary."""
    return {
        "version": APP_VERSION,
        "base_rules": len(DEFAULT_RULESET.base),
        "extended_rules": len(DEFAULT_RULESET.extended),
    }
