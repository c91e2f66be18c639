"""Filename sanitization.

Replaces characters and names that are unsafe in filenames with fullwidth
lookalikes (or removes them), so the result still reads like the input:

    >>> sanitize('report: "Q1/Q2"')
    'report： ＂Q1／Q2＂'
    >>> sanitize("CON.txt")
    'ＣＯＮ.txt'
"""

from __future__ import annotations

import logging

from .exceptions import EmptyResultError
from .rules import DEFAULT_RULESET, RuleSet

logger = logging.getLogger(__name__)

# Windows silently drops these from the end of a name
TRAILING_CHARACTERS = " ."


class Sanitizer:
    """Applies a RuleSet to strings with fixed options.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(
        self,
        extended: bool = True,
        remove: bool = False,
        allow_empty: bool = True,
        ruleset: RuleSet = DEFAULT_RULESET,
    ):
        """Initialize sanitizer.

        Args:
            extended: Also replace characters that are legal in filenames but
                significant in shells, markup and code (brackets, quotes, ...).
            remove: Delete matches instead of replacing them with fullwidth
                lookalikes. Control characters are always deleted and
                whitespace is always normalized, regardless of this flag.
            allow_empty: Return an empty string when nothing is left after
                sanitization. If False, EmptyResultError is raised instead.
            ruleset: Rules to apply.
        """
        self.extended = extended
        self.remove = remove
        self.allow_empty = allow_empty
        self.ruleset = ruleset

    def sanitize(self, text: str) -> str:
        """Sanitize text for use as a filename.

        Args:
            text: Arbitrary text, e.g. a document title.

        Returns:
            Sanitized filename. May be empty if allow_empty is set.

        Raises:
            TypeError: If text is not a str.
            EmptyResultError: If the result is empty and allow_empty is False.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        result = text
        for rule in self.ruleset.base:
            result = rule.apply(result, self.remove)

        if self.extended:
            for rule in self.ruleset.extended:
                result = rule.apply(result, self.remove)
            if self.remove:
                # Deleting punctuation can join a device name back together (CO(N -> CON)
                for rule in self.ruleset.reserved_names:
                    result = rule.apply(result, self.remove)

        result = result.rstrip(TRAILING_CHARACTERS)

        if not result and not self.allow_empty:
            logger.warning(f"Sanitized filename is empty (input: {text!r})")
            raise EmptyResultError(text)

        if result != text:
            logger.debug(f"Sanitized {text!r} -> {result!r}")
        return result

    __call__ = sanitize

    def __repr__(self) -> str:
        return (
            f"Sanitizer(extended={self.extended}, remove={self.remove}, "
            f"allow_empty={self.allow_empty})"
        )


def sanitize(
    text: str,
    extended: bool = True,
    remove: bool = False,
    *,
    allow_empty: bool = True,
) -> str:
    """Sanitize text for use as a filename.

    Control characters are removed, whitespace variants become a plain space,
    characters Windows forbids (< > : " / \\ | ? *) and reserved device names
    (CON, PRN, AUX, NUL, COM1, LPT1, ...) are replaced with fullwidth
    lookalikes, and trailing spaces and dots are trimmed.

    Args:
        text: Arbitrary text.
        extended: Also replace shell/markup/code punctuation.
        remove: Delete matches instead of replacing them.
        allow_empty: If False, raise EmptyResultError instead of returning "".

    Returns:
        Sanitized filename.
    """
    return Sanitizer(extended=extended, remove=remove, allow_empty=allow_empty).sanitize(text)
