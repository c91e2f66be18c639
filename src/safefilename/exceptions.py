"""Exceptions raised by the sanitizer."""

from __future__ import annotations


class EmptyResultError(ValueError):
    """Raised when sanitization leaves nothing and empty results are disallowed."""

    def __init__(self, original: str):
        self.original = original
        super().__init__(f"Sanitized filename is empty (input: {original!r})")
