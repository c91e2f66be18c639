"""Rule tables for filename sanitization.

Rules are applied in table order, each one operating on the output of the
previous one. The tables are built once at import time and never mutated.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing import Callable, Dict, Iterable, Tuple, Union

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[["re.Match[str]"], str]]


class RuleKind(str, Enum):
    """Category of a sanitization rule."""

    CONTROL = "control"
    WHITESPACE = "whitespace"
    CHARACTER = "character"
    RESERVED_NAME = "reserved_name"
    EXTENDED = "extended"


# Control characters and whitespace are never affected by the remove flag
_FIXED_KINDS = {RuleKind.CONTROL, RuleKind.WHITESPACE}


@dataclass(frozen=True)
class Rule:
    """A single pattern -> replacement substitution."""

    pattern: "re.Pattern[str]"
    replacement: Replacement
    kind: RuleKind
    description: str = ""
    removal: Replacement = ""  # Used instead of replacement when removing

    @property
    def removable(self) -> bool:
        """Whether the remove flag switches this rule to its removal form."""
        return self.kind not in _FIXED_KINDS

    def apply(self, text: str, remove: bool = False) -> str:
        """Apply the rule to every match in text.

        Args:
            text: Input text.
            remove: Use the removal replacement instead of the lookalike.

        Returns:
            Text with all matches substituted.
        """
        replacement = self.removal if remove and self.removable else self.replacement
        return self.pattern.sub(replacement, text)


@dataclass(frozen=True)
class RuleSet:
    """Ordered base rules plus the opt-in extended rules."""

    base: Tuple[Rule, ...]
    extended: Tuple[Rule, ...] = ()
    # Reserved device name rules of the base set, in order
    reserved_names: Tuple[Rule, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        reserved = tuple(rule for rule in self.base if rule.kind is RuleKind.RESERVED_NAME)
        object.__setattr__(self, "reserved_names", reserved)

    def __iter__(self):
        yield from self.base
        yield from self.extended

    def __len__(self) -> int:
        return len(self.base) + len(self.extended)


def to_fullwidth(text: str) -> str:
    """Map printable ASCII (except space) to the Halfwidth and Fullwidth Forms block."""
    return "".join(
        chr(ord(ch) + 0xFEE0) if "!" <= ch <= "~" else ch
        for ch in text
    )


def _literal_rules(table: Dict[str, str], kind: RuleKind) -> Tuple[Rule, ...]:
    return tuple(
        Rule(
            pattern=re.compile(re.escape(char)),
            replacement=replacement,
            kind=kind,
            description=f"{char!r} -> {replacement!r}",
        )
        for char, replacement in table.items()
    )


def case_permutations(name: str) -> Tuple[str, ...]:
    """Return every upper/lower case combination of name.

    Example:
        >>> case_permutations("ab")
        ('AB', 'Ab', 'aB', 'ab')
    """
    return tuple(
        "".join(chars)
        for chars in product(*((ch.upper(), ch.lower()) for ch in name))
    )


def _reserved_rule(name: str, numbered: bool) -> Rule:
    """Build the anchored rule for one reserved device name.

    The name is spelled out in all case permutations rather than matched with
    re.IGNORECASE, which would also accept non-ASCII case folds. Spaces and
    dots directly after the name are part of the match since they are
    trimmed from the final result. Removal deletes the whole match,
    extension included.
    """
    variants = "|".join(case_permutations(name))
    digits = r"(?P<digits>[0-9]+)" if numbered else ""
    pattern = re.compile(
        rf"\A(?P<name>{variants}){digits}(?P<tail>[ .]*(?:\..*)?)\Z",
        re.DOTALL,
    )

    def replace(match: "re.Match[str]") -> str:
        return to_fullwidth(match.group("name")) + _suffix(match)

    label = f"{name}<digits>" if numbered else name
    return Rule(
        pattern=pattern,
        replacement=replace,
        kind=RuleKind.RESERVED_NAME,
        description=f"reserved device name {label}[.ext]",
        removal="",
    )


def _suffix(match: "re.Match[str]") -> str:
    groups = match.groupdict()
    return (groups.get("digits") or "") + groups["tail"]


# Unicode category Cc: C0 controls, DEL and C1 controls
CONTROL_CHARACTERS = r"[\x00-\x1f\x7f-\x9f]"

WHITESPACE_CHARACTERS = (
    r"[\r\n\t\f\v\x00\u00a0\u2002-\u200b\u202f\u205f\u3000\ufeff]"
)

# Characters Windows forbids in filenames
FORBIDDEN_CHARACTERS: Dict[str, str] = {
    "<": "＜",
    ">": "＞",
    ":": "：",
    '"': "＂",
    "/": "／",
    "\\": "＼",
    "|": "｜",
    "?": "？",
    "*": "＊",
}

RESERVED_NAMES: Tuple[str, ...] = ("CON", "PRN", "AUX", "NUL")
NUMBERED_RESERVED_NAMES: Tuple[str, ...] = ("COM", "LPT")

# Legal in filenames, but significant in shells, markup and code
EXTENDED_CHARACTERS: Dict[str, str] = {
    "[": "［",
    "]": "］",
    "=": "＝",
    ";": "；",
    ",": "，",
    "&": "＆",
    "$": "＄",
    "#": "＃",
    "(": "（",
    ")": "）",
    "~": "～",
    "`": "｀",
    "'": "＇",
    "!": "！",
    "{": "｛",
    "}": "｝",
    "%": "％",
    "+": "＋",
    "‘": "＇",  # left single quotation mark
    "’": "＇",  # right single quotation mark
    "«": "＂",  # left guillemet
    "»": "＂",  # right guillemet
    "”": "＂",  # right double quotation mark
    "“": "＂",  # left double quotation mark
}


def _build_base_rules() -> Tuple[Rule, ...]:
    rules = [
        Rule(
            pattern=re.compile(CONTROL_CHARACTERS),
            replacement="",
            kind=RuleKind.CONTROL,
            description="strip control characters",
        ),
        Rule(
            pattern=re.compile(WHITESPACE_CHARACTERS),
            replacement=" ",
            kind=RuleKind.WHITESPACE,
            description="normalize whitespace to U+0020",
        ),
    ]
    rules.extend(_literal_rules(FORBIDDEN_CHARACTERS, RuleKind.CHARACTER))
    rules.extend(_reserved_rule(name, numbered=False) for name in RESERVED_NAMES)
    rules.extend(_reserved_rule(name, numbered=True) for name in NUMBERED_RESERVED_NAMES)
    return tuple(rules)


def build_ruleset(extra: Iterable[Rule] = ()) -> RuleSet:
    """Build the default rule set, optionally appending rules to the extended set.

    Args:
        extra: Additional rules applied after the built-in extended rules.

    Returns:
        A new immutable RuleSet.
    """
    base = _build_base_rules()
    extended = _literal_rules(EXTENDED_CHARACTERS, RuleKind.EXTENDED) + tuple(extra)
    logger.debug(f"Built rule set: {len(base)} base rules, {len(extended)} extended rules")
    return RuleSet(base=base, extended=extended)


DEFAULT_RULESET: RuleSet = build_ruleset()
