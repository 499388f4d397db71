"""Token attribute patterns.

A pattern constrains a single token attribute (asset id, blockchain or
symbol). Configuration documents write patterns as plain strings or lists
of strings:

    "USDC"            exact, case-sensitive match
    "*"               matches any value
    "!eth"            matches any value except "eth"
    ["arb", "!eth"]   matches if any element matches

Raw values are parsed once, at configuration load, into a closed set of
variants so that matching is a total function over those variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swapfee.constants import NEGATION_PREFIX, WILDCARD


@dataclass(frozen=True)
class Literal:
    """Exact value match."""

    value: str


@dataclass(frozen=True)
class Wildcard:
    """Matches any value."""


@dataclass(frozen=True)
class Negated:
    """Matches any value except the given literal."""

    value: str


@dataclass(frozen=True)
class AnyOf:
    """Matches if any of the member patterns matches (OR)."""

    patterns: tuple[Literal | Wildcard | Negated, ...]


Pattern = Literal | Wildcard | Negated | AnyOf


def matches(pattern: Pattern, value: str) -> bool:
    """Evaluate a pattern against a single attribute value.

    Args:
        pattern: Parsed pattern
        value: Token attribute value (compared verbatim, no normalization)

    Returns:
        True if the value satisfies the pattern
    """
    match pattern:
        case Wildcard():
            return True
        case Negated(value=excluded):
            return value != excluded
        case Literal(value=expected):
            return value == expected
        case AnyOf(patterns=members):
            return any(matches(member, value) for member in members)
    raise TypeError(f"Unknown pattern type: {type(pattern).__name__}")


def _parse_scalar(raw: Any) -> Literal | Wildcard | Negated:
    if not isinstance(raw, str):
        raise ValueError(f"pattern must be a string, got {type(raw).__name__}")
    if raw == "":
        raise ValueError("pattern must not be an empty string")
    if raw == WILDCARD:
        return Wildcard()
    if raw.startswith(NEGATION_PREFIX):
        excluded = raw[len(NEGATION_PREFIX) :]
        if excluded == "":
            raise ValueError(f"negation pattern {raw!r} must name a value")
        return Negated(excluded)
    return Literal(raw)


def parse_pattern(raw: Any) -> Pattern:
    """Parse a raw configuration value into a Pattern.

    Already-parsed patterns are returned unchanged.

    Raises:
        ValueError: If the value is not a non-empty string or a non-empty
            list of non-empty strings
    """
    if isinstance(raw, Literal | Wildcard | Negated | AnyOf):
        return raw
    if isinstance(raw, list | tuple):
        if not raw:
            raise ValueError("pattern list must not be empty")
        members = []
        for index, item in enumerate(raw):
            try:
                members.append(_parse_scalar(item))
            except ValueError as err:
                raise ValueError(f"pattern list element {index}: {err}") from err
        return AnyOf(tuple(members))
    return _parse_scalar(raw)


def pattern_to_raw(pattern: Pattern) -> str | list[str]:
    """Render a Pattern back into its configuration form."""
    match pattern:
        case Wildcard():
            return WILDCARD
        case Negated(value=excluded):
            return NEGATION_PREFIX + excluded
        case Literal(value=expected):
            return expected
        case AnyOf(patterns=members):
            return [pattern_to_raw(member) for member in members]  # type: ignore[misc]
    raise TypeError(f"Unknown pattern type: {type(pattern).__name__}")
