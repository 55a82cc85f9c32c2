"""Pairing predicates: which two symbols count as a match on a given level."""
from __future__ import annotations

from typing import Optional, Protocol, Tuple

from pairlink.constants import PAIR_SEPARATOR, PAIR_SUFFIXES, SPECIAL_LEVEL

_PAIR_PREFIX = "pair"


class MatchRule(Protocol):
    """Interface shared by the pairing variants."""

    name: str

    def matches(self, a: str, b: str) -> bool:
        ...

    def group_key(self, symbol: str) -> Optional[str]:
        ...


class IdentityRule:
    """General levels: identical symbols pair up."""

    name = "identity"

    def matches(self, a: str, b: str) -> bool:
        return bool(a) and a == b

    def group_key(self, symbol: str) -> Optional[str]:
        return symbol or None


class PairedTagRule:
    """Special level: ``pairNNN_1`` pairs only with ``pairNNN_2``."""

    name = "paired_tag"

    def matches(self, a: str, b: str) -> bool:
        left = parse_tagged_symbol(a)
        right = parse_tagged_symbol(b)
        if left is None or right is None:
            return False
        return left[0] == right[0] and left[1] != right[1]

    def group_key(self, symbol: str) -> Optional[str]:
        parsed = parse_tagged_symbol(symbol)
        return parsed[0] if parsed else None


def parse_tagged_symbol(symbol: str) -> Optional[Tuple[str, str]]:
    """Split ``pair007_2`` into ``("pair007", "2")``; None when not a tagged pair."""
    if not symbol:
        return None
    base, sep, suffix = symbol.rpartition(PAIR_SEPARATOR)
    if not sep or not base.startswith(_PAIR_PREFIX):
        return None
    if suffix not in PAIR_SUFFIXES:
        return None
    return base, suffix


def tagged_symbol(base: str, suffix: str) -> str:
    return f"{base}{PAIR_SEPARATOR}{suffix}"


IDENTITY_RULE = IdentityRule()
PAIRED_TAG_RULE = PairedTagRule()


def rule_for_level(level: int) -> MatchRule:
    if level == SPECIAL_LEVEL:
        return PAIRED_TAG_RULE
    return IDENTITY_RULE
