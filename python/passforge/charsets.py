"""
Character categories used by the password generators.

The table is built once at import time and exposed read-only; every
generator shares the same mapping.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping


class CharCategory(str, Enum):
    """Named character category."""

    UPPER = "upper"
    LOWER = "lower"
    DIGITS = "digits"
    SPECIAL = "special"
    BRACKETS = "brackets"
    HIGH = "high"
    AMBIGUOUS = "ambiguous"


# Upper/lower/digits leave out the glyphs collected in AMBIGUOUS
CHAR_RANGES: Mapping[CharCategory, str] = MappingProxyType({
    CharCategory.UPPER: "ABCDEFGHJKLMNPQRSTUVWXYZ",
    CharCategory.LOWER: "abcdefghijkmnpqrstuvwxyz",
    CharCategory.DIGITS: "123456789",
    CharCategory.SPECIAL: '!@#$%^&*_+-=,./?;:`"~\'\\',
    CharCategory.BRACKETS: "(){}[]<>",
    CharCategory.HIGH: (
        "¡¢£¤¥¦§©ª«¬®¯°±²³´µ¶¹º»¼½¾¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖ×ØÙÚÛÜÝÞß"
        "àáâãäåæçèéêëìíîïðñòóôõö÷øùúûüýþ"
    ),
    CharCategory.AMBIGUOUS: "O0oIl",
})

# Mask characters that select a whole category
CATEGORY_BY_PATTERN_CHAR: Mapping[str, CharCategory] = MappingProxyType({
    "A": CharCategory.UPPER,
    "a": CharCategory.LOWER,
    "1": CharCategory.DIGITS,
    "*": CharCategory.SPECIAL,
    "[": CharCategory.BRACKETS,
    "Ä": CharCategory.HIGH,
    "0": CharCategory.AMBIGUOUS,
})

WILDCARD_PATTERN_CHAR = "X"
INCLUDE_PATTERN_CHAR = "I"


def chars_for(category: CharCategory) -> str:
    """Return the character set of a category."""
    return CHAR_RANGES[CharCategory(category)]


def ranges_for(categories: Iterable[CharCategory]) -> List[str]:
    """
    Return the character sets of the given categories.

    Sets are returned in table order regardless of the order of
    ``categories``, so selection is reproducible.

    Args:
        categories: Categories to look up

    Returns:
        List of character sets
    """
    wanted = {CharCategory(category) for category in categories}
    return [chars for category, chars in CHAR_RANGES.items() if category in wanted]


def categories_of(char: str) -> FrozenSet[CharCategory]:
    """Return every category whose set contains ``char``."""
    return frozenset(
        category for category, chars in CHAR_RANGES.items() if char in chars
    )
