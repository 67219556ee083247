"""
Pattern mask resolution.

A pattern mask is applied cyclically over the password positions. Each mask
character resolves to a token telling the assembler where that position's
character comes from.
"""

import logging
from enum import Enum
from typing import Dict, Iterator, NamedTuple, Optional

from ..charsets import (
    CATEGORY_BY_PATTERN_CHAR,
    INCLUDE_PATTERN_CHAR,
    WILDCARD_PATTERN_CHAR,
    CharCategory,
    chars_for,
)

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Where a position's character comes from."""

    WILDCARD = "wildcard"  # coverage pool
    CATEGORY = "category"
    INCLUDE = "include"
    LITERAL = "literal"


class PatternToken(NamedTuple):
    """Resolved mask character."""
    kind: TokenKind
    chars: str  # set to draw from, or the literal itself
    category: Optional[CharCategory] = None

    @property
    def is_wildcard(self) -> bool:
        return self.kind is TokenKind.WILDCARD

    @property
    def is_literal(self) -> bool:
        return self.kind is TokenKind.LITERAL


WILDCARD = PatternToken(TokenKind.WILDCARD, "")


class PatternResolver:
    """Resolve mask characters to tokens, caching each distinct character."""

    def __init__(self, include: Optional[str] = None):
        """
        Initialize resolver.

        Args:
            include: Characters selected by the include mask character
        """
        self.include = include or ""
        self._cache: Dict[str, PatternToken] = {}

    def resolve(self, mask_char: str) -> PatternToken:
        """
        Resolve a single mask character.

        Args:
            mask_char: One character of the pattern mask

        Returns:
            PatternToken for the character
        """
        token = self._cache.get(mask_char)
        if token is None:
            token = self._resolve_uncached(mask_char)
            self._cache[mask_char] = token
        return token

    def _resolve_uncached(self, mask_char: str) -> PatternToken:
        if mask_char == WILDCARD_PATTERN_CHAR:
            return WILDCARD

        category = CATEGORY_BY_PATTERN_CHAR.get(mask_char)
        if category is not None:
            return PatternToken(TokenKind.CATEGORY, chars_for(category), category)

        if mask_char == INCLUDE_PATTERN_CHAR:
            if self.include:
                return PatternToken(TokenKind.INCLUDE, self.include)
            # Nothing to draw from, keep the position as a literal
            logger.warning("Pattern references include set but none is configured")

        return PatternToken(TokenKind.LITERAL, mask_char)

    def tokens(self, pattern: str, length: int) -> Iterator[PatternToken]:
        """
        Yield one token per position, cycling through the mask.

        Args:
            pattern: Non-empty pattern mask
            length: Number of positions

        Yields:
            PatternToken for each position in order
        """
        for i in range(length):
            yield self.resolve(pattern[i % len(pattern)])


def count_wildcards(pattern: str, length: int) -> int:
    """Count positions of a cyclic mask that draw from the coverage pool."""
    if not pattern or length <= 0:
        return 0

    full_cycles, remainder = divmod(length, len(pattern))
    return (
        full_cycles * pattern.count(WILDCARD_PATTERN_CHAR)
        + pattern[:remainder].count(WILDCARD_PATTERN_CHAR)
    )
