"""
Pattern-driven password generation.
"""

import logging
import numbers
from typing import Any, List, Mapping, Optional, Union

from ..charsets import CharCategory, ranges_for
from ..exceptions import InvalidLengthError, InvalidOptionsError, NoEligibleCategoriesError
from ..options import GenerationOptions
from ..random_source import RandomSource, get_random_source
from .coverage import CategoryCoverageSampler
from .pattern import PatternResolver, count_wildcards
from .pronounceable import PronounceableGenerator

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords from categories, include sets and pattern masks."""

    DEFAULT_PATTERN = "X"

    def __init__(self, options: GenerationOptions, random_source: Optional[RandomSource] = None):
        """
        Initialize password generator with options.

        Args:
            options: Generation options
            random_source: Source of randomness (defaults to the system CSPRNG)
        """
        self.options = options
        self.random = random_source or get_random_source()

    @property
    def pattern(self) -> str:
        return self.options.pattern or self.DEFAULT_PATTERN

    def eligible_sets(self) -> List[str]:
        """
        Character sets that wildcard positions may draw from.

        Selected categories come in table order, followed by the include
        set when it is not empty.
        """
        sets = ranges_for(self.options.categories)
        if self.options.include:
            sets.append(self.options.include)
        return sets

    def validate(self) -> int:
        """
        Check options shape.

        Returns:
            The validated length

        Raises:
            InvalidLengthError: If length is missing, not a whole number, or negative
        """
        length = self.options.length
        if isinstance(length, float) and length.is_integer():
            length = int(length)
        # bool is an Integral subclass but never a meaningful length
        if isinstance(length, bool) or not isinstance(length, numbers.Integral):
            raise InvalidLengthError(f"Length must be a whole number, got {length!r}")
        if length < 0:
            raise InvalidLengthError(f"Length cannot be negative: {length}")
        return int(length)

    def generate(self) -> str:
        """
        Generate a password.

        Returns:
            Generated password of exactly ``options.length`` characters

        Raises:
            InvalidLengthError: If the length is invalid
            NoEligibleCategoriesError: If no category or include set is enabled
        """
        length = self.validate()

        if self.options.is_pronounceable:
            return PronounceableGenerator(self.random).generate(
                length, uppercase=self.options.has(CharCategory.UPPER)
            )

        sets = self.eligible_sets()
        if not sets:
            raise NoEligibleCategoriesError("At least one character category must be enabled")

        pattern = self.pattern
        wildcard_count = count_wildcards(pattern, length)
        pool = CategoryCoverageSampler(sets, self.random).sample(wildcard_count)
        resolver = PatternResolver(self.options.include)

        chars = []
        for token in resolver.tokens(pattern, length):
            if token.is_wildcard:
                chars.append(pool.next_char())
            elif token.is_literal:
                chars.append(token.chars)
            else:
                chars.append(self.random.choice(token.chars))

        logger.debug(
            f"Generated {length}-character password with {wildcard_count} wildcard "
            f"positions from {len(sets)} sets"
        )
        return "".join(chars)

    def get_charset_info(self) -> str:
        """
        Get human-readable description of the options.

        Returns:
            Description of enabled categories, include set and pattern
        """
        if self.options.is_pronounceable:
            info = "pronounceable"
            if self.options.has(CharCategory.UPPER):
                info += " (with uppercase)"
            return info

        parts = [category.value for category in CharCategory if self.options.has(category)]
        if self.options.include:
            parts.append(f"{len(self.options.include)} custom characters")

        info = ", ".join(parts) if parts else "nothing"

        if self.pattern != self.DEFAULT_PATTERN:
            info += f" (pattern '{self.pattern}')"

        return info


def generate(options: Union[GenerationOptions, Mapping[str, Any]],
             random_source: Optional[RandomSource] = None) -> str:
    """
    Generate a password, never raising on bad options.

    Args:
        options: GenerationOptions or the flat mapping form
        random_source: Source of randomness (defaults to the system CSPRNG)

    Returns:
        Generated password, or an empty string if the options are unusable
    """
    try:
        if not isinstance(options, GenerationOptions):
            options = GenerationOptions.from_dict(options)
        return PasswordGenerator(options, random_source).generate()
    except InvalidOptionsError as e:
        logger.debug(f"Returning empty password: {e}")
        return ""
