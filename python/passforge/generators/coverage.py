"""
Coverage-guaranteed character pool for wildcard positions.

When a pattern has at least as many wildcard positions as there are
eligible character sets, every set contributes at least one character.
The remaining positions are filled from uniformly chosen sets and the
whole pool is shuffled so the forced characters are not clustered.
"""

import logging
from typing import Optional, Sequence, Tuple

from ..exceptions import NoEligibleCategoriesError
from ..random_source import RandomSource, get_random_source

logger = logging.getLogger(__name__)


class CoveragePool:
    """Immutable, pre-shuffled characters read through a cursor."""

    def __init__(self, chars: Sequence[str]):
        self.chars: Tuple[str, ...] = tuple(chars)
        self._cursor = 0

    def __len__(self) -> int:
        return len(self.chars)

    def next_char(self) -> str:
        """
        Return the next unread character.

        Raises:
            IndexError: If the pool is exhausted
        """
        if self._cursor >= len(self.chars):
            raise IndexError("Coverage pool exhausted")
        char = self.chars[self._cursor]
        self._cursor += 1
        return char


class CategoryCoverageSampler:
    """Sample wildcard characters so that every eligible set is represented."""

    def __init__(self, eligible_sets: Sequence[str], random_source: Optional[RandomSource] = None):
        """
        Initialize sampler.

        Args:
            eligible_sets: Non-empty character sets to draw from
            random_source: Source of randomness (defaults to the system CSPRNG)
        """
        self.eligible_sets = [chars for chars in eligible_sets if chars]
        self.random = random_source or get_random_source()

    def sample(self, wildcard_count: int) -> CoveragePool:
        """
        Build the pool for ``wildcard_count`` positions.

        Args:
            wildcard_count: Number of wildcard positions in the pattern

        Returns:
            CoveragePool with exactly ``wildcard_count`` characters

        Raises:
            NoEligibleCategoriesError: If characters are needed but no set is eligible
        """
        if wildcard_count <= 0:
            return CoveragePool(())

        if not self.eligible_sets:
            raise NoEligibleCategoriesError("No character set available for wildcard positions")

        # Forced sets come in random order so that, with fewer slots than
        # sets, the covered subset is not always the first sets of the table
        forced = list(self.eligible_sets)
        self.random.shuffle(forced)

        if wildcard_count < len(forced):
            logger.debug(
                f"Only {wildcard_count} wildcard positions for {len(forced)} sets, "
                "coverage is partial"
            )

        chars = []
        for i in range(wildcard_count):
            if i < len(forced):
                charset = forced[i]
            else:
                charset = self.random.choice(self.eligible_sets)
            chars.append(self.random.choice(charset))

        self.random.shuffle(chars)
        return CoveragePool(chars)
