"""
Pronounceable password generation with an optional uppercase overlay.
"""

import logging
import math
from typing import Optional

from ..random_source import RandomSource, get_random_source
from .phonetic import PhoneticGenerator

logger = logging.getLogger(__name__)


class PronounceableGenerator:
    """Generate pronounceable passwords."""

    SEED_BYTES = 10
    UPPER_EVERY = 8  # one uppercase position per this many characters

    def __init__(self, random_source: Optional[RandomSource] = None,
                 phonetic: Optional[PhoneticGenerator] = None):
        """
        Initialize generator.

        Args:
            random_source: Source of randomness for the seed and casing
            phonetic: Phonetic generator to delegate to
        """
        self.random = random_source or get_random_source()
        self.phonetic = phonetic or PhoneticGenerator()

    def generate(self, length: int, uppercase: bool = False) -> str:
        """
        Generate a pronounceable password.

        Positions to uppercase are drawn independently, so the same position
        may be picked twice and fewer than ``ceil(length / 8)`` characters
        end up uppercased.

        Args:
            length: Exact password length
            uppercase: Uppercase about one character in eight

        Returns:
            Password of exactly ``length`` alphabetic characters
        """
        if length <= 0:
            return ""

        seed = self.random.hex_token(self.SEED_BYTES)
        word = self.phonetic.generate(length, seed)[:length]

        upper_positions = set()
        if uppercase:
            for _ in range(math.ceil(length / self.UPPER_EVERY)):
                upper_positions.add(self.random.randbelow(length))

        logger.debug(
            f"Generated {length}-character pronounceable password, "
            f"{len(upper_positions)} uppercase positions"
        )
        return "".join(
            ch.upper() if i in upper_positions else ch
            for i, ch in enumerate(word)
        )
