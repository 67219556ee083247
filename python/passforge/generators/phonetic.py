"""
Pronounceable lowercase strings built from English-like syllables.

Output is fully determined by the seed, so the caller controls the entropy
by drawing the seed from a CSPRNG.
"""

import random
import re


class PhoneticGenerator:
    """Generate pronounceable strings of an exact length from a seed."""

    ONSETS = [
        'b', 'bl', 'br', 'ch', 'd', 'dr', 'f', 'fl', 'fr', 'g', 'gl', 'gr',
        'h', 'j', 'k', 'kl', 'kr', 'l', 'm', 'n', 'p', 'pl', 'pr', 'qu', 'r',
        's', 'sk', 'sl', 'sm', 'sn', 'sp', 'st', 'str', 'sw', 't', 'th', 'tr',
        'tw', 'v', 'w', 'wh', 'z'
    ]

    NUCLEI = ['a', 'e', 'i', 'o', 'u', 'ai', 'au', 'ea', 'ee', 'ie', 'oa', 'oo', 'ou']

    CODAS = [
        '', '', '', 'b', 'ch', 'd', 'f', 'g', 'k', 'l', 'lk', 'lt', 'm', 'mp',
        'n', 'nd', 'ng', 'nk', 'nt', 'p', 'r', 'rd', 'rk', 'rm', 'rn', 'rt',
        's', 'sh', 'sk', 'st', 't', 'th', 'x', 'z'
    ]

    _TRIPLES = re.compile(r'(.)\1{2,}')

    def _syllable(self, rng: random.Random) -> str:
        """Generate a single onset-nucleus-coda syllable."""
        return rng.choice(self.ONSETS) + rng.choice(self.NUCLEI) + rng.choice(self.CODAS)

    def generate(self, length: int, seed: str) -> str:
        """
        Generate a pronounceable string.

        Args:
            length: Exact number of characters to produce
            seed: Seed string; equal seeds give equal output

        Returns:
            Lowercase alphabetic string of exactly ``length`` characters
        """
        if length <= 0:
            return ""

        rng = random.Random(seed)
        word = ""
        while len(word) < length:
            word = self._TRIPLES.sub(r'\1\1', word + self._syllable(rng))

        return word[:length]
