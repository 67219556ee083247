"""
Cryptographically secure randomness for the generators.

Every random decision made while building a password (set selection,
character selection, shuffling, casing) goes through a single
``RandomSource`` so that nothing mixes in a non-cryptographic generator.
"""

import secrets
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform random values drawn from a CSPRNG byte stream."""

    def random_bytes(self, n: int) -> bytes:
        """
        Return ``n`` uniformly random bytes.

        Subclasses override this to plug in another byte source; all other
        methods are built on top of it.
        """
        return secrets.token_bytes(n)

    def randbelow(self, n: int) -> int:
        """
        Return a uniform integer in ``[0, n)``.

        Uses bitmask rejection sampling: draw just enough bits to cover
        ``n - 1`` and retry on values outside the range, so there is no
        modulo bias.

        Args:
            n: Exclusive upper bound, must be positive

        Returns:
            Random integer
        """
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        if n == 1:
            return 0

        bits = (n - 1).bit_length()
        mask = (1 << bits) - 1
        num_bytes = (bits + 7) // 8

        while True:
            value = int.from_bytes(self.random_bytes(num_bytes), "big") & mask
            if value < n:
                return value

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]

    def shuffle(self, seq: MutableSequence[T]) -> None:
        """Shuffle ``seq`` in place (Fisher-Yates)."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.randbelow(i + 1)
            seq[i], seq[j] = seq[j], seq[i]

    def hex_token(self, num_bytes: int) -> str:
        """Return ``num_bytes`` random bytes as a lowercase hex string."""
        return self.random_bytes(num_bytes).hex()


def get_random_source() -> RandomSource:
    """
    Get the default random source.

    Returns:
        RandomSource backed by the operating system CSPRNG
    """
    return RandomSource()
