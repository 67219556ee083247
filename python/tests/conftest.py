"""
Shared fixtures for Passforge tests.
"""

import random

import pytest

from passforge.random_source import RandomSource


class SeededRandomSource(RandomSource):
    """Reproducible byte source for tests."""

    def __init__(self, seed: int = 0):
        self.rng = random.Random(seed)
        self.bytes_drawn = 0

    def random_bytes(self, n: int) -> bytes:
        self.bytes_drawn += n
        return bytes(self.rng.getrandbits(8) for _ in range(n))


class ScriptedRandomSource(RandomSource):
    """Byte source replaying a fixed byte sequence."""

    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.position = 0

    def random_bytes(self, n: int) -> bytes:
        chunk = self.data[self.position:self.position + n]
        if len(chunk) < n:
            raise AssertionError("Scripted random bytes exhausted")
        self.position += n
        return chunk


@pytest.fixture
def seeded_random():
    """Deterministic random source."""
    return SeededRandomSource(1234)
