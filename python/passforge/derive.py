"""
Reverse derivation of generation options from an existing password.
"""

import logging
from typing import Callable, Optional, Protocol, Set, Union

from .charsets import CharCategory, categories_of
from .options import GenerationOptions

logger = logging.getLogger(__name__)


class CharacterSource(Protocol):
    """Anything that can hand out its characters one at a time."""

    def for_each_char(self, callback: Callable[[str], None]) -> None:
        ...


class OptionsDeriver:
    """Accumulate length and categories one character at a time."""

    def __init__(self) -> None:
        self.length = 0
        self.categories: Set[CharCategory] = set()

    def feed(self, char: str) -> None:
        """Account for one more password character."""
        self.length += 1
        self.categories.update(categories_of(char))

    def result(self) -> GenerationOptions:
        return GenerationOptions(length=self.length, categories=frozenset(self.categories))


def derive_options(password: Optional[Union[CharacterSource, str]]) -> GenerationOptions:
    """
    Derive the options that plausibly produced ``password``.

    Only length and categories are inferred; pattern and include set are
    left unset. Characters outside every category count toward the length
    only. Length counts code points, so a character outside the BMP such
    as an emoji counts once.

    Args:
        password: ProtectedValue-like character source, plain string, or None

    Returns:
        GenerationOptions with length and category flags
    """
    deriver = OptionsDeriver()

    if password is None:
        return deriver.result()

    if isinstance(password, str):
        for char in password:
            deriver.feed(char)
    else:
        password.for_each_char(deriver.feed)

    options = deriver.result()
    logger.debug(
        f"Derived length {options.length} with categories "
        f"{sorted(category.value for category in options.categories)}"
    )
    return options
