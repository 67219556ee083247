"""
Password generation options.
"""

from collections import abc
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Mapping, Optional

from .charsets import CHAR_RANGES, CharCategory
from .exceptions import InvalidOptionsError

PRONOUNCEABLE = "Pronounceable"


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options describing how a password is generated.

    Attributes:
        length: Number of characters to produce
        name: Preset name; ``"Pronounceable"`` switches to pronounceable mode
        pattern: Mask applied cyclically over the positions (default ``"X"``)
        include: Extra characters to draw from
        categories: Character categories eligible for wildcard positions
    """

    length: Any = 0
    name: Optional[str] = None
    pattern: Optional[str] = None
    include: Optional[str] = None
    categories: FrozenSet[CharCategory] = field(default_factory=frozenset)

    @property
    def is_pronounceable(self) -> bool:
        return self.name == PRONOUNCEABLE

    def has(self, category: CharCategory) -> bool:
        """Check if a category is enabled."""
        return CharCategory(category) in self.categories

    def with_categories(self, *categories: CharCategory) -> "GenerationOptions":
        """Return a copy with the given categories added."""
        added = frozenset(CharCategory(category) for category in categories)
        return replace(self, categories=self.categories | added)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenerationOptions":
        """
        Build options from the flat mapping form.

        The mapping holds ``length``, optional ``name``, ``pattern`` and
        ``include`` keys and one boolean key per category, e.g.
        ``{"length": 8, "upper": True, "digits": True}``.

        Args:
            data: Flat options mapping

        Returns:
            GenerationOptions instance

        Raises:
            InvalidOptionsError: If the mapping or a string field is malformed
        """
        if not isinstance(data, abc.Mapping):
            raise InvalidOptionsError("Options must be a mapping")

        for key in ("name", "pattern", "include"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise InvalidOptionsError(f"Option '{key}' must be a string")

        categories = frozenset(
            category for category in CHAR_RANGES if data.get(category.value)
        )

        return cls(
            length=data.get("length"),
            name=data.get("name"),
            pattern=data.get("pattern"),
            include=data.get("include"),
            categories=categories,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to the flat mapping form."""
        result: Dict[str, Any] = {"length": self.length}

        if self.name is not None:
            result["name"] = self.name
        if self.pattern is not None:
            result["pattern"] = self.pattern
        if self.include is not None:
            result["include"] = self.include

        for category in CHAR_RANGES:
            if category in self.categories:
                result[category.value] = True

        return result
