"""Category identifiers and their presentation ordering."""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from photocontest.errors import CategoryParseError

# Loose match: anything after the optional single suffix character is ignored.
CATEGORY_PATTERN = re.compile(r"^(\d+)(\w?)")
SPECIAL_AWARD_THRESHOLD = 900


class CategoryIdentifier(BaseModel):
    """Parsed category name such as ``12`` or ``12a``.

    Attributes:
        name: Raw directory or record name the identifier was parsed from.
        number: Numeric part of the category.
        suffix: Optional single-character suffix (empty when absent).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    number: int = Field(ge=0)
    suffix: str = Field(default="", max_length=1)

    @classmethod
    def parse(cls, name: str) -> CategoryIdentifier:
        """Parse a category name into its number and suffix.

        Args:
            name: Category name; must start with a digit.

        Returns:
            CategoryIdentifier: Parsed identifier.

        Raises:
            CategoryParseError: If the name has no leading digits.
        """
        match = CATEGORY_PATTERN.match(name)
        if match is None:
            raise CategoryParseError(f"Bad category name: {name!r}")
        return cls(name=name, number=int(match.group(1)), suffix=match.group(2))

    @property
    def sort_key(self) -> tuple[int, str]:
        """Return the ``(number, suffix)`` key used for presentation order."""
        return (self.number, self.suffix)

    def is_special_award(self, threshold: int = SPECIAL_AWARD_THRESHOLD) -> bool:
        """Return True when the category is a special-award category."""
        return self.number >= threshold

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CategoryIdentifier):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.name


def compare_categories(a: CategoryIdentifier, b: CategoryIdentifier) -> int:
    """Three-way comparison: number numerically, then suffix with empty first."""
    if a.sort_key < b.sort_key:
        return -1
    if a.sort_key > b.sort_key:
        return 1
    return 0


def sort_category_names(names: Iterable[str]) -> list[str]:
    """Sort raw category names in presentation order.

    Raises:
        CategoryParseError: If any name cannot be parsed.
    """
    parsed = [CategoryIdentifier.parse(name) for name in names]
    return [category.name for category in sorted(parsed, key=cmp_to_key(compare_categories))]


__all__ = [
    "CATEGORY_PATTERN",
    "SPECIAL_AWARD_THRESHOLD",
    "CategoryIdentifier",
    "compare_categories",
    "sort_category_names",
]
