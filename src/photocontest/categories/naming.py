"""Canonical presentation filenames."""

from __future__ import annotations

from .models import CategoryIdentifier

SLIDE_SEQUENCE = 0


def sequence_name(category: CategoryIdentifier | str, seq: int | None) -> str:
    """Return the presentation filename for a category position.

    ``seq=None`` produces the bare ``0012a.jpg`` form; any integer produces
    ``0012a-<seq>.jpg``.

    Raises:
        CategoryParseError: If ``category`` is a string that cannot be parsed.
    """
    if isinstance(category, str):
        category = CategoryIdentifier.parse(category)
    stem = f"{category.number:04d}{category.suffix}"
    if seq is None:
        return f"{stem}.jpg"
    return f"{stem}-{seq}.jpg"


def slide_names(category: CategoryIdentifier | str) -> tuple[str, str]:
    """Return accepted slide filenames in lookup order (``-0`` form first)."""
    return (sequence_name(category, SLIDE_SEQUENCE), sequence_name(category, None))


__all__ = ["SLIDE_SEQUENCE", "sequence_name", "slide_names"]
