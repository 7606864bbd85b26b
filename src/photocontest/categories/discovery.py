"""Category directory discovery utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection, Iterable

from photocontest.errors import PreconditionError

from .models import CATEGORY_PATTERN, sort_category_names

LOGGER = logging.getLogger(__name__)


def parse_only_values(values: Iterable[str]) -> set[str]:
    """Gather repeated, comma-joined ``--only`` values into a set of names."""
    joined = ",".join(values)
    return {item.strip() for item in joined.split(",") if item.strip()}


class CategoryDiscovery:
    """Find category directories under a categories root."""

    def list_names(self, root: Path) -> list[str]:
        """Return child directory names of ``root`` that begin with a digit.

        Raises:
            PreconditionError: If ``root`` cannot be read.
        """
        try:
            entries = list(root.iterdir())
        except OSError as exc:
            raise PreconditionError(f"Error opening dir {root} for reading: {exc}") from exc

        names = [
            entry.name
            for entry in entries
            if CATEGORY_PATTERN.match(entry.name) and entry.is_dir()
        ]
        LOGGER.debug("Discovered %d category directories under %s", len(names), root)
        return names

    def filter_names(self, names: Iterable[str], only: Collection[str] = ()) -> list[str]:
        """Keep names listed in ``only`` (all when empty) and sort them by category."""
        if only:
            selected = [name for name in names if name in only]
        else:
            selected = list(names)
        return sort_category_names(selected)


__all__ = ["CategoryDiscovery", "parse_only_values"]
