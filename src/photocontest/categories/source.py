"""Category list data files used to seed the categories tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from photocontest.errors import PreconditionError

from .models import CATEGORY_PATTERN

LOGGER = logging.getLogger(__name__)


def read_category_source(source: Path) -> list[str]:
    """Return category names from a comma-separated data file.

    Only lines starting with a digit are records; blank lines, ``#`` comments
    and header rows are skipped. The first field of each record is the name.
    Bytes that are not valid UTF-8 are replaced, since only the leading
    category field matters.

    Raises:
        PreconditionError: If the file cannot be read.
    """
    try:
        lines = source.read_text(encoding="utf-8-sig", errors="replace").splitlines()
    except OSError as exc:
        raise PreconditionError(
            f"Error opening categories source '{source}' for reading: {exc}"
        ) from exc

    categories: list[str] = []
    for line in lines:
        if not CATEGORY_PATTERN.match(line):
            continue
        categories.append(line.split(",", 1)[0].strip())
    LOGGER.debug("Read %d categories from %s", len(categories), source)
    return categories


def create_category_tree(root: Path, categories: Iterable[str]) -> list[Path]:
    """Create ``root`` and one directory per category beneath it.

    Returns:
        list[Path]: Created (or already present) category directories, in order.
    """
    root.mkdir(parents=True, exist_ok=True)
    created: list[Path] = []
    for name in categories:
        path = root / name
        path.mkdir(parents=True, exist_ok=True)
        created.append(path)
    return created


__all__ = ["read_category_source", "create_category_tree"]
