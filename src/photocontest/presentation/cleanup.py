"""Removal of generated directory trees."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Iterable, Optional


def remove_trees(
    paths: Iterable[Path],
    on_remove: Optional[Callable[[Path, bool], None]] = None,
) -> list[Path]:
    """Recursively delete each directory in ``paths``.

    Args:
        paths: Directories to remove.
        on_remove: Callable invoked with each path and whether it existed.

    Returns:
        list[Path]: Paths that were actually removed.
    """
    removed: list[Path] = []
    for path in paths:
        exists = path.exists()
        if on_remove is not None:
            on_remove(path, exists)
        if not exists:
            continue
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
        removed.append(path)
    return removed


__all__ = ["remove_trees"]
