"""Copy one category's photos into the presentation directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from photocontest.categories.models import SPECIAL_AWARD_THRESHOLD, CategoryIdentifier
from photocontest.categories.naming import sequence_name
from photocontest.errors import PhotoCopyError, PreconditionError

from .models import CopiedPhoto, CopyResult

LOGGER = logging.getLogger(__name__)

SHORT_CATEGORY_THRESHOLD = 3


def replace_file(source: Path, destination: Path) -> None:
    """Copy ``source`` to ``destination``, deleting any existing file first.

    Raises:
        PhotoCopyError: If the copy fails.
    """
    try:
        if destination.is_file():
            destination.unlink()
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise PhotoCopyError(f"Failed to copy {source} to {destination}: {exc}") from exc


class CategoryCopier:
    """Copy and rename category photos into presentation sequence names."""

    def __init__(
        self,
        *,
        photo_suffix: str = ".jpg",
        short_threshold: int = SHORT_CATEGORY_THRESHOLD,
        special_award_threshold: int = SPECIAL_AWARD_THRESHOLD,
    ) -> None:
        self.photo_suffix = photo_suffix.lower()
        self.short_threshold = short_threshold
        self.special_award_threshold = special_award_threshold

    def list_photos(self, source: Path) -> list[Path]:
        """Return photos in ``source`` sorted by filename.

        Raises:
            PreconditionError: If ``source`` cannot be read.
        """
        try:
            names = [entry.name for entry in source.iterdir()]
        except OSError as exc:
            raise PreconditionError(f"Error opening dir {source} for reading: {exc}") from exc
        photos = [name for name in sorted(names) if name.lower().endswith(self.photo_suffix)]
        return [source / name for name in photos]

    def copy(
        self,
        category: CategoryIdentifier,
        source: Path,
        destination: Path,
        skip: int = 0,
    ) -> CopyResult:
        """Copy the photos of one category into ``destination``.

        The first ``skip`` photos in filename order are left out; the rest are
        numbered from 1 and written under their sequence names, replacing any
        file already at that path.

        Args:
            category: Category being copied.
            source: Category directory holding the photos.
            destination: Presentation directory.
            skip: Number of leading photos to exclude.

        Returns:
            CopyResult: Copied photos and whether the category is short.

        Raises:
            ValueError: If ``skip`` is negative.
            PreconditionError: If ``source`` cannot be read.
            PhotoCopyError: If any photo cannot be copied.
        """
        if skip < 0:
            raise ValueError("skip must be a non-negative count")

        photos = self.list_photos(source)
        skipped, selected = photos[:skip], photos[skip:]

        copied: list[CopiedPhoto] = []
        for sequence, photo in enumerate(selected, start=1):
            target = destination / sequence_name(category, sequence)
            LOGGER.debug("Copying %s -> %s", photo, target)
            replace_file(photo, target)
            copied.append(CopiedPhoto(source=photo, destination=target, sequence=sequence))

        short = len(copied) < self.short_threshold and not category.is_special_award(
            self.special_award_threshold
        )
        if short:
            LOGGER.warning("Category %s has only %d entries.", category, len(copied))
        return CopyResult(category=category, copied=copied, skipped=skipped, short=short)


__all__ = ["CategoryCopier", "SHORT_CATEGORY_THRESHOLD", "replace_file"]
