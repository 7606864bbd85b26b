"""Per-category slide lookup."""

from __future__ import annotations

import logging
from pathlib import Path

from photocontest.categories.models import CategoryIdentifier
from photocontest.categories.naming import slide_names

from .copier import replace_file
from .models import SlideResult

LOGGER = logging.getLogger(__name__)


class SlideResolver:
    """Find a category's slide image and copy it into the presentation."""

    def resolve(
        self, category: CategoryIdentifier, slides_dir: Path, destination: Path
    ) -> SlideResult:
        """Copy the first matching slide (``0012-0.jpg`` then ``0012.jpg``).

        The slide keeps its own filename in ``destination``. A missing slide is
        logged and reported through an empty result; it never aborts the run.

        Raises:
            PhotoCopyError: If a slide exists but cannot be copied.
        """
        for name in slide_names(category):
            candidate = slides_dir / name
            if candidate.is_file():
                target = destination / name
                LOGGER.debug("Copying slide %s -> %s", candidate, target)
                replace_file(candidate, target)
                return SlideResult(category=category, source=candidate, destination=target)

        LOGGER.warning("No slide file found for category %s.", category)
        return SlideResult(category=category)


__all__ = ["SlideResolver"]
