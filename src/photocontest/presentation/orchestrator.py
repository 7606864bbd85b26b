"""Drive a full copy run across the selected categories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Collection, Optional

from photocontest.categories.discovery import CategoryDiscovery
from photocontest.categories.models import CategoryIdentifier
from photocontest.errors import PreconditionError

from .copier import CategoryCopier
from .models import AnomalyReport, CategoryOutcome
from .slides import SlideResolver

LOGGER = logging.getLogger(__name__)


class CopyOrchestrator:
    """Copy every selected category, and optionally its slide, into a presentation."""

    def __init__(
        self,
        *,
        discovery: CategoryDiscovery | None = None,
        copier: CategoryCopier | None = None,
        slides: SlideResolver | None = None,
    ) -> None:
        self.discovery = discovery or CategoryDiscovery()
        self.copier = copier or CategoryCopier()
        self.slides = slides or SlideResolver()

    def run(
        self,
        categories_root: Path,
        presentation_dir: Path,
        only: Collection[str] = (),
        skip: int = 0,
        slides_dir: Path | None = None,
        on_category: Optional[Callable[[CategoryOutcome], None]] = None,
        on_create: Optional[Callable[[Path], None]] = None,
    ) -> AnomalyReport:
        """Copy categories under ``categories_root`` into ``presentation_dir``.

        Args:
            categories_root: Directory containing one directory per category.
            presentation_dir: Destination directory, created when absent.
            only: Raw category names to restrict the run to (all when empty).
            skip: Leading photos to skip in every category.
            slides_dir: Directory holding slides; slides are disabled when absent.
            on_category: Callable invoked with each category outcome as it completes.
            on_create: Callable invoked with ``presentation_dir`` before it is created.

        Returns:
            AnomalyReport: Aggregated outcomes and anomalies.

        Raises:
            PreconditionError: If ``categories_root`` is missing or unreadable,
                or a category name cannot be parsed.
            PhotoCopyError: If any file copy fails.
        """
        if not categories_root.is_dir():
            raise PreconditionError(
                f"No categories '{categories_root}' found; did you run 'init'?"
            )

        if slides_dir is not None and not slides_dir.is_dir():
            LOGGER.warning(
                "Specified slides directory (%s) not present. Ignoring...", slides_dir
            )
            slides_dir = None

        if not presentation_dir.is_dir() and on_create is not None:
            on_create(presentation_dir)
        presentation_dir.mkdir(parents=True, exist_ok=True)

        names = self.discovery.filter_names(self.discovery.list_names(categories_root), only)
        report = AnomalyReport(slides_enabled=slides_dir is not None)

        for name in names:
            category = CategoryIdentifier.parse(name)
            copy_result = self.copier.copy(category, categories_root / name, presentation_dir, skip)
            slide = None
            if slides_dir is not None:
                slide = self.slides.resolve(category, slides_dir, presentation_dir)

            outcome = CategoryOutcome(copy_result=copy_result, slide=slide)
            report = report.with_outcome(outcome)
            if on_category is not None:
                on_category(outcome)

        LOGGER.info(
            "Copied %d photos from %d categories into %s",
            report.total_copied,
            len(report.categories),
            presentation_dir,
        )
        return report


__all__ = ["CopyOrchestrator"]
