"""Result and report models produced by a presentation copy run."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from photocontest.categories.models import CategoryIdentifier


class CopiedPhoto(BaseModel):
    """A single photo copied into the presentation.

    Attributes:
        source: Photo inside the category directory.
        destination: Presentation file written for it.
        sequence: 1-based position within the category.
    """

    source: Path
    destination: Path
    sequence: int


class CopyResult(BaseModel):
    """Outcome of copying one category.

    Attributes:
        category: Category that was copied.
        copied: Photos copied, in presentation order.
        skipped: Leading photos excluded by the skip count.
        short: Whether the category has too few entries to present.
    """

    category: CategoryIdentifier
    copied: List[CopiedPhoto] = Field(default_factory=list)
    skipped: List[Path] = Field(default_factory=list)
    short: bool = False

    @property
    def count(self) -> int:
        """Return the number of photos copied."""
        return len(self.copied)


class SlideResult(BaseModel):
    """Outcome of looking up a category slide.

    Attributes:
        category: Category the slide belongs to.
        source: Slide image that was found, if any.
        destination: Presentation file written for the slide, if any.
    """

    category: CategoryIdentifier
    source: Optional[Path] = None
    destination: Optional[Path] = None

    @property
    def found(self) -> bool:
        """Return True when a slide was copied."""
        return self.source is not None


class ShortCategory(BaseModel):
    """A regular category with fewer entries than expected."""

    category: str
    count: int


class CategoryOutcome(BaseModel):
    """Combined copy and slide results for one category."""

    copy_result: CopyResult
    slide: Optional[SlideResult] = None


class AnomalyReport(BaseModel):
    """Findings accumulated over one copy run.

    Attributes:
        short_categories: Regular categories with too few copied photos.
        missing_slides: Categories for which no slide image was found.
        categories: Per-category outcomes in presentation order.
        slides_enabled: Whether slide lookup was active for the run.
    """

    short_categories: List[ShortCategory] = Field(default_factory=list)
    missing_slides: List[str] = Field(default_factory=list)
    categories: List[CategoryOutcome] = Field(default_factory=list)
    slides_enabled: bool = False

    @property
    def has_anomalies(self) -> bool:
        """Return True when any short category or missing slide was recorded."""
        return bool(self.short_categories or self.missing_slides)

    @property
    def total_copied(self) -> int:
        """Return the number of photos copied across all categories."""
        return sum(outcome.copy_result.count for outcome in self.categories)

    def with_outcome(self, outcome: CategoryOutcome) -> AnomalyReport:
        """Return a new report that folds in one category outcome."""
        short = list(self.short_categories)
        if outcome.copy_result.short:
            result = outcome.copy_result
            short.append(ShortCategory(category=result.category.name, count=result.count))
        missing = list(self.missing_slides)
        if outcome.slide is not None and not outcome.slide.found:
            missing.append(outcome.slide.category.name)
        return self.model_copy(
            update={
                "short_categories": short,
                "missing_slides": missing,
                "categories": [*self.categories, outcome],
            }
        )


__all__ = [
    "AnomalyReport",
    "CategoryOutcome",
    "CopiedPhoto",
    "CopyResult",
    "ShortCategory",
    "SlideResult",
]
