"""Presentation assembly: copying, slides, and anomaly reporting."""

from .cleanup import remove_trees
from .copier import CategoryCopier
from .models import (
    AnomalyReport,
    CategoryOutcome,
    CopiedPhoto,
    CopyResult,
    ShortCategory,
    SlideResult,
)
from .orchestrator import CopyOrchestrator
from .slides import SlideResolver

__all__ = [
    "AnomalyReport",
    "CategoryCopier",
    "CategoryOutcome",
    "CopiedPhoto",
    "CopyOrchestrator",
    "CopyResult",
    "ShortCategory",
    "SlideResolver",
    "SlideResult",
    "remove_trees",
]
