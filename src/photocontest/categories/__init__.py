"""Category identifiers, naming, and discovery."""

from .discovery import CategoryDiscovery, parse_only_values
from .models import (
    SPECIAL_AWARD_THRESHOLD,
    CategoryIdentifier,
    compare_categories,
    sort_category_names,
)
from .naming import SLIDE_SEQUENCE, sequence_name, slide_names
from .source import create_category_tree, read_category_source

__all__ = [
    "CategoryDiscovery",
    "CategoryIdentifier",
    "SLIDE_SEQUENCE",
    "SPECIAL_AWARD_THRESHOLD",
    "compare_categories",
    "create_category_tree",
    "parse_only_values",
    "read_category_source",
    "sequence_name",
    "slide_names",
    "sort_category_names",
]
