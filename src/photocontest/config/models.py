"""Configuration models describing photocontest settings."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class PhotoContestBaseModel(BaseModel):
    """Shared configuration for photocontest Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class PathSettings(PhotoContestBaseModel):
    """Default directory names used when commands omit positional paths.

    Attributes:
        categories_dir: Directory holding one sub-directory per category.
        presentation_dir: Directory receiving the renamed presentation files.
    """

    categories_dir: str = "Categories"
    presentation_dir: str = "Presentation"


class CopySettings(PhotoContestBaseModel):
    """Options governing how category photos are copied.

    Attributes:
        photo_suffix: Filename suffix (case-insensitive) identifying photos.
        short_category_threshold: Counts below this value are reported as short.
        special_award_threshold: Categories numbered at or above this are exempt.
        skip: Default number of leading photos to skip per category.
    """

    photo_suffix: str = ".jpg"
    short_category_threshold: int = Field(default=3, ge=0)
    special_award_threshold: int = Field(default=900, ge=0)
    skip: int = Field(default=0, ge=0)


class ArchiveSettings(PhotoContestBaseModel):
    """Archive tool preferences.

    Attributes:
        preferred_tools: Tool names searched on the path, in order.
    """

    preferred_tools: List[str] = Field(default_factory=lambda: ["zip", "tar"])


class LoggingSettings(PhotoContestBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class CLIOptions(PhotoContestBaseModel):
    """CLI behavior defaults.

    Attributes:
        quiet_default: Whether commands suppress progress output by default.
    """

    quiet_default: bool = False


class PhotoContestConfig(PhotoContestBaseModel):
    """Top-level configuration struct for photocontest.

    Attributes:
        paths: Default directory names.
        copying: Photo copy settings.
        archive: Archive tool settings.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    paths: PathSettings = Field(default_factory=PathSettings)
    copying: CopySettings = Field(default_factory=CopySettings)
    archive: ArchiveSettings = Field(default_factory=ArchiveSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "PhotoContestBaseModel",
    "PathSettings",
    "CopySettings",
    "ArchiveSettings",
    "LoggingSettings",
    "CLIOptions",
    "PhotoContestConfig",
]
