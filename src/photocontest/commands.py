"""Typed command variants and their dispatch."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field

from photocontest.archive import ArchiveBuilder, find_tool
from photocontest.categories import (
    CategoryDiscovery,
    create_category_tree,
    read_category_source,
)
from photocontest.config import PhotoContestConfig
from photocontest.manual import render_manual
from photocontest.presentation import (
    AnomalyReport,
    CategoryCopier,
    CategoryOutcome,
    CopyOrchestrator,
    SlideResolver,
    remove_trees,
)


class InitCommand(BaseModel):
    """Create the category directory tree from a data file."""

    kind: Literal["init"] = "init"
    datafile: Path
    categories_dir: Path


class CopyCommand(BaseModel):
    """Copy categories into the presentation directory."""

    kind: Literal["copy"] = "copy"
    categories_dir: Path
    presentation_dir: Path
    only: List[str] = Field(default_factory=list)
    skip: int = Field(default=0, ge=0)
    slides_dir: Optional[Path] = None

    @staticmethod
    def path_overrides(words: Sequence[str]) -> dict[str, str]:
        """Map positional words to dotted ``paths`` configuration overrides.

        Two words name both directories; a single word names the presentation.
        """
        if len(words) > 1:
            return {"paths.categories_dir": words[0], "paths.presentation_dir": words[1]}
        if len(words) == 1:
            return {"paths.presentation_dir": words[0]}
        return {}


class CleanupCommand(BaseModel):
    """Remove generated directories."""

    kind: Literal["cleanup"] = "cleanup"
    paths: List[Path]

    @classmethod
    def from_words(cls, words: Sequence[str], config: PhotoContestConfig) -> CleanupCommand:
        """Use the given paths, or both default directories when none are given."""
        if words:
            return cls(paths=[Path(word) for word in words])
        return cls(
            paths=[Path(config.paths.categories_dir), Path(config.paths.presentation_dir)]
        )


class ArchiveCommand(BaseModel):
    """Archive the presentation directory."""

    kind: Literal["archive"] = "archive"
    presentation_dir: Path
    tool: Optional[str] = None
    file_name: Optional[str] = None


class ManualCommand(BaseModel):
    """Display the manual."""

    kind: Literal["manual"] = "manual"


Command = Union[InitCommand, CopyCommand, CleanupCommand, ArchiveCommand, ManualCommand]


class CommandHooks(BaseModel):
    """Progress callbacks used while a command runs."""

    on_category: Optional[Callable[[CategoryOutcome], None]] = None
    on_remove: Optional[Callable[[Path, bool], None]] = None
    on_directory: Optional[Callable[[Path], None]] = None


def build_orchestrator(config: PhotoContestConfig) -> CopyOrchestrator:
    """Return an orchestrator configured from the copy settings."""
    settings = config.copying
    copier = CategoryCopier(
        photo_suffix=settings.photo_suffix,
        short_threshold=settings.short_category_threshold,
        special_award_threshold=settings.special_award_threshold,
    )
    return CopyOrchestrator(discovery=CategoryDiscovery(), copier=copier, slides=SlideResolver())


def execute(
    command: Command,
    config: PhotoContestConfig,
    hooks: CommandHooks | None = None,
) -> Union[List[Path], AnomalyReport, Path, None]:
    """Run a command and return its result.

    Returns:
        Created category directories for ``init``, the anomaly report for
        ``copy``, removed paths for ``cleanup``, the archive path for
        ``archive``, and None for ``manual``.
    """
    hooks = hooks or CommandHooks()

    if isinstance(command, InitCommand):
        categories = read_category_source(command.datafile)
        if hooks.on_directory is not None and not command.categories_dir.is_dir():
            hooks.on_directory(command.categories_dir)
        created = create_category_tree(command.categories_dir, categories)
        if hooks.on_directory is not None:
            for path in created:
                hooks.on_directory(path)
        return created

    if isinstance(command, CopyCommand):
        return build_orchestrator(config).run(
            command.categories_dir,
            command.presentation_dir,
            only=set(command.only),
            skip=command.skip,
            slides_dir=command.slides_dir,
            on_category=hooks.on_category,
            on_create=hooks.on_directory,
        )

    if isinstance(command, CleanupCommand):
        return remove_trees(command.paths, on_remove=hooks.on_remove)

    if isinstance(command, ArchiveCommand):
        tool = find_tool(command.tool, preferred=config.archive.preferred_tools)
        return ArchiveBuilder(tool).build(command.presentation_dir, command.file_name)

    if isinstance(command, ManualCommand):
        render_manual()
        return None

    raise TypeError(f"Unsupported command: {command!r}")


__all__ = [
    "ArchiveCommand",
    "CleanupCommand",
    "Command",
    "CommandHooks",
    "CopyCommand",
    "InitCommand",
    "ManualCommand",
    "build_orchestrator",
    "execute",
]
