"""Archive tool lookup."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Literal, Sequence

from pydantic import BaseModel

from photocontest.errors import ToolResolutionError

ToolKind = Literal["zip", "tar"]

TOOL_ARGUMENTS: dict[str, tuple[str, ...]] = {
    "zip": ("-r", "-9"),
    "tar": ("-cvzf",),
}
TOOL_SUFFIXES: dict[str, str] = {
    "zip": "zip",
    "tar": "tgz",
}


class ArchiveTool(BaseModel):
    """Resolved archive executable.

    Attributes:
        path: Location of the executable.
        kind: Tool family, which selects arguments and archive suffix.
    """

    path: Path
    kind: ToolKind

    @property
    def suffix(self) -> str:
        """Return the archive file suffix produced by this tool."""
        return TOOL_SUFFIXES[self.kind]

    @property
    def arguments(self) -> tuple[str, ...]:
        """Return the arguments placed before the archive and directory names."""
        return TOOL_ARGUMENTS[self.kind]


def tool_kind(path: Path) -> ToolKind:
    """Return the tool family for an executable path.

    Raises:
        ToolResolutionError: If the executable is neither zip nor tar.
    """
    name = path.name
    if name.lower().endswith(".exe"):
        name = name[: -len(".exe")]
    if name == "zip":
        return "zip"
    if name == "tar":
        return "tar"
    raise ToolResolutionError(f"Unknown archive tool '{path}'. Must be either tar or zip.")


def find_in_path(command: str) -> Path | None:
    """Return the first executable named ``command`` on the search path."""
    found = shutil.which(command)
    return Path(found) if found else None


def find_tool(
    requested: str | None = None,
    preferred: Sequence[str] = ("zip", "tar"),
) -> ArchiveTool:
    """Locate the archive tool to use.

    Args:
        requested: Explicit tool name or path; absolute paths are not searched.
        preferred: Tool names tried in order when nothing is requested.

    Returns:
        ArchiveTool: Resolved tool.

    Raises:
        ToolResolutionError: If no suitable tool is found.
    """
    if requested:
        candidate = Path(requested)
        if candidate.is_absolute():
            if not candidate.is_file():
                raise ToolResolutionError(f"Specified archive tool '{requested}' not found.")
            path = candidate
        else:
            located = find_in_path(requested)
            if located is None:
                raise ToolResolutionError(
                    f"Unable to find specified archive tool '{requested}'."
                )
            path = located
        return ArchiveTool(path=path, kind=tool_kind(path))

    for name in preferred:
        located = find_in_path(name)
        if located is not None:
            return ArchiveTool(path=located, kind=tool_kind(located))

    names = " or ".join(f"'{name}'" for name in preferred)
    raise ToolResolutionError(f"Unable to find {names} in path.")


__all__ = ["ArchiveTool", "ToolKind", "find_in_path", "find_tool", "tool_kind"]
