"""Presentation archiving through external zip or tar tools."""

from .builder import ArchiveBuilder, run_in_directory
from .tools import ArchiveTool, find_in_path, find_tool, tool_kind

__all__ = [
    "ArchiveBuilder",
    "ArchiveTool",
    "find_in_path",
    "find_tool",
    "run_in_directory",
    "tool_kind",
]
