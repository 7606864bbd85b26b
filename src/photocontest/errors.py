"""Error taxonomy shared by the photocontest commands."""

from __future__ import annotations


class PhotoContestError(Exception):
    """Base exception for fatal photocontest failures."""


class PreconditionError(PhotoContestError):
    """Raised when a required directory or input is absent or unreadable."""


class CategoryParseError(PreconditionError):
    """Raised when a category name has no leading category number."""


class PhotoCopyError(PreconditionError):
    """Raised when a photo or slide cannot be copied into the presentation."""


class ToolResolutionError(PhotoContestError):
    """Raised when no usable archive tool can be located."""


class ArchiveProcessError(PhotoContestError):
    """Raised when the archive tool fails to run or exits unsuccessfully.

    Attributes:
        tool: Path of the archive executable.
        returncode: Exit status reported by the child, if it ran.
        signal: Signal number that terminated the child, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        tool: str,
        returncode: int | None = None,
        signal: int | None = None,
    ) -> None:
        super().__init__(message)
        self.tool = tool
        self.returncode = returncode
        self.signal = signal


__all__ = [
    "PhotoContestError",
    "PreconditionError",
    "CategoryParseError",
    "PhotoCopyError",
    "ToolResolutionError",
    "ArchiveProcessError",
]
