"""Create an archive of a presentation directory with an external tool."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from photocontest.errors import ArchiveProcessError, PreconditionError

from .tools import ArchiveTool

LOGGER = logging.getLogger(__name__)


def run_in_directory(command: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[bytes]:
    """Run ``command`` with ``cwd`` as its working directory.

    The caller's working directory is never changed.

    Raises:
        ArchiveProcessError: If the command cannot be started, is killed by a
            signal, or exits with a non-zero status.
    """
    tool = command[0]
    try:
        completed = subprocess.run(list(command), cwd=cwd, check=False)
    except OSError as exc:
        raise ArchiveProcessError(f"{tool} failed to execute: {exc}", tool=tool) from exc

    if completed.returncode < 0:
        signal_number = -completed.returncode
        raise ArchiveProcessError(
            f"{tool} failed: child died with signal {signal_number}",
            tool=tool,
            signal=signal_number,
        )
    if completed.returncode > 0:
        raise ArchiveProcessError(
            f"{tool} failed: child exited with value {completed.returncode}",
            tool=tool,
            returncode=completed.returncode,
        )
    return completed


class ArchiveBuilder:
    """Archive a presentation directory so it unpacks to a single folder."""

    def __init__(self, tool: ArchiveTool) -> None:
        self.tool = tool

    def archive_path(self, presentation_dir: Path, file_name: str | None = None) -> Path:
        """Return the archive file that :meth:`build` will create.

        Relative names are placed beside the presentation directory.
        """
        base = file_name or presentation_dir.name
        target = Path(f"{base}.{self.tool.suffix}")
        if not target.is_absolute():
            target = presentation_dir.parent / target
        return target

    def build(self, presentation_dir: Path, file_name: str | None = None) -> Path:
        """Run the archive tool from the presentation's parent directory.

        Args:
            presentation_dir: Directory to archive.
            file_name: Archive name without suffix; defaults to the directory name.

        Returns:
            Path: Archive file created.

        Raises:
            PreconditionError: If the presentation directory does not exist.
            ArchiveProcessError: If the archive tool fails.
        """
        presentation_dir = presentation_dir.expanduser().resolve()
        if not presentation_dir.is_dir():
            raise PreconditionError(f"No presentation '{presentation_dir}' found to archive.")

        archive = self.archive_path(presentation_dir, file_name)
        command = [
            str(self.tool.path),
            *self.tool.arguments,
            str(archive),
            presentation_dir.name,
        ]
        LOGGER.info("Running %s in %s", " ".join(command), presentation_dir.parent)
        run_in_directory(command, presentation_dir.parent)
        return archive


__all__ = ["ArchiveBuilder", "run_in_directory"]
