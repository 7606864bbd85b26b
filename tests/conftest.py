"""Shared fixtures for photocontest tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def write_photos(directory: Path, names: list[str]) -> None:
    """Create placeholder photo files whose content is their own name.

    Args:
        directory: Directory to create the files in.
        names: File names to create.
    """
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_bytes(name.encode("utf-8"))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory and drop configuration overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in [key for key in os.environ if key.startswith("PHOTOCONTEST__")]:
        monkeypatch.delenv(key)
    return home
