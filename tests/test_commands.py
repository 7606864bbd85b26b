"""Tests for command variants and their dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import write_photos
from photocontest.commands import (
    CleanupCommand,
    CommandHooks,
    CopyCommand,
    InitCommand,
    ManualCommand,
    execute,
)
from photocontest.config import PhotoContestConfig, resolve_with_precedence
from photocontest.presentation import AnomalyReport


@pytest.fixture
def config() -> PhotoContestConfig:
    return PhotoContestConfig()


@pytest.mark.parametrize(
    ("words", "expected"),
    [
        ((), ("Categories", "Presentation")),
        (("Show",), ("Categories", "Show")),
        (("Entries", "Show"), ("Entries", "Show")),
    ],
)
def test_copy_path_overrides_from_words(
    words: tuple[str, ...], expected: tuple[str, str]
) -> None:
    config = resolve_with_precedence(
        defaults=PhotoContestConfig(), cli_overrides=CopyCommand.path_overrides(words)
    )

    assert (config.paths.categories_dir, config.paths.presentation_dir) == expected


def test_cleanup_defaults_to_both_directories(config: PhotoContestConfig) -> None:
    assert CleanupCommand.from_words((), config).paths == [
        Path("Categories"),
        Path("Presentation"),
    ]
    assert CleanupCommand.from_words(("Presentation",), config).paths == [Path("Presentation")]


def test_execute_init_announces_directories(tmp_path: Path, config: PhotoContestConfig) -> None:
    datafile = tmp_path / "cats.csv"
    datafile.write_text("#comment\n\n7,Armor,Large Scale\n12a,Aircraft\n", encoding="utf-8")
    announced: list[Path] = []
    command = InitCommand(datafile=datafile, categories_dir=tmp_path / "Categories")

    created = execute(command, config, CommandHooks(on_directory=announced.append))

    assert created == [tmp_path / "Categories" / "7", tmp_path / "Categories" / "12a"]
    assert announced == [tmp_path / "Categories", *created]
    assert sorted(path.name for path in (tmp_path / "Categories").iterdir()) == ["12a", "7"]


def test_execute_copy_uses_configured_thresholds(tmp_path: Path) -> None:
    write_photos(tmp_path / "Categories" / "50", ["a.jpg"])
    config = PhotoContestConfig.model_validate({"copying": {"special_award_threshold": 50}})
    command = CopyCommand(
        categories_dir=tmp_path / "Categories",
        presentation_dir=tmp_path / "Presentation",
    )

    report = execute(command, config)

    assert isinstance(report, AnomalyReport)
    assert report.short_categories == []
    assert (tmp_path / "Presentation" / "0050-1.jpg").exists()


def test_execute_cleanup_skips_missing_paths(tmp_path: Path, config: PhotoContestConfig) -> None:
    write_photos(tmp_path / "Presentation", ["0001-1.jpg"])
    calls: list[tuple[str, bool]] = []
    command = CleanupCommand(paths=[tmp_path / "Presentation", tmp_path / "Categories"])

    removed = execute(
        command,
        config,
        CommandHooks(on_remove=lambda path, exists: calls.append((path.name, exists))),
    )

    assert removed == [tmp_path / "Presentation"]
    assert calls == [("Presentation", True), ("Categories", False)]
    assert not (tmp_path / "Presentation").exists()


def test_execute_manual_pages_text(
    config: PhotoContestConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    paged: list[str] = []
    monkeypatch.setattr("photocontest.manual.click.echo_via_pager", paged.append)

    assert execute(ManualCommand(), config) is None
    assert "photocontest - manage photos" in paged[0]


def test_copy_command_rejects_negative_skip(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        CopyCommand(categories_dir=tmp_path, presentation_dir=tmp_path, skip=-1)
