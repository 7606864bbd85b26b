"""Tests for end-to-end copy runs."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import write_photos
from photocontest.errors import PhotoCopyError, PreconditionError
from photocontest.presentation import CategoryOutcome, CopyOrchestrator


@pytest.fixture
def categories(tmp_path: Path) -> Path:
    root = tmp_path / "Categories"
    write_photos(root / "1", ["a.jpg", "b.jpg", "c.jpg"])
    write_photos(root / "3", ["a.jpg"])
    write_photos(root / "5a", ["a.jpg", "b.jpg", "c.jpg", "d.jpg"])
    write_photos(root / "5b", [])
    write_photos(root / "900", ["winner.jpg"])
    return root


def test_run_copies_all_categories_in_order(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"
    seen: list[str] = []

    def _record(outcome: CategoryOutcome) -> None:
        seen.append(outcome.copy_result.category.name)

    report = CopyOrchestrator().run(categories, presentation, on_category=_record)

    assert presentation.is_dir()
    assert seen == ["1", "3", "5a", "5b", "900"]
    assert [outcome.copy_result.category.name for outcome in report.categories] == seen
    assert report.total_copied == 9
    assert [(short.category, short.count) for short in report.short_categories] == [
        ("3", 1),
        ("5b", 0),
    ]
    assert report.missing_slides == []
    assert report.slides_enabled is False
    assert (presentation / "0005a-4.jpg").exists()
    assert (presentation / "0900-1.jpg").exists()


def test_run_restricts_to_only(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"

    report = CopyOrchestrator().run(categories, presentation, only={"3", "5a"})

    assert [outcome.copy_result.category.name for outcome in report.categories] == ["3", "5a"]
    assert sorted(path.name for path in presentation.iterdir()) == [
        "0003-1.jpg",
        "0005a-1.jpg",
        "0005a-2.jpg",
        "0005a-3.jpg",
        "0005a-4.jpg",
    ]


def test_run_applies_skip_to_every_category(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"

    report = CopyOrchestrator().run(categories, presentation, only={"1", "5a"}, skip=1)

    assert [outcome.copy_result.count for outcome in report.categories] == [2, 3]
    assert (presentation / "0001-1.jpg").read_bytes() == b"b.jpg"
    assert [(short.category, short.count) for short in report.short_categories] == [("1", 2)]


def test_run_collects_missing_slides(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"
    slides = tmp_path / "Slides"
    write_photos(slides, ["0001-0.jpg", "0005a.jpg"])

    report = CopyOrchestrator().run(categories, presentation, slides_dir=slides)

    assert report.slides_enabled is True
    assert report.missing_slides == ["3", "5b", "900"]
    assert (presentation / "0001-0.jpg").exists()
    assert (presentation / "0005a.jpg").exists()
    assert report.has_anomalies


def test_missing_slides_directory_disables_slides(
    categories: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    presentation = tmp_path / "Presentation"

    report = CopyOrchestrator().run(
        categories, presentation, only={"1"}, slides_dir=tmp_path / "NoSlides"
    )

    assert report.slides_enabled is False
    assert report.missing_slides == []
    assert all(outcome.slide is None for outcome in report.categories)
    assert "not present" in caplog.text


def test_missing_categories_root_asks_for_init(tmp_path: Path) -> None:
    created: list[Path] = []

    with pytest.raises(PreconditionError, match="did you run 'init'"):
        CopyOrchestrator().run(
            tmp_path / "Categories", tmp_path / "Presentation", on_create=created.append
        )

    assert created == []
    assert not (tmp_path / "Presentation").exists()


def test_rerun_overwrites_with_current_sources(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"
    orchestrator = CopyOrchestrator()
    orchestrator.run(categories, presentation, only={"1"})

    (categories / "1" / "a.jpg").write_bytes(b"replacement photo")
    orchestrator.run(categories, presentation, only={"1"})

    assert sorted(path.name for path in presentation.iterdir()) == [
        "0001-1.jpg",
        "0001-2.jpg",
        "0001-3.jpg",
    ]
    assert (presentation / "0001-1.jpg").read_bytes() == b"replacement photo"


def test_run_announces_presentation_creation(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"
    created: list[Path] = []
    orchestrator = CopyOrchestrator()

    orchestrator.run(categories, presentation, only={"1"}, on_create=created.append)
    orchestrator.run(categories, presentation, only={"1"}, on_create=created.append)

    assert created == [presentation]


def test_copy_failure_aborts_remaining_categories(categories: Path, tmp_path: Path) -> None:
    presentation = tmp_path / "Presentation"
    (presentation / "0003-1.jpg").mkdir(parents=True)

    with pytest.raises(PhotoCopyError):
        CopyOrchestrator().run(categories, presentation)

    assert (presentation / "0001-3.jpg").exists()
    assert not (presentation / "0005a-1.jpg").exists()
    assert not (presentation / "0900-1.jpg").exists()
