"""Embedded operator manual."""

from __future__ import annotations

import textwrap

import click

MANUAL_TEXT = textwrap.dedent(
    """\
    PHOTOCONTEST(1)

    NAME
        photocontest - manage photos for a contest awards presentation

    SYNOPSIS
        photocontest init DATAFILE [CATEGORIES_DIR]
        photocontest copy [CATEGORIES_DIR] [PRESENTATION_DIR] [--only LIST]...
                          [--slides DIR] [--skip N] [--json] [--quiet]
        photocontest cleanup [CATEGORIES_DIR] [PRESENTATION_DIR]
        photocontest archive [PRESENTATION_DIR] [--command PATH] [--file NAME]
        photocontest manual
        photocontest config view | config set KEY --value VALUE

    DESCRIPTION
        Winning photos are placed by hand into one directory per category.
        'copy' renames them into a single presentation directory so that a
        slideshow program showing files in name order presents every category
        in turn.

        Category names are a number with an optional one-letter suffix, such as
        12 or 12a. Categories are ordered by number, then by suffix, with the
        plain number first. Categories numbered 900 and above are special
        awards.

    COMMANDS
        init
            Create the categories directory (default "Categories") and one
            directory per category listed in DATAFILE. DATAFILE holds comma-
            separated records whose first field is the category name. Lines
            that do not start with a digit are ignored.

        copy
            Copy the .jpg files of every category into the presentation
            directory (default "Presentation"). With a single argument, that
            argument names the presentation directory. Files are taken in name
            order, so name them to control the order (1-third.jpg,
            2-second.jpg, 3-first.jpg). Category 12a's files become
            0012a-1.jpg, 0012a-2.jpg and so on. Existing files with those
            names are replaced.

            --only LIST   Comma-separated category names to copy; may be
                          repeated. Names must match the directories exactly.
            --slides DIR  Directory of slides. The slide for category 12 is
                          0012-0.jpg or, failing that, 0012.jpg. Categories
                          without a slide are reported.
            --skip N      Leave out the first N files of each category.

            Regular categories with fewer than three entries are reported at
            the end of the run. Reports never change the exit status.

        cleanup
            Remove the given directories. With no arguments both
            "Categories" and "Presentation" are removed.

        archive
            Archive the presentation directory with zip (or tar when zip is
            not installed). The archive holds a single top-level folder and is
            written beside the presentation directory.

            --command PATH  Archive tool; must be zip or tar.
            --file NAME     Archive name without suffix (.zip or .tgz is
                            added).

        manual
            Show this manual through $PAGER.

    CONFIGURATION
        Defaults are read from ~/.photocontest/config.yaml and from
        PHOTOCONTEST__SECTION__KEY environment variables.
    """
)


def render_manual() -> None:
    """Page the manual through ``$PAGER`` (or less/more when unset)."""
    click.echo_via_pager(MANUAL_TEXT)


__all__ = ["MANUAL_TEXT", "render_manual"]
