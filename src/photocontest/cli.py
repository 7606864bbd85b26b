"""Command line interface for the photocontest tool."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml
from click.core import ParameterSource
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax

from photocontest.categories import parse_only_values
from photocontest.commands import (
    ArchiveCommand,
    CleanupCommand,
    Command,
    CommandHooks,
    CopyCommand,
    InitCommand,
    ManualCommand,
    execute,
)
from photocontest.config import (
    ConfigError,
    ConfigManager,
    PhotoContestConfig,
    resolve_with_precedence,
)
from photocontest.errors import PhotoContestError
from photocontest.presentation import AnomalyReport, CategoryOutcome

console = Console()
error_console = Console(stderr=True)


def _handle_cli_error(
    message: str,
    *,
    json_output: bool,
    original: Exception | None = None,
) -> NoReturn:
    """Emit a standardized error and terminate the command.

    Args:
        message: Human-readable error message.
        json_output: Indicates whether JSON mode is active.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """

    if json_output:
        console.print_json(data={"error": {"message": message}})
        raise SystemExit(1)

    raise click.ClickException(message) from original


def _emit_message(message: Any, *, mode: str, quiet: bool) -> None:
    """Print CLI output unless quiet mode hides it.

    Args:
        message: Renderable or string to emit.
        mode: Output mode identifier (`detail`, `summary`, `warning`, or `error`).
        quiet: Whether quiet mode is active; only warnings and errors remain.
    """

    if quiet and mode not in {"warning", "error"}:
        return
    console.print(message)


def _format_summary_line(command: str, root: Path | str, metrics: dict[str, Any]) -> str:
    """Return a consistent summary line for CLI commands.

    Args:
        command: Command name to include in the summary.
        root: Target root path relevant to the command.
        metrics: Ordered mapping of metric names to values.

    Returns:
        str: Rich-formatted summary string.
    """

    parts = ", ".join(f"{key}={value}" for key, value in metrics.items())
    return f"[green]{command} summary for {escape(str(root))}: {parts}.[/green]"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


def _load_config(
    ctx: click.Context, overrides: dict[str, Any] | None = None
) -> PhotoContestConfig:
    """Load configuration and configure logging for a command.

    Args:
        ctx: Click context carrying the group-level options.
        overrides: Dotted-key values taken from command options.

    Raises:
        click.ClickException: If the configuration is invalid.
    """

    cli_overrides = dict(overrides or {})
    if ctx.obj and ctx.obj.get("verbose"):
        cli_overrides["logging.level"] = "DEBUG"

    try:
        config = ConfigManager().load(cli_overrides=cli_overrides)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging(config.logging.level)
    return config


def _resolve_quiet(ctx: click.Context, quiet: bool, config: PhotoContestConfig) -> bool:
    explicit = ctx.get_parameter_source("quiet") == ParameterSource.COMMANDLINE
    return quiet if explicit else config.cli.quiet_default


def _run(
    command: Command,
    config: PhotoContestConfig,
    hooks: CommandHooks | None = None,
    *,
    json_output: bool = False,
) -> Any:
    """Execute a command, converting fatal errors into CLI errors."""

    try:
        return execute(command, config, hooks)
    except (PhotoContestError, ConfigError) as exc:
        _handle_cli_error(str(exc), json_output=json_output, original=exc)
    except OSError as exc:
        _handle_cli_error(f"I/O error: {exc}", json_output=json_output, original=exc)


def _entries(count: int) -> str:
    return "entry" if count == 1 else "entries"


def _emit_category(outcome: CategoryOutcome, *, quiet: bool) -> None:
    """Render progress for one copied category."""

    result = outcome.copy_result
    _emit_message(
        f"[cyan]Processing category {escape(result.category.name)}:[/cyan]",
        mode="detail",
        quiet=quiet,
    )
    for photo in result.copied:
        _emit_message(
            f"\tFile {escape(photo.source.name)} -> {escape(photo.destination.name)}",
            mode="detail",
            quiet=quiet,
        )
    if result.count:
        _emit_message(
            f"\t{result.count} {_entries(result.count)} copied.", mode="detail", quiet=quiet
        )
    else:
        _emit_message("\tNo entries found for this category.", mode="detail", quiet=quiet)

    if outcome.slide is not None and outcome.slide.destination is not None:
        _emit_message(
            f"\tSlide {escape(outcome.slide.destination.name)} copied.",
            mode="detail",
            quiet=quiet,
        )


def _emit_anomalies(report: AnomalyReport, *, quiet: bool, threshold: int) -> None:
    """Render the short-category and missing-slide findings."""

    if report.short_categories:
        _emit_message(
            f"[yellow]Categories with fewer than {threshold} entries:[/yellow]",
            mode="warning",
            quiet=quiet,
        )
        for short in report.short_categories:
            _emit_message(
                f"  - {escape(short.category)}: {short.count} {_entries(short.count)}",
                mode="warning",
                quiet=quiet,
            )

    if report.missing_slides:
        _emit_message(
            "[yellow]Categories missing slides:[/yellow] "
            + ", ".join(escape(name) for name in report.missing_slides),
            mode="warning",
            quiet=quiet,
        )


def _assign_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a nested value within a dictionary for a dotted path.

    Args:
        target: Mapping to mutate in-place.
        path: Sequence of keys representing the nested location.
        value: Value to assign at the nested location.

    Raises:
        ConfigError: If a non-mapping value is encountered along the path.
    """

    node = target
    for segment in path[:-1]:
        existing = node.get(segment)
        if existing is None:
            existing = {}
            node[segment] = existing
        elif not isinstance(existing, dict):
            raise ConfigError(
                f"Cannot assign into '{segment}' because it is not a mapping in the config file."
            )
        node = existing
    node[path[-1]] = value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="photocontest")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Photocontest prepares contest photos for an awards presentation.

    Returns:
        None: This function is invoked for its side effects.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("init")
@click.argument("datafile", type=click.Path(dir_okay=False, path_type=str))
@click.argument("categories_dir", required=False, type=click.Path(file_okay=False, path_type=str))
@click.option("--quiet", is_flag=True, help="Suppress progress output.")
@click.pass_context
def init_categories(
    ctx: click.Context,
    datafile: str,
    categories_dir: str | None,
    quiet: bool,
) -> None:
    """Create one directory per category listed in DATAFILE.

    Args:
        ctx: Click context used for configuration and parameter inspection.
        datafile: Comma-separated category list; the first field names the category.
        categories_dir: Directory to create categories under.
        quiet: When True, suppress progress output.
    """
    overrides = {"paths.categories_dir": categories_dir} if categories_dir else None
    config = _load_config(ctx, overrides)
    quiet_enabled = _resolve_quiet(ctx, quiet, config)

    command = InitCommand(
        datafile=Path(datafile),
        categories_dir=Path(config.paths.categories_dir),
    )

    def _announce(path: Path) -> None:
        _emit_message(
            f"Creating directory '{escape(str(path))}'.", mode="detail", quiet=quiet_enabled
        )

    created = _run(command, config, CommandHooks(on_directory=_announce))
    _emit_message(
        _format_summary_line("Init", command.categories_dir, {"categories": len(created)}),
        mode="summary",
        quiet=quiet_enabled,
    )


@cli.command("copy")
@click.argument("directories", nargs=-1, type=click.Path(file_okay=False, path_type=str))
@click.option(
    "--only",
    multiple=True,
    help="Comma-separated category names to copy; may be given more than once.",
)
@click.option(
    "--slides",
    type=click.Path(file_okay=False, path_type=str),
    help="Directory containing per-category slides.",
)
@click.option(
    "--skip",
    type=click.IntRange(min=0),
    help="Number of leading photos to leave out of each category.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit the copy report as JSON.")
@click.option("--quiet", is_flag=True, help="Suppress progress output.")
@click.pass_context
def copy_presentation(
    ctx: click.Context,
    directories: tuple[str, ...],
    only: tuple[str, ...],
    slides: str | None,
    skip: int | None,
    json_output: bool,
    quiet: bool,
) -> None:
    """Copy category photos into the presentation directory.

    DIRECTORIES is `[CATEGORIES_DIR] PRESENTATION_DIR`; a single value names
    the presentation directory.

    Args:
        ctx: Click context used for configuration and parameter inspection.
        directories: Positional categories and presentation directories.
        only: Raw `--only` values to restrict the run to.
        slides: Directory containing slides, if slides are wanted.
        skip: Leading photos to skip per category.
        json_output: If True, emit the report as JSON.
        quiet: When True, suppress progress output.

    Raises:
        click.UsageError: If more than two directories are given.
        click.ClickException: If the copy fails.
    """
    if len(directories) > 2:
        raise click.UsageError("copy accepts at most CATEGORIES_DIR and PRESENTATION_DIR.")

    overrides: dict[str, Any] = CopyCommand.path_overrides(directories)
    if skip is not None:
        overrides["copying.skip"] = skip
    config = _load_config(ctx, overrides)
    quiet_enabled = _resolve_quiet(ctx, quiet, config)
    if json_output:
        if ctx.get_parameter_source("quiet") == ParameterSource.COMMANDLINE and quiet:
            raise click.ClickException("--json cannot be combined with --quiet.")
        quiet_enabled = True

    presentation_dir = Path(config.paths.presentation_dir)
    command = CopyCommand(
        categories_dir=Path(config.paths.categories_dir),
        presentation_dir=presentation_dir,
        only=sorted(parse_only_values(only)),
        skip=config.copying.skip,
        slides_dir=Path(slides) if slides else None,
    )

    def _announce(path: Path) -> None:
        _emit_message(
            f"Creating directory '{escape(str(path))}'.", mode="detail", quiet=quiet_enabled
        )

    hooks = CommandHooks(
        on_category=lambda outcome: _emit_category(outcome, quiet=quiet_enabled),
        on_directory=_announce,
    )
    report: AnomalyReport = _run(command, config, hooks, json_output=json_output)

    if json_output:
        console.print_json(data=report.model_dump(mode="json"))
        return

    _emit_anomalies(
        report, quiet=quiet_enabled, threshold=config.copying.short_category_threshold
    )
    _emit_message(
        _format_summary_line(
            "Copy",
            presentation_dir,
            {
                "categories": len(report.categories),
                "photos": report.total_copied,
                "short": len(report.short_categories),
                "missing_slides": len(report.missing_slides),
            },
        ),
        mode="summary",
        quiet=quiet_enabled,
    )


@cli.command()
@click.argument("directories", nargs=-1, type=click.Path(path_type=str))
@click.option("--quiet", is_flag=True, help="Suppress progress output.")
@click.pass_context
def cleanup(ctx: click.Context, directories: tuple[str, ...], quiet: bool) -> None:
    """Remove the categories and/or presentation directories.

    With no DIRECTORIES both default directories are removed; otherwise only
    the given ones are.

    Args:
        ctx: Click context used for configuration and parameter inspection.
        directories: Directories to remove.
        quiet: When True, suppress progress output.
    """
    config = _load_config(ctx)
    quiet_enabled = _resolve_quiet(ctx, quiet, config)
    command = CleanupCommand.from_words(directories, config)

    def _announce(path: Path, exists: bool) -> None:
        if exists:
            _emit_message(
                f"Removing directory {escape(str(path))}.", mode="detail", quiet=quiet_enabled
            )
        else:
            _emit_message(
                f"[yellow]Directory {escape(str(path))} not present; skipping.[/yellow]",
                mode="warning",
                quiet=quiet_enabled,
            )

    _run(command, config, CommandHooks(on_remove=_announce))


@cli.command()
@click.argument(
    "presentation_dir", required=False, type=click.Path(file_okay=False, path_type=str)
)
@click.option(
    "--command",
    "tool",
    type=str,
    help="Archive tool (zip or tar); a bare name is searched on the path.",
)
@click.option(
    "--file",
    "file_name",
    type=str,
    help="Archive name without suffix; defaults to the presentation directory name.",
)
@click.option("--quiet", is_flag=True, help="Suppress progress output.")
@click.pass_context
def archive(
    ctx: click.Context,
    presentation_dir: str | None,
    tool: str | None,
    file_name: str | None,
    quiet: bool,
) -> None:
    """Archive the presentation directory with zip or tar.

    Args:
        ctx: Click context used for configuration and parameter inspection.
        presentation_dir: Directory to archive.
        tool: Explicit archive tool name or path.
        file_name: Archive file name without suffix.
        quiet: When True, suppress progress output.
    """
    overrides = {"paths.presentation_dir": presentation_dir} if presentation_dir else None
    config = _load_config(ctx, overrides)
    quiet_enabled = _resolve_quiet(ctx, quiet, config)
    command = ArchiveCommand(
        presentation_dir=Path(config.paths.presentation_dir),
        tool=tool,
        file_name=file_name,
    )
    archive_path: Path = _run(command, config)
    _emit_message(
        f"[green]Created archive {escape(str(archive_path))}.[/green]",
        mode="summary",
        quiet=quiet_enabled,
    )


@cli.command()
@click.pass_context
def manual(ctx: click.Context) -> None:
    """Show the full manual through $PAGER."""
    config = _load_config(ctx)
    _run(ManualCommand(), config)


@cli.group()
def config() -> None:
    """Manage photocontest configuration files and overrides.

    Returns:
        None: This function is invoked for its side effects.
    """


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
def config_view(no_env: bool) -> None:
    """Display the effective configuration after applying precedence rules.

    Args:
        no_env: If True, ignore environment-derived overrides.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    manager = ConfigManager()
    try:
        config = manager.load(include_env=not no_env, ensure_file=True)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Args:
        key: Dotted path describing the configuration field to update.
        value: YAML-literal value to write into the configuration file.

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    manager = ConfigManager()
    try:
        manager.ensure_exists()
        before = manager.read_text().splitlines()
        file_data = manager.load_file_overrides()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if len(segments) < 2:
        raise click.ClickException("KEY must specify a dotted path such as 'paths.categories_dir'.")

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    try:
        _assign_nested(file_data, segments, parsed_value)
        resolve_with_precedence(defaults=PhotoContestConfig(), file_overrides=file_data)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    after = manager.read_text().splitlines()

    diff = list(
        difflib.unified_diff(
            before,
            after,
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
    )
    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point.

    Returns:
        None: This function is invoked for its side effects.
    """
    cli()


if __name__ == "__main__":
    main()
