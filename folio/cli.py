"""
Main CLI entry point for Folio.

This module provides the ``folio`` command: checking a directory of articles
for front matter problems and browsing the documents that pass.
"""

import json
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from folio import __version__
from folio.commands import check_command, list_command, show_command, tags_command
from folio.config import FolioConfig, SourceConfig, load_config
from folio.exceptions import ConfigurationError, FolioError
from folio.utils import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    help="Folio - validate and browse Markdown articles with front matter.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    config_path: Path
    source: Optional[Path] = None
    log_level: Optional[str] = None


def resolve_config(config_path: Path, source: Optional[Path] = None) -> FolioConfig:
    """
    Build the configuration from the config file and command-line overrides.

    Args:
        config_path: Path to the TOML configuration file.
        source: Source directory overriding the configured one.

    Returns:
        Validated configuration.

    Raises:
        ConfigurationError: If no usable configuration can be built.
    """
    try:
        if config_path.exists():
            config = load_config(str(config_path))
            if source is None:
                return config
            source_config = SourceConfig(
                **{**config.source.model_dump(), "directory": str(source)}
            )
            return config.model_copy(update={"source": source_config})
        if source is not None:
            return FolioConfig(source=SourceConfig(directory=str(source)))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    raise ConfigurationError(
        f"Configuration file not found: {config_path} (pass --source to skip it)",
        path=str(config_path),
    )


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report Folio errors and exit with their exit code."""
    try:
        yield
    except FolioError as e:
        logger.debug("command_failed", error=type(e).__name__, exit_code=e.exit_code)
        err_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=e.exit_code)


def _configure(ctx: typer.Context) -> FolioConfig:
    state: CliState = ctx.obj
    config = resolve_config(state.config_path, state.source)
    try:
        setup_logging(
            level=state.log_level or config.logging.level,
            structured=config.logging.structured,
            stream=sys.stderr,
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    return config


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Folio v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(
        Path("folio.toml"), "--config", "-c", help="Path to the Folio configuration file."
    ),
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", help="Article directory, overriding the configuration."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level, overriding the configuration."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Folio - validate and browse Markdown articles with front matter."""
    ctx.obj = CliState(config_path=config, source=source, log_level=log_level)


@app.command()
def check(ctx: typer.Context) -> None:
    """Load every article and report the ones that fail validation."""
    with handle_errors():
        config = _configure(ctx)
        report = check_command(config)

    if report.rejected:
        table = Table(title="Rejected documents")
        table.add_column("Source", style="cyan", no_wrap=True)
        table.add_column("Error", style="red", no_wrap=True)
        table.add_column("Reason")
        for failure in report.rejected:
            table.add_row(
                escape(failure.source or "-"), failure.kind, escape(failure.reason)
            )
        console.print(table)

    typer.echo(f"{report.accepted} accepted, {len(report.rejected)} rejected")
    if not report.ok:
        raise typer.Exit(code=3)


@app.command("list")
def list_documents(
    ctx: typer.Context,
    tag: List[str] = typer.Option([], "--tag", "-t", help="Only documents with this tag."),
    all_tags: bool = typer.Option(
        False, "--all-tags", help="Require every --tag instead of any."
    ),
    drafts: Optional[bool] = typer.Option(
        None, "--drafts/--no-drafts", help="Only drafts, or only published documents."
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List documents, newest first."""
    with handle_errors():
        config = _configure(ctx)
        documents = list_command(config, tag, match_all=all_tags, drafts=drafts)

    if json_output:
        typer.echo(
            json.dumps(
                [doc.to_dict(include_body=False) for doc in documents],
                indent=2,
                default=str,
            )
        )
        return

    table = Table(title="Documents")
    table.add_column("Date", no_wrap=True)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Tags", style="green")
    table.add_column("Draft", style="yellow")
    for doc in documents:
        table.add_row(
            doc.date.isoformat(),
            escape(doc.slug),
            escape(doc.title),
            escape(", ".join(sorted(doc.tags))),
            "yes" if doc.draft else "",
        )
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Slug of the document to show."),
    body: bool = typer.Option(True, "--body/--no-body", help="Include the body."),
) -> None:
    """Print one document as JSON."""
    with handle_errors():
        config = _configure(ctx)
        document = show_command(config, slug)

    typer.echo(json.dumps(document.to_dict(include_body=body), indent=2, default=str))


@app.command()
def tags(
    ctx: typer.Context,
    drafts: Optional[bool] = typer.Option(
        None, "--drafts/--no-drafts", help="Only drafts, or only published documents."
    ),
) -> None:
    """Count documents per tag."""
    with handle_errors():
        config = _configure(ctx)
        counts = tags_command(config, drafts=drafts)

    table = Table(title="Tags")
    table.add_column("Tag", style="green")
    table.add_column("Documents", justify="right")
    for name, count in counts.items():
        table.add_row(escape(name), str(count))
    console.print(table)


if __name__ == "__main__":
    app()
