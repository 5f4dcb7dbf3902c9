"""Build command: one build pass over the configured conversions."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from rasterkit.config import load_settings
from rasterkit.config.settings import PathsConfig
from rasterkit.core.batch import ConversionReport
from rasterkit.exceptions import ConfigurationError
from rasterkit.plugin import RsvgPlugin
from rasterkit.utils.logging import get_logger, setup_logging

console = Console()
log = get_logger(__name__)


def _print_summary(reports: list[ConversionReport]) -> None:
    table = Table(title="Conversions", show_header=True, header_style="bold")
    table.add_column("Input", style="cyan")
    table.add_column("Generated", justify="right")
    table.add_column("Failed", justify="right")

    for report in reports:
        failed = f"[red]{report.failed}[/red]" if report.failed else "0"
        table.add_row(report.input, f"{report.succeeded}/{report.total}", failed)

    console.print(table)


def build(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of ./rasterkit.yaml.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    public: Annotated[
        str | None,
        typer.Option(
            "--public",
            "-p",
            help="Public output directory (overrides paths.public).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """Render every configured conversion once.

    Failed outputs are reported but never fail the build.
    """
    try:
        settings = load_settings(config_file)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        json_format=settings.json_logs,
    )

    host_config = settings.host_config()
    if public is not None:
        host_config = host_config.model_copy(update={"paths": PathsConfig(public=public)})

    plugin = RsvgPlugin(host_config)
    if not plugin.available:
        console.print("[yellow]SVG rasterizer not available, skipping conversions.[/yellow]")
        return

    if not plugin.conversions:
        console.print("[dim]No conversions configured.[/dim]")
        return

    reports = asyncio.run(plugin.on_compile())
    _print_summary(reports)
