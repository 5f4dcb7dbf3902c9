"""Config command for configuration management."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from rasterkit.config import get_settings
from rasterkit.config.constants import CONFIG_LOCATIONS, DEFAULT_CONFIG_FILE

config_app = typer.Typer(help="Configuration management.")
console = Console()


@config_app.command("show")
def show() -> None:
    """Show current configuration."""
    settings = get_settings()

    console.print("\n[bold blue]Current Configuration[/bold blue]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", settings.log_level)
    table.add_row("Log File", settings.log_file or "-")
    table.add_row("JSON Logs", str(settings.json_logs))
    table.add_row("Public Directory", settings.paths.public)

    conversions = settings.plugins.rsvg.conversions
    table.add_row("Conversions", str(len(conversions)))
    for conversion in conversions:
        table.add_row(f"  {conversion.input}", f"{len(conversion.output)} outputs")

    console.print(table)
    console.print()


# Default configuration template - kept in sync with rasterkit.example.yaml
DEFAULT_CONFIG_TEMPLATE = """# rasterkit Configuration

log_level: "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
# log_file: ".logs/rasterkit.log"
json_logs: false

paths:
  public: "public"  # Relative output paths are placed here

plugins:
  rsvg:
    conversions:
      - input: "app/assets/logo.svg"
        output_defaults:
          path: "images/logo-{width}x{height}.{format}"
        output:
          - width: 32
          - width: 64
          - width: 128
          - width: 512
            height: 256
            format: "pdf"
"""


@config_app.command("init")
def init(
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Path to create config file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing config file.",
        ),
    ] = False,
) -> None:
    """Initialize a configuration file."""
    config_path = path or Path.cwd() / DEFAULT_CONFIG_FILE

    if config_path.exists() and not force:
        console.print(f"[red]Error:[/red] Config file already exists at {config_path}")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)

    config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    console.print(f"[green]Created config file at:[/green] {config_path}")


@config_app.command("locations")
def locations() -> None:
    """Show configuration file search locations."""
    console.print("\n[bold blue]Configuration File Locations[/bold blue]\n")

    for i, loc in enumerate(CONFIG_LOCATIONS, 1):
        exists = "[green]exists[/green]" if loc.exists() else "[dim]not found[/dim]"
        console.print(f"  {i}. {loc} ({exists})")

    console.print()
    console.print("[dim]Environment variables with RASTERKIT_ prefix are also supported.[/dim]")
    console.print()
