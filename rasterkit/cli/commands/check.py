"""Check command for rasterizer availability."""

import typer
from rich.console import Console
from rich.table import Table

from rasterkit.config.constants import SUPPORTED_OUTPUT_FORMATS
from rasterkit.render.rasterizer import check_rasterizer

console = Console()


def check() -> None:
    """Show whether the native SVG rasterizer can be loaded."""
    backends = check_rasterizer()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Backend", style="cyan")
    table.add_column("Status")
    table.add_column("Formats")

    for name, available in backends.items():
        status = "[green]available[/green]" if available else "[red]not installed[/red]"
        table.add_row(name, status, ", ".join(SUPPORTED_OUTPUT_FORMATS))

    console.print(table)

    if not any(backends.values()):
        console.print("[yellow]Install cairosvg and the cairo system library to enable conversions.[/yellow]")
        raise typer.Exit(1)
