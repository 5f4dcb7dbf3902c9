"""Main CLI application using Typer."""

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from rasterkit import __version__
from rasterkit.cli.commands.build import build
from rasterkit.cli.commands.check import check
from rasterkit.cli.commands.config import config_app

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="rasterkit",
    help="Render SVG sources to raster outputs after every build.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()

app.command(name="build", help="Run one build pass over the configured conversions.")(build)
app.command(name="check", help="Check whether the SVG rasterizer is available.")(check)
app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]rasterkit[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """rasterkit - SVG to raster conversion for asset builds.

    Renders every configured SVG input to its raster outputs, with per-output
    formats, dimensions and templated paths.
    """
    pass


if __name__ == "__main__":
    app()
