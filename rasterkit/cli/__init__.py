"""CLI module for rasterkit."""

from rasterkit.cli.main import app

__all__ = ["app"]
