"""CLI commands for rasterkit."""
