"""Utility module for rasterkit."""

from rasterkit.utils.concurrency import TaskResult, map_settled
from rasterkit.utils.fs import atomic_write_bytes, ensure_directory

__all__ = [
    # Concurrency
    "TaskResult",
    "map_settled",
    # File system
    "ensure_directory",
    "atomic_write_bytes",
]
