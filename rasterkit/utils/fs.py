"""File system utilities for rasterkit."""

import os
import stat
import uuid
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Safe to call concurrently for overlapping paths.

    Args:
        path: Directory path

    Returns:
        The directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def atomic_write_bytes(file_path: Path, data: bytes) -> Path:
    """Write bytes to a file atomically.

    Writes to a temp file in the target directory first, then renames it over
    the target, so a failed write never leaves a partial file behind.

    A new file gets ``0o666`` minus the process umask; an existing file
    keeps its permissions.

    Args:
        file_path: Target file path
        data: Bytes to write

    Returns:
        The target file path
    """
    ensure_directory(file_path.parent)

    temp_path = file_path.parent / f".{file_path.name}.{uuid.uuid4().hex[:8]}.tmp"

    # The kernel applies the umask to the 0o666 creation mode
    temp_fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    os.close(temp_fd)

    try:
        with open(temp_path, "wb") as f:
            f.write(data)

        if file_path.exists():
            os.chmod(temp_path, stat.S_IMODE(file_path.stat().st_mode))

        # Atomic rename
        temp_path.replace(file_path)

    except Exception:
        # Clean up on error
        if temp_path.exists():
            temp_path.unlink()
        raise

    return file_path
