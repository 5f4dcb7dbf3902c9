"""Render one SVG input to one output file."""

from pathlib import Path

import anyio

from rasterkit.core.normalizer import ResolvedOutput
from rasterkit.exceptions import (
    InvalidDimensionsError,
    MissingDimensionsError,
    RenderError,
    UnsupportedFormatError,
)
from rasterkit.render.rasterizer import Rasterizer
from rasterkit.utils.fs import atomic_write_bytes
from rasterkit.utils.logging import get_logger

log = get_logger(__name__)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_output(output: ResolvedOutput, rasterizer: Rasterizer) -> None:
    """Check an output can be rendered before anything touches the disk.

    Raises:
        MissingDimensionsError: Neither width nor height was resolved
        InvalidDimensionsError: A dimension is not a positive integer
        UnsupportedFormatError: The rasterizer cannot write the format
    """
    if output.width is None and output.height is None:
        raise MissingDimensionsError(output.path)
    if not (_is_positive_int(output.width) and _is_positive_int(output.height)):
        raise InvalidDimensionsError(output.path, output.width, output.height)
    if output.format.lower() not in rasterizer.formats:
        raise UnsupportedFormatError(output.path, output.format)


def _render_to_file(input_path: Path, output: ResolvedOutput, rasterizer: Rasterizer) -> Path:
    svg = input_path.read_bytes()
    data = rasterizer.render(svg, **output.render_options())
    return atomic_write_bytes(Path(output.path), data)


async def convert_svg(
    input_path: str | Path,
    output: ResolvedOutput,
    rasterizer: Rasterizer,
) -> Path:
    """Render ``input_path`` to ``output.path``.

    The input is read, rendered and written in a worker thread. Missing
    parent directories are created and the file is written atomically.

    Args:
        input_path: Path of the SVG source
        output: Resolved output parameters
        rasterizer: Rasterizer to render with

    Returns:
        The path of the written file

    Raises:
        RenderError: If validation, rendering or writing fails
    """
    validate_output(output, rasterizer)

    try:
        written = await anyio.to_thread.run_sync(_render_to_file, Path(input_path), output, rasterizer)
    except Exception as e:
        raise RenderError(output.path, str(e) or type(e).__name__, cause=e) from e

    log.debug("Output written", path=str(written), format=output.format)
    return written
