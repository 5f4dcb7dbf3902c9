"""Native SVG rasterizer capability.

The rasterizer is loaded once and handed around as an optional value:
``None`` means the native library is not installed.
"""

from types import ModuleType
from typing import Protocol, runtime_checkable

from rasterkit.config.constants import SUPPORTED_OUTPUT_FORMATS
from rasterkit.exceptions import RasterizerUnavailableError
from rasterkit.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class Rasterizer(Protocol):
    """Renders SVG documents to bytes in another format."""

    name: str
    formats: tuple[str, ...]

    def render(
        self,
        svg: bytes,
        *,
        format: str,
        width: int,
        height: int,
        id: str | None = None,
    ) -> bytes:
        """Render ``svg`` to ``format`` at ``width`` x ``height`` pixels."""
        ...


class CairoRasterizer:
    """Rasterizer backed by CairoSVG and the native cairo library."""

    name = "cairosvg"
    formats = SUPPORTED_OUTPUT_FORMATS

    def __init__(self, cairosvg: ModuleType) -> None:
        self._cairosvg = cairosvg

    def render(
        self,
        svg: bytes,
        *,
        format: str,
        width: int,
        height: int,
        id: str | None = None,
    ) -> bytes:
        if id is not None:
            # cairo renders whole documents only
            log.debug("Element id is not used by cairosvg", id=id)

        convert = getattr(self._cairosvg, f"svg2{format.lower()}")
        return convert(bytestring=svg, output_width=width, output_height=height)


def load_rasterizer() -> Rasterizer | None:
    """Load the native rasterizer.

    Returns:
        The rasterizer, or None if CairoSVG or the cairo library is missing
    """
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        # cairocffi raises OSError when libcairo itself cannot be found
        log.debug("CairoSVG could not be loaded", error=str(e))
        return None

    return CairoRasterizer(cairosvg)


def require_rasterizer(rasterizer: Rasterizer | None) -> Rasterizer:
    """Return ``rasterizer`` or raise if it is unavailable."""
    if rasterizer is None:
        raise RasterizerUnavailableError()
    return rasterizer


def check_rasterizer() -> dict[str, bool]:
    """Report which rasterizer backends can be loaded."""
    return {CairoRasterizer.name: load_rasterizer() is not None}
