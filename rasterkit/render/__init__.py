"""Rendering module for rasterkit."""

from rasterkit.render.adapter import convert_svg, validate_output
from rasterkit.render.rasterizer import (
    CairoRasterizer,
    Rasterizer,
    check_rasterizer,
    load_rasterizer,
    require_rasterizer,
)

__all__ = [
    "convert_svg",
    "validate_output",
    "CairoRasterizer",
    "Rasterizer",
    "check_rasterizer",
    "load_rasterizer",
    "require_rasterizer",
]
