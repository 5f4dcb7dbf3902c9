"""rasterkit - render SVG sources to raster outputs after every build."""

__version__ = "0.3.0"
