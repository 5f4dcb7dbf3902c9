"""Custom exceptions for rasterkit."""

from pathlib import Path


class RasterkitError(Exception):
    """Base exception class for rasterkit."""

    pass


class ConfigurationError(RasterkitError):
    """Configuration error."""

    pass


class RasterizerUnavailableError(RasterkitError):
    """The native rasterizer could not be loaded."""

    def __init__(self, message: str = "Native SVG rasterizer is not available") -> None:
        super().__init__(message)


class RenderError(RasterkitError):
    """Error while rendering a single output."""

    def __init__(self, output_path: Path | str, message: str, cause: Exception | None = None) -> None:
        self.output_path = Path(output_path)
        self.cause = cause
        super().__init__(f"Rendering failed for {output_path}: {message}")


class MissingDimensionsError(RenderError):
    """Neither width nor height could be resolved for an output."""

    def __init__(self, output_path: Path | str) -> None:
        super().__init__(output_path, "width or height is required")


class InvalidDimensionsError(RenderError):
    """Width or height is not a positive integer."""

    def __init__(self, output_path: Path | str, width: object, height: object) -> None:
        super().__init__(
            output_path,
            f"width and height must be positive integers (got width={width}, height={height})",
        )
        self.width = width
        self.height = height


class UnsupportedFormatError(RenderError):
    """The rasterizer cannot produce the requested format."""

    def __init__(self, output_path: Path | str, format_name: str) -> None:
        super().__init__(output_path, f"unsupported output format: {format_name}")
        self.format = format_name
