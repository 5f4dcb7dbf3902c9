"""Output configuration normalization.

Merges the three layers of output settings and fills in what the user left
out. Precedence, highest first: the output's own fields, the conversion's
``output_defaults``, then the global defaults.
"""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rasterkit.config.settings import GLOBAL_OUTPUT_DEFAULTS, OutputSpec
from rasterkit.exceptions import ConfigurationError


@dataclass(frozen=True)
class ResolvedOutput:
    """A fully merged output, ready for rendering."""

    format: str
    path: str
    width: int | str | None = None
    height: int | str | None = None
    id: str | None = None

    def with_path(self, path: str) -> "ResolvedOutput":
        """Return a copy with a different path."""
        return dataclasses.replace(self, path=path)

    def render_options(self) -> dict[str, Any]:
        """Parameters handed to the rasterizer."""
        return {
            "format": self.format,
            "width": self.width,
            "height": self.height,
            "id": self.id,
        }


def merge_output_fields(*layers: OutputSpec) -> dict[str, Any]:
    """Merge output layers, later layers winning. Unset fields never mask."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer.set_fields())
    return merged


def normalize_output(
    base_dir: str | Path,
    defaults: OutputSpec,
    output: OutputSpec,
    global_defaults: OutputSpec = GLOBAL_OUTPUT_DEFAULTS,
) -> ResolvedOutput:
    """Resolve one output against its defaults.

    A missing width is taken from the height, otherwise a missing height is
    taken from the width. When both are missing the output is still
    returned; rendering rejects it.

    Relative paths are placed under ``base_dir``; absolute paths are kept.

    Raises:
        ConfigurationError: If no layer supplies a path or a format.
    """
    fields = merge_output_fields(global_defaults, defaults, output)

    if fields.get("width") is None:
        fields["width"] = fields.get("height")
    elif fields.get("height") is None:
        fields["height"] = fields["width"]

    path = fields.get("path")
    if not path:
        raise ConfigurationError("Output has no path; set 'path' on the output or in output_defaults")
    if not fields.get("format"):
        raise ConfigurationError(f"Output {path} has no format")

    if not Path(path).is_absolute():
        fields["path"] = str(Path(base_dir) / path)

    return ResolvedOutput(**fields)
