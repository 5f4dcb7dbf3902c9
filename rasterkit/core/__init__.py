"""Output resolution for rasterkit.

The batch coordinator is imported from ``rasterkit.core.batch``.
"""

from rasterkit.core.normalizer import ResolvedOutput, merge_output_fields, normalize_output
from rasterkit.core.templating import apply_path_template, render_path_template

__all__ = [
    "ResolvedOutput",
    "merge_output_fields",
    "normalize_output",
    "apply_path_template",
    "render_path_template",
]
