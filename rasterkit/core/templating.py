"""Output path templating."""

import re

from rasterkit.core.normalizer import ResolvedOutput

# Placeholder token -> ResolvedOutput field
TOKEN_FIELDS = {
    "width": "width",
    "w": "width",
    "height": "height",
    "h": "height",
    "format": "format",
    "f": "format",
    "id": "id",
    "i": "id",
}

_TOKEN_PATTERN = re.compile(
    r"\{(" + "|".join(sorted(TOKEN_FIELDS, key=len, reverse=True)) + r")\}",
    re.IGNORECASE,
)


def render_path_template(template: str, output: ResolvedOutput) -> str:
    """Substitute ``{width}``, ``{height}``, ``{format}`` and ``{id}`` in a path.

    Tokens match case-insensitively and each has a one-letter alias
    (``{w}``, ``{h}``, ``{f}``, ``{i}``). A token whose field has no value,
    and any other braced text, is kept as written.

    Args:
        template: Path template
        output: Resolved output supplying the values

    Returns:
        The path with every recognized token replaced
    """

    def substitute(match: re.Match[str]) -> str:
        value = getattr(output, TOKEN_FIELDS[match.group(1).lower()])
        if value is None:
            return match.group(0)
        return str(value)

    return _TOKEN_PATTERN.sub(substitute, template)


def apply_path_template(output: ResolvedOutput) -> ResolvedOutput:
    """Return ``output`` with its path template rendered."""
    return output.with_path(render_path_template(output.path, output))
