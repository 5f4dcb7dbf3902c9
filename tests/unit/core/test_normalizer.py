"""Tests for output normalization."""

from pathlib import Path

import pytest

from rasterkit.config.settings import GLOBAL_OUTPUT_DEFAULTS, OutputSpec
from rasterkit.core.normalizer import ResolvedOutput, merge_output_fields, normalize_output
from rasterkit.exceptions import ConfigurationError


class TestMergeOutputFields:
    """Tests for layer precedence."""

    def test_global_defaults_apply(self):
        """Test the global format default applies when nothing overrides it."""
        merged = merge_output_fields(GLOBAL_OUTPUT_DEFAULTS, OutputSpec(), OutputSpec(width=10))
        assert merged["format"] == "png"

    def test_batch_defaults_override_global(self):
        merged = merge_output_fields(GLOBAL_OUTPUT_DEFAULTS, OutputSpec(format="pdf"), OutputSpec())
        assert merged["format"] == "pdf"

    def test_output_overrides_batch_defaults(self):
        merged = merge_output_fields(
            GLOBAL_OUTPUT_DEFAULTS,
            OutputSpec(format="pdf", width=10, height=20, path="a.pdf", id="a"),
            OutputSpec(format="ps", width=30, height=40, path="b.ps", id="b"),
        )
        assert merged == {"format": "ps", "width": 30, "height": 40, "path": "b.ps", "id": "b"}

    def test_unset_field_does_not_mask_lower_layer(self):
        """Test that a None at a higher layer keeps the lower value."""
        merged = merge_output_fields(OutputSpec(format="png"), OutputSpec(path="x.png"), OutputSpec(path=None))
        assert merged["path"] == "x.png"


class TestNormalizeOutput:
    """Tests for normalize_output."""

    def test_applies_global_format(self):
        resolved = normalize_output("public", OutputSpec(), OutputSpec(width=200, height=100, path="output.png"))
        assert resolved.format == "png"

    def test_applies_conversion_defaults(self):
        resolved = normalize_output(
            "public",
            OutputSpec(format="abc", path="output.abc"),
            OutputSpec(width=200, height=100),
        )
        assert resolved.format == "abc"
        assert resolved.path == str(Path("public") / "output.abc")

    def test_output_overrides_defaults(self):
        resolved = normalize_output(
            "public",
            OutputSpec(format="abc"),
            OutputSpec(format="def", width=200, height=100, path="output.def"),
        )
        assert resolved.format == "def"

    def test_prepends_base_directory(self):
        resolved = normalize_output("public", OutputSpec(), OutputSpec(width=200, path="output.png"))
        assert resolved.path == "public/output.png"

    def test_absolute_path_unchanged(self, tmp_path):
        absolute = str(tmp_path / "output.png")
        resolved = normalize_output("public", OutputSpec(), OutputSpec(width=200, path=absolute))
        assert resolved.path == absolute

    def test_height_mirrors_width(self):
        resolved = normalize_output("public", OutputSpec(), OutputSpec(width=200, path="o.png"))
        assert resolved.height == 200

    def test_width_mirrors_height(self):
        resolved = normalize_output("public", OutputSpec(), OutputSpec(height=100, path="o.png"))
        assert resolved.width == 100

    def test_dimension_from_defaults_is_mirrored(self):
        resolved = normalize_output("public", OutputSpec(width=48, path="o.png"), OutputSpec())
        assert (resolved.width, resolved.height) == (48, 48)

    def test_zero_height_is_kept(self):
        """Test that an explicit zero is a value, not a missing dimension."""
        resolved = normalize_output("public", OutputSpec(), OutputSpec(width=64, height=0, path="o.png"))
        assert (resolved.width, resolved.height) == (64, 0)

    def test_both_dimensions_missing(self):
        """Test that missing dimensions are left for rendering to reject."""
        resolved = normalize_output("public", OutputSpec(), OutputSpec(path="o.png"))
        assert resolved.width is None
        assert resolved.height is None

    def test_missing_path_raises(self):
        with pytest.raises(ConfigurationError, match="no path"):
            normalize_output("public", OutputSpec(), OutputSpec(width=10))

    def test_custom_global_defaults(self):
        resolved = normalize_output(
            "out",
            OutputSpec(),
            OutputSpec(width=10, path="o"),
            global_defaults=OutputSpec(format="pdf"),
        )
        assert resolved.format == "pdf"

    def test_missing_format_raises(self):
        with pytest.raises(ConfigurationError, match="no format"):
            normalize_output("out", OutputSpec(), OutputSpec(width=10, path="o"), global_defaults=OutputSpec())

    def test_global_defaults_not_mutated(self):
        normalize_output("public", OutputSpec(format="abc"), OutputSpec(width=1, path="o"))
        assert GLOBAL_OUTPUT_DEFAULTS.set_fields() == {"format": "png"}


class TestResolvedOutput:
    """Tests for ResolvedOutput."""

    def test_with_path_returns_copy(self):
        output = ResolvedOutput(format="png", path="a.png", width=1, height=1)
        moved = output.with_path("b.png")
        assert moved.path == "b.png"
        assert output.path == "a.png"

    def test_render_options(self):
        output = ResolvedOutput(format="png", path="a.png", width=3, height=4, id="icon")
        assert output.render_options() == {"format": "png", "width": 3, "height": 4, "id": "icon"}
