"""Tests for rasterizer loading."""

import builtins
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from rasterkit.exceptions import RasterizerUnavailableError
from rasterkit.render.rasterizer import (
    CairoRasterizer,
    Rasterizer,
    check_rasterizer,
    load_rasterizer,
    require_rasterizer,
)

_real_import = builtins.__import__


def _failing_import(error: Exception):
    def fake_import(name, *args, **kwargs):
        if name == "cairosvg":
            raise error
        return _real_import(name, *args, **kwargs)

    return fake_import


class TestLoadRasterizer:
    """Tests for load_rasterizer."""

    def test_missing_package(self):
        with patch("builtins.__import__", side_effect=_failing_import(ImportError("No module named 'cairosvg'"))):
            assert load_rasterizer() is None

    def test_missing_native_library(self):
        """Test that a missing libcairo (OSError from cairocffi) is treated as unavailable."""
        with patch("builtins.__import__", side_effect=_failing_import(OSError("no library called cairo"))):
            assert load_rasterizer() is None

    def test_loaded(self):
        fake_module = SimpleNamespace(svg2png=MagicMock(return_value=b"png"))
        with patch.dict("sys.modules", {"cairosvg": fake_module}):
            rasterizer = load_rasterizer()

        assert isinstance(rasterizer, CairoRasterizer)
        assert isinstance(rasterizer, Rasterizer)

    def test_check_rasterizer(self):
        with patch("rasterkit.render.rasterizer.load_rasterizer", return_value=None):
            assert check_rasterizer() == {"cairosvg": False}


class TestCairoRasterizer:
    """Tests for CairoRasterizer."""

    def test_render_dispatches_by_format(self):
        module = SimpleNamespace(svg2png=MagicMock(return_value=b"png"), svg2pdf=MagicMock(return_value=b"pdf"))
        rasterizer = CairoRasterizer(module)

        assert rasterizer.render(b"<svg/>", format="PDF", width=10, height=20) == b"pdf"
        module.svg2pdf.assert_called_once_with(bytestring=b"<svg/>", output_width=10, output_height=20)
        module.svg2png.assert_not_called()

    def test_render_ignores_id(self):
        module = SimpleNamespace(svg2png=MagicMock(return_value=b"png"))
        rasterizer = CairoRasterizer(module)

        assert rasterizer.render(b"<svg/>", format="png", width=1, height=1, id="badge") == b"png"

    def test_formats(self):
        assert "png" in CairoRasterizer.formats
        assert "jpg" not in CairoRasterizer.formats


class TestRequireRasterizer:
    """Tests for require_rasterizer."""

    def test_unavailable(self):
        with pytest.raises(RasterizerUnavailableError):
            require_rasterizer(None)

    def test_available(self, fake_rasterizer):
        assert require_rasterizer(fake_rasterizer) is fake_rasterizer
