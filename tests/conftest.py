"""Pytest configuration and fixtures."""

import logging
import os
import shutil
from pathlib import Path

import pytest
import structlog

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = PROJECT_ROOT / "tests" / "fixtures"


class FakeRasterizer:
    """Rasterizer double that records calls and returns deterministic bytes."""

    name = "fake"
    formats = ("png", "pdf", "ps", "svg")

    def __init__(self, fail_for: set[int] | None = None) -> None:
        self.calls: list[dict] = []
        self.fail_for = fail_for or set()

    def render(self, svg: bytes, *, format: str, width: int, height: int, id: str | None = None) -> bytes:
        self.calls.append({"svg": svg, "format": format, "width": width, "height": height, "id": id})
        if width in self.fail_for:
            raise RuntimeError(f"cannot render at width {width}")
        return f"{format}:{width}x{height}".encode()


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    """Create a fake rasterizer."""
    return FakeRasterizer()


@pytest.fixture
def input_svg(tmp_path: Path) -> Path:
    """Copy the sample SVG into a temporary directory."""
    target = tmp_path / "input.svg"
    shutil.copy(FIXTURES_DIR / "input.svg", target)
    return target


@pytest.fixture
def host_config() -> dict:
    """Minimal host configuration, as supplied by the build host."""
    return {"paths": {"public": "public"}}


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Run settings tests in an isolated directory without rasterkit.yaml."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("RASTERKIT_"):
            monkeypatch.delenv(name)

    from rasterkit.config.settings import get_settings

    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def make_rasterizer():
    """Factory for fake rasterizers that fail at chosen widths."""
    return FakeRasterizer


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging configuration made by a test."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
