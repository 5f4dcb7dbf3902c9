"""Build plugin that renders SVG sources to raster outputs after each build."""

import asyncio
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rasterkit.config.settings import Conversion, HostConfig, OutputSpec
from rasterkit.core.batch import BatchCoordinator, ConversionReport, extend_output
from rasterkit.core.normalizer import ResolvedOutput
from rasterkit.exceptions import ConfigurationError
from rasterkit.render.rasterizer import Rasterizer, load_rasterizer, require_rasterizer
from rasterkit.utils.logging import get_logger

log = get_logger(__name__)


class RsvgPlugin:
    """Post-build plugin for a web-asset build host.

    The host constructs the plugin once with its merged configuration and
    calls :meth:`on_compile` after every successful build.
    """

    # Hosts discover build plugins by this flag
    build_plugin = True

    def __init__(
        self,
        config: HostConfig | Mapping[str, Any] | None,
        rasterizer_loader: Callable[[], Rasterizer | None] | None = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            config: The host's merged configuration. Missing ``plugins`` or
                ``plugins.rsvg`` sections mean there is nothing to convert.
            rasterizer_loader: Loads the native rasterizer; called once.
                Defaults to :func:`load_rasterizer`.
        """
        if isinstance(config, HostConfig):
            host = config
        else:
            try:
                host = HostConfig.model_validate(config or {})
            except ValidationError as e:
                raise ConfigurationError(f"Invalid rsvg plugin configuration: {e}") from e

        self.config = host.plugins.rsvg
        self.public_path = host.paths.public

        self.rasterizer = (rasterizer_loader or load_rasterizer)()
        if self.rasterizer is None:
            log.warning(
                "SVG rasterizer is not available; SVG conversions are disabled",
                hint="install cairosvg and the cairo system library",
            )

    @property
    def available(self) -> bool:
        """Whether the native rasterizer was loaded."""
        return self.rasterizer is not None

    @property
    def conversions(self) -> list[Conversion]:
        return self.config.conversions

    def _coordinator(self) -> BatchCoordinator:
        return BatchCoordinator(require_rasterizer(self.rasterizer), self.public_path)

    def extend_output(self, conversion: Conversion, output: OutputSpec) -> ResolvedOutput:
        """Resolve one output of ``conversion`` against the public directory."""
        return extend_output(self.public_path, conversion, output)

    async def convert_svg(self, input_path: str | Path, output: ResolvedOutput) -> Path:
        """Render one resolved output.

        Raises:
            RasterizerUnavailableError: If the rasterizer was not loaded
            RenderError: If rendering or writing fails
        """
        return await self._coordinator().convert_svg(input_path, output)

    async def handle_conversion(self, conversion: Conversion) -> ConversionReport:
        """Render every output of one conversion."""
        return await self._coordinator().handle_conversion(conversion)

    async def on_compile(self, *_args: Any) -> list[ConversionReport]:
        """Post-build hook: run every configured conversion.

        Does nothing when the rasterizer is unavailable. Output failures are
        logged, never raised, so a bad output cannot fail the build.

        Returns:
            One report per conversion that ran
        """
        if not self.available:
            return []

        return list(
            await asyncio.gather(*(self.handle_conversion(conversion) for conversion in self.conversions))
        )
