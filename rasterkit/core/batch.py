"""Batch coordination for one conversion.

Every output of a conversion is resolved, templated and rendered
concurrently. Failures are logged one by one as they happen and never stop
the siblings; once every output has settled a single summary line is logged.
"""

from dataclasses import dataclass, field
from pathlib import Path

from rasterkit.config.settings import GLOBAL_OUTPUT_DEFAULTS, Conversion, OutputSpec
from rasterkit.core.normalizer import ResolvedOutput, normalize_output
from rasterkit.core.templating import apply_path_template
from rasterkit.exceptions import ConfigurationError, RenderError
from rasterkit.render.adapter import convert_svg
from rasterkit.render.rasterizer import Rasterizer
from rasterkit.utils.concurrency import TaskResult, map_settled
from rasterkit.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class ConversionReport:
    """Outcome of one conversion after every output settled."""

    input: str
    results: list[TaskResult[OutputSpec]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def written(self) -> list[Path]:
        """Paths of the outputs that were generated."""
        return [r.result for r in self.results if r.success]

    def summary(self) -> str:
        return f"{self.succeeded} of {self.total} outputs generated from {self.input}"


def extend_output(
    base_dir: str | Path,
    conversion: Conversion,
    output: OutputSpec,
    global_defaults: OutputSpec = GLOBAL_OUTPUT_DEFAULTS,
) -> ResolvedOutput:
    """Resolve an output of ``conversion`` and render its path template."""
    resolved = normalize_output(base_dir, conversion.output_defaults, output, global_defaults)
    return apply_path_template(resolved)


class BatchCoordinator:
    """Renders every output of a conversion, tolerating partial failure."""

    def __init__(
        self,
        rasterizer: Rasterizer,
        base_dir: str | Path,
        global_defaults: OutputSpec = GLOBAL_OUTPUT_DEFAULTS,
    ) -> None:
        """Initialize the coordinator.

        Args:
            rasterizer: Rasterizer used for every output
            base_dir: Directory relative output paths are placed under
            global_defaults: Output fields applied beneath every other layer
        """
        self.rasterizer = rasterizer
        self.base_dir = base_dir
        self.global_defaults = global_defaults

    def extend_output(self, conversion: Conversion, output: OutputSpec) -> ResolvedOutput:
        return extend_output(self.base_dir, conversion, output, self.global_defaults)

    async def convert_svg(self, input_path: str | Path, output: ResolvedOutput) -> Path:
        return await convert_svg(input_path, output, self.rasterizer)

    async def _generate(self, conversion: Conversion, output: OutputSpec) -> Path:
        try:
            resolved = self.extend_output(conversion, output)
        except ConfigurationError as e:
            raw_path = output.path or conversion.output_defaults.path or "<no path>"
            raise RenderError(raw_path, str(e), cause=e) from e

        return await self.convert_svg(conversion.input, resolved)

    def _on_failure(self, _output: OutputSpec, error: Exception) -> None:
        path = error.output_path if isinstance(error, RenderError) else None
        log.error(
            "Output generation failed",
            path=str(path) if path is not None else None,
            error=str(error),
        )

    async def handle_conversion(self, conversion: Conversion) -> ConversionReport:
        """Render every output of ``conversion``.

        Never raises because an output failed; the returned report carries
        the per-output results.
        """
        log.debug("Conversion started", input=conversion.input, outputs=len(conversion.output))

        results = await map_settled(
            conversion.output,
            lambda output: self._generate(conversion, output),
            on_failure=self._on_failure,
        )

        report = ConversionReport(input=conversion.input, results=results)
        log.info(report.summary())
        return report
