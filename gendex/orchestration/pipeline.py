"""
Main pipeline orchestration for gendex.

Runs the generation steps strictly in order:
workspace -> sources -> compile -> link -> encode -> write. The first error
aborts the run; the workspace is released before the error reaches the caller.
"""

from __future__ import annotations

import uuid
from pathlib import Path

from ..core.config import Config, get_config
from ..core.exceptions import GendexError, ReadArtifactError
from ..core.logging import bind_context, clear_context, get_logger
from ..core.types import PipelineRun, PipelineState
from ..sdk import locate_sdk_root, resolve_build_tools, resolve_platform
from ..services.emitter import EmitterService
from ..services.sources import find_sources
from ..services.toolchain import ProcessRunner, ToolchainService
from ..services.workspace import Workspace, scoped_workspace

logger = get_logger(__name__)


class GendexPipeline:
    """Compiles, links and embeds the platform-support DEX."""

    def __init__(self, config: Config | None = None, runner: ProcessRunner | None = None) -> None:
        """Initialize the pipeline.

        Args:
            config: Configuration; defaults to the cached environment config
            runner: Process runner handed to the toolchain service
        """
        self.config = config or get_config()
        self.toolchain = ToolchainService(self.config.toolchain, runner=runner)
        self.emitter = EmitterService(self.config.emit)
        self.last_run: PipelineRun | None = None

    def run(self, output_path: Path) -> PipelineRun:
        """Execute the pipeline, writing the generated module to ``output_path``.

        Returns:
            The completed run record.

        Raises:
            GendexError: The first failure; ``last_run`` holds the failed record.
        """
        run = PipelineRun(run_id=str(uuid.uuid4())[:8], output_path=output_path)
        self.last_run = run
        bind_context(run_id=run.run_id)
        logger.info("Starting gendex pipeline", output=str(output_path))

        try:
            with scoped_workspace(self.config.toolchain.package_path, self.config.workspace) as ws:
                run.advance(PipelineState.WORKSPACE_READY)
                self._execute(run, ws, output_path)
        except GendexError as e:
            run.mark_failed(str(e))
            logger.error("Pipeline failed", stage=run.failed_stage.value, error=str(e))
            raise
        finally:
            clear_context()

        run.advance(PipelineState.DONE)
        logger.info("Pipeline completed", duration_s=round(run.duration_seconds, 3))
        return run

    def _execute(self, run: PipelineRun, ws: Workspace, output_path: Path) -> None:
        sdk_root = locate_sdk_root(self.config.sdk)
        sources = find_sources(self.config.toolchain.source_glob)
        run.metadata["sources"] = [str(s) for s in sources]
        run.advance(PipelineState.SOURCES_FOUND)

        platform = resolve_platform(sdk_root, self.config.sdk)
        self.toolchain.compile_sources(sources, platform / self.config.sdk.boot_jar, ws.class_dir)
        run.metadata["platform"] = platform.name
        run.advance(PipelineState.COMPILED)

        build_tools = resolve_build_tools(sdk_root, self.config.sdk)
        self.toolchain.link_classes(build_tools, ws.class_dir, ws.dex_path)
        run.metadata["build_tools"] = build_tools.name
        run.advance(PipelineState.LINKED)

        dex_bytes = read_artifact(ws.dex_path)
        source = self.emitter.render(dex_bytes)
        run.metadata["dex_bytes"] = len(dex_bytes)
        run.advance(PipelineState.ENCODED)

        self.emitter.write(source, output_path)
        run.advance(PipelineState.WRITTEN)


def read_artifact(path: Path) -> bytes:
    """Read the linked DEX file.

    Raises:
        ReadArtifactError: If the file is missing or unreadable.
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadArtifactError(
            message=f"cannot read {path}",
            artifact_path=str(path),
            cause=e,
        ) from e


def run_pipeline(
    output_path: Path,
    config: Config | None = None,
    runner: ProcessRunner | None = None,
) -> PipelineRun:
    """Run the gendex pipeline once."""
    return GendexPipeline(config, runner=runner).run(output_path)
