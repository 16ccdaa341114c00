"""Shared stage pipeline and composition steps for platform adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

from tv_packager.application.ports import (
    CommandExecutor,
    InputProvider,
    TemplateRenderer,
)
from tv_packager.application.results import OperationResult
from tv_packager.errors import PackagerError, StageFailedError
from tv_packager.infrastructure import filesystem

logger = logging.getLogger(__name__)


class PipelineState(StrEnum):
    """States an adapter operation moves through."""

    IDLE = "idle"
    CONFIGURING = "configuring"
    COMPOSING = "composing"
    RENDERING = "rendering"
    PERSISTING = "persisting"
    INVOKING = "invoking"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class StageOutput:
    """What a successful operation hands back to its caller."""

    output_path: Path | None = None
    metadata: BaseModel | None = None


class StagePipeline:
    """Track the state of one operation and turn its outcome into a result.

    Stages run strictly in sequence. A failing stage aborts the operation;
    nothing already written to disk is rolled back.
    """

    def __init__(self, platform: str, operation: str) -> None:
        self.platform = platform
        self.operation = operation
        self.state = PipelineState.IDLE
        self.history: list[PipelineState] = [PipelineState.IDLE]

    def _enter(self, state: PipelineState) -> None:
        if state != self.state:
            self.history.append(state)
        self.state = state

    @contextmanager
    def stage(self, state: PipelineState, label: str | None = None) -> Iterator[None]:
        """Run a block as part of ``state``; failures are tagged with ``label``."""
        name = label or state.value
        self._enter(state)
        logger.debug("[%s %s] %s", self.platform, self.operation, name)
        try:
            yield
        except StageFailedError:
            raise
        except (PackagerError, OSError) as exc:
            raise StageFailedError(name, exc) from exc

    def run(self, body: Callable[[], StageOutput]) -> OperationResult:
        """Run ``body`` and return exactly one success or failure result."""
        try:
            output = body()
        except StageFailedError as exc:
            self._enter(PipelineState.FAILED)
            cause = exc.cause if isinstance(exc.cause, PackagerError) else exc
            logger.error("%s %s failed at %s: %s", self.platform, self.operation, exc.stage, exc.cause)
            return OperationResult.failure(self.platform, self.operation, exc.stage, cause)
        except PackagerError as exc:
            stage = self.state.value
            self._enter(PipelineState.FAILED)
            return OperationResult.failure(self.platform, self.operation, stage, exc)
        self._enter(PipelineState.DONE)
        return OperationResult.success(
            self.platform,
            self.operation,
            output_path=output.output_path,
            metadata=output.metadata,
        )


class PlatformAdapter:
    """Base for platform variants; owns collaborators and shared composition."""

    name: str = ""

    def __init__(
        self,
        *,
        input_provider: InputProvider | None = None,
        renderer: TemplateRenderer | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        if input_provider is None:
            from tv_packager.adapters.prompts import TyperInputProvider

            input_provider = TyperInputProvider()
        if renderer is None:
            from tv_packager.adapters.renderer import Jinja2TemplateRenderer

            renderer = Jinja2TemplateRenderer()
        if executor is None:
            from tv_packager.adapters.executor import SubprocessCommandExecutor

            executor = SubprocessCommandExecutor()
        self.input_provider = input_provider
        self.renderer = renderer
        self.executor = executor

    def pipeline(self, operation: str) -> StagePipeline:
        """Start a fresh pipeline for ``operation``."""
        return StagePipeline(self.name, operation)

    def compose(
        self,
        pipeline: StagePipeline,
        *,
        www_src: Path,
        dest: Path,
        platform_repos: Path,
        clean: bool = False,
        entry_file: str | None = None,
        scripts: Mapping[str, Path] | None = None,
    ) -> None:
        """Build ``dest`` from the application sources and platform overlay."""
        with pipeline.stage(PipelineState.COMPOSING, "copy application sources"):
            if clean:
                filesystem.clean(dest)
            filesystem.ensure_dir(dest)
            if scripts:
                filesystem.copy_auxiliary_scripts(scripts, dest)
            filesystem.copy_app_source(www_src, dest)
            if entry_file is not None:
                filesystem.promote_entry_file(dest, entry_file)
        with pipeline.stage(PipelineState.COMPOSING, "overlay platform files"):
            filesystem.overlay_platform_files(platform_repos, dest)
