"""External SDK command sequencing and artifact extraction."""

from __future__ import annotations

import logging
import re
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from tv_packager.application.ports import CommandExecutor
from tv_packager.errors import (
    ArtifactNotFoundError,
    PreflightError,
    ToolchainFailureError,
)
from tv_packager.infrastructure.filesystem import ensure_dir

logger = logging.getLogger(__name__)

PACKAGE_LOCATION_PATTERN = re.compile(r"Package File Location:\s*(.*)")


@dataclass(frozen=True)
class ToolchainStep:
    """One external command and, optionally, how to find its artifact."""

    name: str
    command: tuple[str, ...]
    artifact_pattern: re.Pattern[str] | None = None


@dataclass(frozen=True)
class ToolchainResult:
    """Captured outputs of a completed sequence and the extracted artifact."""

    artifact: Path | None
    outputs: tuple[str, ...]


class ToolchainRunner:
    """Run toolchain steps in order, stopping at the first failure."""

    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor

    def preflight(self, command: Sequence[str]) -> str:
        """Run a probe command and return its output.

        Raises
        ------
        PreflightError
            If the probe exits nonzero, including when the tool is missing.
        """
        result = self.executor.run(tuple(command))
        if result.returncode != 0:
            raise PreflightError(
                f"The command '{' '.join(command)}' failed. Make sure the SDK is "
                f"installed and its command-line tools are on your PATH.\n"
                f"{result.output.strip()}"
            )
        logger.info("%s", result.output.strip())
        return result.output

    def run(self, steps: Sequence[ToolchainStep]) -> ToolchainResult:
        """Execute ``steps`` sequentially.

        Raises
        ------
        ToolchainFailureError
            On the first nonzero exit; later steps are not executed.
        ArtifactNotFoundError
            If a step's artifact pattern does not match its output.
        """
        artifact: Path | None = None
        outputs: list[str] = []
        for step in steps:
            logger.info("$ %s", " ".join(step.command))
            result = self.executor.run(step.command)
            outputs.append(result.output)
            if result.returncode != 0:
                raise ToolchainFailureError(step.name, result.returncode, result.output)
            if step.artifact_pattern is not None:
                match = step.artifact_pattern.search(result.output)
                if match is None or not match.group(1).strip():
                    raise ArtifactNotFoundError(
                        f"Step '{step.name}' did not report an artifact location."
                    )
                artifact = Path(match.group(1).strip())
        return ToolchainResult(artifact=artifact, outputs=tuple(outputs))


def finalize_artifact(artifact: Path, dest_dir: Path, work_dir: Path | None = None) -> Path:
    """Move ``artifact`` into ``dest_dir`` and remove the toolchain work dir."""
    if not artifact.is_file():
        raise ArtifactNotFoundError(f"Reported artifact does not exist: {artifact}")
    ensure_dir(dest_dir)
    target = dest_dir / artifact.name
    if target.resolve() != artifact.resolve():
        if target.exists():
            target.unlink()
        shutil.move(str(artifact), target)
    if work_dir is not None and work_dir.exists():
        shutil.rmtree(work_dir)
    logger.info("Package created at %s", target)
    return target
