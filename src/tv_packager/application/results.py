"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from tv_packager.errors import PackagerError


@dataclass(frozen=True)
class CommandResult:
    """Exit status and combined stdout/stderr of one external command."""

    returncode: int
    output: str


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one top-level adapter operation.

    Exactly one of ``succeeded`` or ``error`` describes the outcome: a
    successful result may carry an output path and the resolved metadata, a
    failed one carries the failing stage and its error.
    """

    platform: str
    operation: str
    succeeded: bool
    output_path: Path | None = None
    metadata: BaseModel | None = None
    stage: str | None = None
    error: PackagerError | None = None

    @classmethod
    def success(
        cls,
        platform: str,
        operation: str,
        output_path: Path | None = None,
        metadata: BaseModel | None = None,
    ) -> OperationResult:
        return cls(
            platform=platform,
            operation=operation,
            succeeded=True,
            output_path=output_path,
            metadata=metadata,
        )

    @classmethod
    def failure(
        cls, platform: str, operation: str, stage: str, error: PackagerError
    ) -> OperationResult:
        return cls(
            platform=platform,
            operation=operation,
            succeeded=False,
            stage=stage,
            error=error,
        )
