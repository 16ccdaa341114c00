"""Error taxonomy for the packaging pipeline."""

from __future__ import annotations


class PackagerError(Exception):
    """Base error for every packaging failure."""

    exit_code = 1


class MetadataValidationError(PackagerError):
    """Raised when user-supplied or stored metadata is invalid."""

    exit_code = 2


class UnknownPlatformError(PackagerError):
    """Raised when no adapter is registered under a platform name."""

    exit_code = 2


class ConflictingEntryFileError(PackagerError):
    """Raised when the declared entry file and ``index.html`` both exist."""

    exit_code = 3


class MissingSourceError(PackagerError):
    """Raised when a required input file or directory does not exist."""

    exit_code = 3


class CorruptStateError(PackagerError):
    """Raised when the persisted configuration file cannot be parsed."""

    exit_code = 4


class TemplateRenderError(PackagerError):
    """Raised when a template cannot be expanded."""

    exit_code = 5


class ToolchainFailureError(PackagerError):
    """Raised when an external toolchain command exits nonzero."""

    exit_code = 6

    def __init__(self, step: str, exit_code: int, output: str) -> None:
        self.step = step
        self.returncode = exit_code
        self.output = output
        detail = output.strip()
        message = f"Step '{step}' failed with exit code {exit_code}."
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


class ArtifactNotFoundError(PackagerError):
    """Raised when the packaging output does not name an artifact."""

    exit_code = 6


class PreflightError(PackagerError):
    """Raised when a required external tool is not installed."""

    exit_code = 7


class StageFailedError(PackagerError):
    """Wrap a stage failure with the name of the stage that raised it."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        code = getattr(cause, "exit_code", None)
        self.exit_code = code if isinstance(code, int) and code > 0 else 1
        super().__init__(f"{stage} failed: {cause}")
