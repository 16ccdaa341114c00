"""Subprocess-backed command executor."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from tv_packager.application.results import CommandResult

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class SubprocessCommandExecutor:
    """Run a command synchronously with stdout and stderr captured together."""

    def run(self, command: Sequence[str], cwd: Path | None = None) -> CommandResult:
        """Run ``command`` without a timeout.

        A missing executable is reported as exit code 127, like a shell would.
        """
        try:
            completed = subprocess.run(
                list(command),
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            return CommandResult(returncode=COMMAND_NOT_FOUND, output=str(exc))
        logger.debug("%s exited with %d", command[0], completed.returncode)
        return CommandResult(returncode=completed.returncode, output=completed.stdout or "")
