"""Application ports for the collaborators the pipeline depends on."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from tv_packager.application.fields import FieldDescriptor
from tv_packager.application.results import CommandResult
from tv_packager.types import Answers, TemplateContext


class InputProvider(Protocol):
    """Obtain validated values for a list of fields."""

    def ask(self, fields: Sequence[FieldDescriptor]) -> Answers:
        """Return a mapping of field name to validated value."""


class TemplateRenderer(Protocol):
    """Expand a template string against a context."""

    def render(self, template: str, context: TemplateContext) -> str:
        """Return the expanded text."""


class CommandExecutor(Protocol):
    """Run one external command to completion."""

    def run(self, command: Sequence[str], cwd: Path | None = None) -> CommandResult:
        """Run ``command`` and return its exit status and captured output."""
