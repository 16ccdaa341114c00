"""Input providers: interactive terminal prompts and unattended defaults."""

from __future__ import annotations

from collections.abc import Sequence

import click
import typer

from tv_packager.application.fields import FieldDescriptor
from tv_packager.errors import MetadataValidationError
from tv_packager.types import Answers


class TyperInputProvider:
    """Prompt on the terminal, asking again until each answer validates."""

    def ask(self, fields: Sequence[FieldDescriptor]) -> Answers:
        """Prompt for every field in order.

        Parameters
        ----------
        fields : Sequence[FieldDescriptor]
            Fields to ask for.

        Returns
        -------
        dict[str, object]
            Validated answers keyed by field name.
        """
        return {field.name: self._ask_one(field) for field in fields}

    def _ask_one(self, field: FieldDescriptor) -> object:
        if field.kind == "confirm":
            return typer.confirm(field.message, default=bool(field.default))
        while True:
            if field.kind == "choice":
                value = typer.prompt(
                    field.message,
                    default=field.default,
                    type=click.Choice(list(field.choices)),
                    show_choices=True,
                )
            else:
                value = typer.prompt(
                    field.message,
                    default="" if field.default is None else field.default,
                    show_default=bool(field.default),
                )
            problem = field.check(value)
            if problem is None:
                return value
            typer.echo(f">> {problem}", err=True)


class DefaultsInputProvider:
    """Accept every field's default without prompting.

    A ``choice`` field without a default takes its first choice, and a
    ``confirm`` field without a default answers no.
    """

    def ask(self, fields: Sequence[FieldDescriptor]) -> Answers:
        """Return defaults for ``fields``.

        Raises
        ------
        MetadataValidationError
            If a default does not pass its field's validator.
        """
        answers: Answers = {}
        for field in fields:
            value: object = field.default
            if field.kind == "confirm":
                value = bool(value)
            elif value is None:
                value = field.choices[0] if field.kind == "choice" and field.choices else ""
            problem = field.check(value)
            if problem is not None:
                raise MetadataValidationError(
                    f"Default for '{field.name}' is not usable ({problem}); "
                    "run interactively or fix config.xml."
                )
            answers[field.name] = value
        return answers
