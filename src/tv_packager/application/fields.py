"""Prompt field descriptors and the metadata builder."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ValidationError

from tv_packager.errors import MetadataValidationError
from tv_packager.types import FieldKind

if TYPE_CHECKING:
    from tv_packager.application.ports import InputProvider

type Validator = Callable[[str], str | None]


@dataclass(frozen=True)
class FieldDescriptor:
    """Describe one value the input provider must obtain.

    Parameters
    ----------
    name : str
        Key under which the answer is returned.
    message : str
        Question shown to the operator.
    kind : {"input", "choice", "confirm"}, default="input"
        Free text, one of ``choices``, or yes/no.
    default : str | bool | None, default=None
        Value offered when the operator just presses enter.
    choices : tuple[str, ...], default=()
        Allowed values for ``choice`` fields.
    validator : Callable[[str], str | None] | None, default=None
        Returns an error message for invalid input, ``None`` otherwise.
    """

    name: str
    message: str
    kind: FieldKind = "input"
    default: str | bool | None = None
    choices: tuple[str, ...] = ()
    validator: Validator | None = None

    def check(self, value: object) -> str | None:
        """Return an error message if ``value`` is not acceptable."""
        if self.kind == "confirm":
            return None if isinstance(value, bool) else "expected yes or no"
        if not isinstance(value, str):
            return f"expected text for '{self.name}'"
        if self.kind == "choice" and value not in self.choices:
            return f"'{value}' is not one of: {', '.join(self.choices)}"
        if self.validator is not None:
            return self.validator(value)
        return None


class MetadataBuilder[M: BaseModel]:
    """Accumulate validated answers and produce one immutable metadata model."""

    def __init__(self, schema: type[M], base: Mapping[str, object] | None = None) -> None:
        self._schema = schema
        self._values: dict[str, object] = dict(base or {})

    def set(self, name: str, value: object) -> Self:
        """Record a single value."""
        self._values[name] = value
        return self

    def ask(self, provider: InputProvider, fields: Sequence[FieldDescriptor]) -> Self:
        """Ask ``fields`` through ``provider`` and record the answers.

        Raises
        ------
        MetadataValidationError
            If the provider returns a value its field rejects.
        """
        answers = provider.ask(fields)
        for field in fields:
            if field.name not in answers:
                raise MetadataValidationError(f"No answer for '{field.name}'.")
            value = answers[field.name]
            problem = field.check(value)
            if problem is not None:
                raise MetadataValidationError(f"{field.name}: {problem}")
            self._values[field.name] = value
        return self

    def build(self) -> M:
        """Validate every accumulated value against the schema."""
        try:
            return self._schema.model_validate(self._values)
        except ValidationError as exc:
            raise MetadataValidationError(
                f"Invalid {self._schema.__name__}: {exc}"
            ) from exc
