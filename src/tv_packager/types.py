"""Shared type aliases for packager modules."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Literal

type FieldKind = Literal["input", "choice", "confirm"]

type ContextScalar = str | int | float | bool | None
type TemplateContext = Mapping[str, ContextScalar]
type Answers = dict[str, object]
type ScriptMap = Mapping[str, Path]
