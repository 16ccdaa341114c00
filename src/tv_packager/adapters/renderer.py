"""Jinja2-backed template renderer."""

from __future__ import annotations

from jinja2 import Environment, TemplateError

from tv_packager.errors import TemplateRenderError
from tv_packager.types import TemplateContext


class Jinja2TemplateRenderer:
    """Expand ``{{ key }}`` placeholders against a context.

    Values are HTML-escaped, as mustache does for double-brace tags.
    """

    def __init__(self) -> None:
        self._env = Environment(autoescape=True, keep_trailing_newline=True)

    def render(self, template: str, context: TemplateContext) -> str:
        """Return ``template`` expanded with ``context``."""
        try:
            return self._env.from_string(template).render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(f"Template expansion failed: {exc}") from exc
