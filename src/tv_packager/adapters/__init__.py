"""Default implementations of the application ports."""

from .executor import SubprocessCommandExecutor
from .prompts import DefaultsInputProvider, TyperInputProvider
from .renderer import Jinja2TemplateRenderer

__all__ = [
    "DefaultsInputProvider",
    "Jinja2TemplateRenderer",
    "SubprocessCommandExecutor",
    "TyperInputProvider",
]
