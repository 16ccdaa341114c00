"""Template expansion of platform manifests inside a composed tree."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from tv_packager.application.ports import TemplateRenderer
from tv_packager.errors import MissingSourceError, TemplateRenderError
from tv_packager.infrastructure.filesystem import CANONICAL_ENTRY_FILE
from tv_packager.types import TemplateContext

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".tmpl"

_CSP_META = re.compile(
    r"(<meta.*)(http-equiv)(.*=*.)(\"Content-Security-Policy\"|'Content-Security-Policy')"
)


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateRenderError(f"Template {path} is not valid UTF-8: {exc}") from exc


def render_all(dest: Path, context: TemplateContext, renderer: TemplateRenderer) -> list[Path]:
    """Render every ``*.tmpl`` file directly under ``dest``.

    Each template is written to its name without the suffix and then deleted.
    Re-running after an interruption renders the same output again.

    Returns
    -------
    list[Path]
        Paths of the rendered files.
    """
    rendered: list[Path] = []
    for entry in sorted(dest.iterdir()):
        if not entry.is_file() or not entry.name.endswith(TEMPLATE_SUFFIX):
            continue
        target = entry.with_name(entry.name[: -len(TEMPLATE_SUFFIX)])
        text = _read_template(entry)
        target.write_text(renderer.render(text, context), encoding="utf-8")
        entry.unlink()
        logger.debug("Rendered %s -> %s", entry.name, target.name)
        rendered.append(target)
    return rendered


def render_single(
    template_path: Path,
    output_path: Path,
    context: TemplateContext,
    renderer: TemplateRenderer,
) -> Path:
    """Render one template and atomically replace ``output_path``.

    The expansion is written to a sibling ``.tmp`` file first, so a partially
    written manifest is never visible at ``output_path``.
    """
    if not template_path.is_file():
        raise MissingSourceError(f"Template not found: {template_path}")
    text = _read_template(template_path)
    rendered = renderer.render(text, context)
    tmp_path = output_path.with_name(f"{output_path.name}.tmp")
    tmp_path.write_text(rendered, encoding="utf-8")
    os.replace(tmp_path, output_path)
    logger.debug("Rendered %s -> %s", template_path, output_path)
    return output_path


def find_csp_declaration(entry_file: Path) -> str | None:
    """Return the Content-Security-Policy ``<meta>`` declaration, if any."""
    if not entry_file.is_file():
        return None
    match = _CSP_META.search(entry_file.read_text(encoding="utf-8", errors="replace"))
    return match.group(0) if match else None


def warn_on_csp_declaration(dest: Path) -> bool:
    """Log a warning when the entry file declares a CSP meta tag.

    The platform ignores such tags; the warning never fails the pipeline.
    """
    entry_file = dest / CANONICAL_ENTRY_FILE
    declaration = find_csp_declaration(entry_file)
    if declaration is None:
        return False
    logger.warning(
        "Remove the CSP <meta> tag from %s: it is not supported on this "
        "platform and may cause abnormal operation.",
        entry_file,
    )
    return True
