"""Read application defaults from a Cordova ``config.xml``."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from tv_packager.errors import MetadataValidationError

logger = logging.getLogger(__name__)

WIDGET_NS = "http://www.w3.org/ns/widgets"
DEFAULT_ENTRY_FILE = "index.html"


@dataclass(frozen=True)
class CordovaConfig:
    """Project-level defaults offered when prompting for metadata."""

    name: str = ""
    version: str = ""
    description: str = ""
    author_name: str = ""
    author_email: str = ""
    author_href: str = ""
    content_src: str = DEFAULT_ENTRY_FILE


def _find(root: ET.Element, tag: str) -> ET.Element | None:
    node = root.find(f"{{{WIDGET_NS}}}{tag}")
    if node is None:
        node = root.find(tag)
    return node


def _text(node: ET.Element | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.strip()


def read_cordova_config(path: Path) -> CordovaConfig:
    """Parse ``config.xml`` into :class:`CordovaConfig`.

    Parameters
    ----------
    path : Path
        Location of the project's ``config.xml``.

    Returns
    -------
    CordovaConfig
        Parsed defaults. A missing file yields empty defaults with
        ``index.html`` as the entry file.

    Raises
    ------
    MetadataValidationError
        If the file exists but is not well-formed XML.
    """
    if not path.exists():
        logger.debug("No config.xml at %s; using empty defaults", path)
        return CordovaConfig()

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise MetadataValidationError(f"Cannot parse {path}: {exc}") from exc

    author = _find(root, "author")
    content = _find(root, "content")
    return CordovaConfig(
        name=_text(_find(root, "name")),
        version=root.get("version", ""),
        description=_text(_find(root, "description")),
        author_name=_text(author),
        author_email=author.get("email", "") if author is not None else "",
        author_href=author.get("href", "") if author is not None else "",
        content_src=(content.get("src") if content is not None else None)
        or DEFAULT_ENTRY_FILE,
    )
