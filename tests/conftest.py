"""Shared pytest configuration, marker assignment and project fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

ORSAY_MANIFEST = (
    "<widget>\n"
    "  <widgetname>{{ name }}</widgetname>\n"
    "  <ver>{{ version }}</ver>\n"
    "  <width>{{ resWidth }}</width>\n"
    "  <height>{{ resHeight }}</height>\n"
    "  <category>{{ category }}</category>\n"
    "</widget>\n"
)
WEBOS_APPINFO = '{"title": "{{ name }}", "version": "{{ version }}", "vendor": "{{ vendor }}"}\n'


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@dataclass(frozen=True)
class ProjectTree:
    """Paths of a throwaway Cordova-style project."""

    root: Path
    www: Path
    platform_repos: Path
    dest: Path
    userconf: Path
    config_xml: Path


def write_config_xml(
    path: Path,
    *,
    name: str = "MyApp",
    version: str = "1.2.3",
    content_src: str = "index.html",
) -> Path:
    """Write a minimal W3C widget config.xml."""
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<widget xmlns="http://www.w3.org/ns/widgets" id="com.example.app" version="{version}">\n'
        f"  <name>{name}</name>\n"
        "  <description>Sample application</description>\n"
        '  <author email="dev@example.com" href="https://example.com">Dev Team</author>\n'
        f'  <content src="{content_src}" />\n'
        "</widget>\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def make_config_xml():
    """Expose :func:`write_config_xml` to tests."""
    return write_config_xml


@pytest.fixture
def project(tmp_path: Path) -> ProjectTree:
    """Create application sources and a platform overlay under ``tmp_path``."""
    www = tmp_path / "www"
    (www / "js").mkdir(parents=True)
    (www / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (www / "js" / "main.js").write_text("console.log('app');", encoding="utf-8")
    (www / "shared.txt").write_text("from app", encoding="utf-8")

    repos = tmp_path / "repos"
    overlay = repos / "www"
    overlay.mkdir(parents=True)
    (overlay / "config.xml").write_text(ORSAY_MANIFEST, encoding="utf-8")
    (overlay / "appinfo.json.tmpl").write_text(WEBOS_APPINFO, encoding="utf-8")
    (overlay / ".hidden").write_text("platform secret", encoding="utf-8")
    (overlay / "shared.txt").write_text("from platform", encoding="utf-8")

    config_xml = write_config_xml(tmp_path / "config.xml")
    return ProjectTree(
        root=tmp_path,
        www=www,
        platform_repos=repos,
        dest=tmp_path / "platforms" / "out" / "www",
        userconf=tmp_path / "platforms" / "userconf.json",
        config_xml=config_xml,
    )
