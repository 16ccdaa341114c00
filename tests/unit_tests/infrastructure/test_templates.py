"""Unit tests for template rendering stages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import pytest

import tv_packager.infrastructure.templates as templates
from tv_packager.errors import MissingSourceError, TemplateRenderError


class _Renderer:
    """Replace ``{{key}}`` placeholders; counts calls."""

    def __init__(self) -> None:
        self.calls = 0

    def render(self, template: str, context: Mapping[str, object]) -> str:
        self.calls += 1
        for key, value in context.items():
            template = template.replace("{{" + key + "}}", str(value))
        return template


def test_render_all_replaces_templates(tmp_path: Path) -> None:
    (tmp_path / "appinfo.json.tmpl").write_text('{"title": "{{name}}"}')
    (tmp_path / "plain.json").write_text("{{name}}")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.tmpl").write_text("{{name}}")

    rendered = templates.render_all(tmp_path, {"name": "MyApp"}, _Renderer())

    assert rendered == [tmp_path / "appinfo.json"]
    assert (tmp_path / "appinfo.json").read_text() == '{"title": "MyApp"}'
    assert not (tmp_path / "appinfo.json.tmpl").exists()
    assert (tmp_path / "plain.json").read_text() == "{{name}}"
    assert (tmp_path / "sub" / "nested.tmpl").exists()


def test_render_all_rerun_is_noop(tmp_path: Path) -> None:
    (tmp_path / "a.tmpl").write_text("{{name}}")
    renderer = _Renderer()
    templates.render_all(tmp_path, {"name": "x"}, renderer)

    assert templates.render_all(tmp_path, {"name": "x"}, renderer) == []
    assert renderer.calls == 1
    assert (tmp_path / "a").read_text() == "x"


def test_render_single_replaces_in_place(tmp_path: Path) -> None:
    manifest = tmp_path / "config.xml"
    manifest.write_text("<name>{{name}}</name>")

    templates.render_single(manifest, manifest, {"name": "MyApp"}, _Renderer())

    assert manifest.read_text() == "<name>MyApp</name>"
    assert not (tmp_path / "config.xml.tmp").exists()


def test_render_single_never_exposes_partial_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """If the final replace fails, the previous manifest is left intact."""
    manifest = tmp_path / "config.xml"
    manifest.write_text("<name>{{name}}</name>")

    def broken_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(templates.os, "replace", broken_replace)
    with pytest.raises(OSError, match="disk full"):
        templates.render_single(manifest, manifest, {"name": "MyApp"}, _Renderer())

    assert manifest.read_text() == "<name>{{name}}</name>"


def test_render_single_missing_template_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingSourceError, match="Template not found"):
        templates.render_single(tmp_path / "a", tmp_path / "b", {}, _Renderer())


def test_find_csp_declaration(tmp_path: Path) -> None:
    entry = tmp_path / "index.html"
    entry.write_text(
        '<head><meta http-equiv="Content-Security-Policy" content="default-src *"></head>'
    )
    assert templates.find_csp_declaration(entry) is not None

    entry.write_text("<head><meta charset='utf-8'></head>")
    assert templates.find_csp_declaration(entry) is None
    assert templates.find_csp_declaration(tmp_path / "absent.html") is None


def test_warn_on_csp_declaration_logs_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "index.html").write_text(
        "<meta http-equiv='Content-Security-Policy' content=\"default-src 'self'\">"
    )
    with caplog.at_level(logging.WARNING, logger=templates.__name__):
        assert templates.warn_on_csp_declaration(tmp_path) is True
    assert "CSP" in caplog.text


def test_warn_on_csp_declaration_without_entry_file(tmp_path: Path) -> None:
    assert templates.warn_on_csp_declaration(tmp_path) is False


def test_render_all_rejects_non_utf8_template(tmp_path: Path) -> None:
    (tmp_path / "bad.tmpl").write_bytes(b"\xff\xfe")

    with pytest.raises(TemplateRenderError, match="not valid UTF-8"):
        templates.render_all(tmp_path, {}, _Renderer())

    assert not (tmp_path / "bad").exists()
