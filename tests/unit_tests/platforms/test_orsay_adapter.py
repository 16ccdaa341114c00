"""Unit tests for the Orsay adapter."""

from __future__ import annotations

from collections.abc import Sequence

from tv_packager.adapters.prompts import DefaultsInputProvider
from tv_packager.adapters.renderer import Jinja2TemplateRenderer
from tv_packager.application.fields import FieldDescriptor
from tv_packager.application.options import OrsayBuildRequest
from tv_packager.cordova import CordovaConfig, read_cordova_config
from tv_packager.errors import (
    ConflictingEntryFileError,
    MetadataValidationError,
    TemplateRenderError,
)
from tv_packager.platforms.orsay import OrsayAdapter, orsay_fields
from tv_packager.schemas import OrsayMetadata


class _Answers:
    """Answer with overrides first and field defaults otherwise."""

    def __init__(self, **overrides: object) -> None:
        self.overrides = overrides

    def ask(self, fields: Sequence[FieldDescriptor]) -> dict[str, object]:
        answers = DefaultsInputProvider().ask(
            [field for field in fields if field.name not in self.overrides]
        )
        answers.update({k: v for k, v in self.overrides.items() if k in {f.name for f in fields}})
        return answers


def _adapter(**overrides: object) -> OrsayAdapter:
    return OrsayAdapter(input_provider=_Answers(**overrides), renderer=Jinja2TemplateRenderer())


def _request(project, cordova: CordovaConfig | None = None) -> OrsayBuildRequest:
    return OrsayBuildRequest(
        www_src=project.www,
        dest=project.dest,
        platform_repos=project.platform_repos,
        cordova=cordova or read_cordova_config(project.config_xml),
    )


def test_fields_use_cordova_defaults() -> None:
    fields = {field.name: field for field in orsay_fields(CordovaConfig(name="App", version="2.5.17"))}
    assert list(fields) == [
        "name",
        "resolution",
        "category",
        "version",
        "description",
        "authorName",
        "authorEmail",
        "authorHref",
    ]
    assert fields["version"].default == "2.0517"
    assert fields["name"].default == "App"


def test_build_renders_manifest(project) -> None:
    result = _adapter(resolution="1280x720", category="game").build(_request(project))

    assert result.succeeded, result.error
    manifest = (project.dest / "config.xml").read_text()
    assert "<widgetname>MyApp</widgetname>" in manifest
    assert "<ver>1.0203</ver>" in manifest
    assert "<width>1280</width>" in manifest
    assert "<height>720</height>" in manifest
    assert "<category>game</category>" in manifest
    assert isinstance(result.metadata, OrsayMetadata)
    assert (project.dest / ".hidden").read_text() == "platform secret"
    assert (project.dest / "shared.txt").read_text() == "from platform"
    assert (project.dest / "js" / "main.js").exists()


def test_build_cleans_previous_output(project) -> None:
    project.dest.mkdir(parents=True)
    (project.dest / "stale.txt").write_text("old")

    assert _adapter().build(_request(project)).succeeded
    assert not (project.dest / "stale.txt").exists()


def test_build_promotes_declared_entry_file(project, make_config_xml) -> None:
    (project.www / "index.html").unlink()
    (project.www / "content.html").write_text("<html>content</html>")
    config = read_cordova_config(
        make_config_xml(project.root / "config.xml", content_src="content.html")
    )

    result = _adapter().build(_request(project, config))

    assert result.succeeded, result.error
    assert (project.dest / "index.html").read_text() == "<html>content</html>"
    assert not (project.dest / "content.html").exists()


def test_build_conflicting_entry_file_fails_after_copy(project) -> None:
    (project.www / "content.html").write_text("<html>content</html>")
    config = CordovaConfig(name="MyApp", version="1.2.3", content_src="content.html")

    result = _adapter().build(_request(project, config))

    assert not result.succeeded
    assert result.stage == "copy application sources"
    assert isinstance(result.error, ConflictingEntryFileError)
    assert result.error.exit_code == 3
    # partially composed output stays behind
    assert (project.dest / "content.html").exists()
    assert not (project.dest / ".hidden").exists()


def test_build_invalid_answer_touches_nothing(project) -> None:
    result = _adapter(version="1.2.3").build(_request(project))

    assert not result.succeeded
    assert result.stage == "configuring"
    assert isinstance(result.error, MetadataValidationError)
    assert not project.dest.exists()


def test_package_is_a_successful_noop(project, caplog) -> None:
    result = _adapter().package(_request(project))

    assert result.succeeded
    assert result.output_path is None
    assert "not implemented" in caplog.text
    assert not project.dest.exists()


def test_build_undecodable_manifest_fails_at_render(project) -> None:
    (project.platform_repos / "www" / "config.xml").write_bytes(b"\xff\xfe<widget/>")

    result = _adapter().build(_request(project))

    assert result.succeeded is False
    assert result.stage == "render manifest"
    assert isinstance(result.error, TemplateRenderError)
