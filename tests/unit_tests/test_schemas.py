"""Unit tests for metadata and request schemas."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tv_packager.schemas import (
    ComposeConfig,
    OrsayMetadata,
    WebOSBuildConfig,
    WebOSMetadata,
    check_webos_name,
)

WEBOS = {
    "name": "MyApp",
    "version": "1.2.3",
    "vendor": "My Company",
    "icon": "img/logo.png",
    "largeicon": "img/logo.png",
}
ORSAY = {
    "name": "My App",
    "resolution": "1280x720",
    "category": "game",
    "version": "1.0203",
    "description": "",
    "authorName": "Dev",
    "authorEmail": "dev@example.com",
    "authorHref": "https://example.com",
}


def test_webos_metadata_accepts_valid_payload() -> None:
    metadata = WebOSMetadata.model_validate(WEBOS)
    assert metadata.template_context() == WEBOS


def test_webos_metadata_is_frozen() -> None:
    metadata = WebOSMetadata.model_validate(WEBOS)
    with pytest.raises(ValidationError):
        metadata.name = "Other"  # type: ignore[misc]


def test_webos_metadata_rejects_non_string_version() -> None:
    """Strict mode refuses to coerce numbers into strings."""
    with pytest.raises(ValidationError):
        WebOSMetadata.model_validate({**WEBOS, "version": 1.2})


@pytest.mark.parametrize(
    ("name", "ok"),
    [
        ("MyApp", True),
        ("App2", True),
        ("2App", False),
        ("My App", False),
        ("My-App", False),
        ("My_App", False),
        ("My.App", False),
        ("", False),
    ],
)
def test_check_webos_name(name: str, ok: bool) -> None:
    """Names start with a letter and avoid punctuation and whitespace."""
    assert (check_webos_name(name) is None) is ok


def test_orsay_metadata_derives_resolution_and_aliases() -> None:
    """Template context uses camelCase keys and integer sizes."""
    metadata = OrsayMetadata.model_validate(ORSAY)
    context = metadata.template_context()
    assert metadata.author_name == "Dev"
    assert context["authorName"] == "Dev"
    assert context["resWidth"] == 1280
    assert context["resHeight"] == 720


def test_orsay_metadata_rejects_semver() -> None:
    with pytest.raises(ValidationError, match="orsay"):
        OrsayMetadata.model_validate({**ORSAY, "version": "1.2.3"})


def test_orsay_metadata_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError):
        OrsayMetadata.model_validate({**ORSAY, "category": "news"})


def test_compose_config_rejects_script_outside_dest(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="relative path"):
        ComposeConfig(
            www_src=tmp_path,
            dest=tmp_path,
            platform_repos=tmp_path,
            scripts={"../escape.js": tmp_path / "x.js"},
        )


def test_webos_build_config_requires_profile_name(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        WebOSBuildConfig(www=tmp_path, dest=tmp_path, profile_path=tmp_path, profile_name="")


def test_webos_build_config_rejects_nested_build_dir(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="single directory"):
        WebOSBuildConfig(
            www=tmp_path,
            dest=tmp_path,
            profile_path=tmp_path,
            profile_name="dev",
            build_dir="a/b",
        )
