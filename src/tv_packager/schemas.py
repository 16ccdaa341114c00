"""Pydantic schemas for platform application metadata."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tv_packager.types import ContextScalar
from tv_packager.version import is_orsay_version, is_webos_version

RESOLUTIONS = ("960x540", "1280x720", "1920x1080")
CATEGORIES = ("VOD", "sports", "game", "lifestyle", "information", "education")

_WEBOS_NAME = re.compile(r"[a-zA-Z][^~!.;\\/|\"'@#$%<>^&*()\-=+_’\s]*")


def check_webos_name(value: str) -> str | None:
    """Return an error message if ``value`` is not a valid webOS app name."""
    if _WEBOS_NAME.fullmatch(value) is None:
        return "invalid name for webos platform"
    return None


def check_webos_version(value: str) -> str | None:
    """Return an error message unless ``value`` is ``major.minor.patch``."""
    if not is_webos_version(value):
        return "invalid version string for webos platform"
    return None


def check_orsay_version(value: str) -> str | None:
    """Return an error message unless ``value`` is ``major.minor``."""
    if not is_orsay_version(value):
        return "invalid version string for orsay platform"
    return None


def check_non_empty(value: str) -> str | None:
    """Return an error message if ``value`` is blank."""
    if not value:
        return "value cannot be empty"
    return None


def _raise_on(message: str | None, value: str) -> str:
    if message is not None:
        raise ValueError(message)
    return value


class OrsayMetadata(BaseModel):
    """Validated Orsay widget metadata."""

    model_config = ConfigDict(
        extra="ignore", frozen=True, strict=True, populate_by_name=True
    )

    name: str = Field(min_length=1)
    resolution: Literal["960x540", "1280x720", "1920x1080"] = "960x540"
    category: Literal["VOD", "sports", "game", "lifestyle", "information", "education"]
    version: str
    description: str = ""
    author_name: str = Field(default="", alias="authorName")
    author_email: str = Field(default="", alias="authorEmail")
    author_href: str = Field(default="", alias="authorHref")

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        return _raise_on(check_orsay_version(value), value)

    @property
    def res_width(self) -> int:
        """Horizontal resolution in pixels."""
        return int(self.resolution.split("x")[0])

    @property
    def res_height(self) -> int:
        """Vertical resolution in pixels."""
        return int(self.resolution.split("x")[1])

    def template_context(self) -> dict[str, ContextScalar]:
        """Return the manifest template context, including derived sizes."""
        context: dict[str, ContextScalar] = self.model_dump(by_alias=True)
        context["resWidth"] = self.res_width
        context["resHeight"] = self.res_height
        return context


class WebOSMetadata(BaseModel):
    """Validated webOS application metadata, also the persisted shape."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    vendor: str = Field(min_length=1)
    icon: str = Field(min_length=1)
    largeicon: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _raise_on(check_webos_name(value), value)

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        return _raise_on(check_webos_version(value), value)

    def template_context(self) -> dict[str, ContextScalar]:
        """Return the template context for ``*.tmpl`` files."""
        return dict(self.model_dump())


class ComposeConfig(BaseModel):
    """Validated paths for composing a platform tree."""

    model_config = ConfigDict(extra="forbid")

    www_src: Path
    dest: Path
    platform_repos: Path
    scripts: dict[str, Path] = Field(default_factory=dict)

    @field_validator("scripts")
    @classmethod
    def _validate_scripts(cls, value: dict[str, Path]) -> dict[str, Path]:
        for name in value:
            target = Path(name)
            if not name.strip() or target.is_absolute() or ".." in target.parts:
                raise ValueError(f"script name '{name}' must be a relative path inside dest.")
        return value


class WebOSBuildConfig(BaseModel):
    """Validated input for the webOS toolchain run."""

    model_config = ConfigDict(extra="forbid")

    www: Path
    dest: Path
    profile_path: Path
    profile_name: str = Field(min_length=1)
    sdk_cli: str = Field(default="tizen", min_length=1)
    probe_command: tuple[str, ...] = ("webos", "version")
    build_dir: str = ".buildResult"

    @field_validator("probe_command")
    @classmethod
    def _validate_probe(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or not value[0].strip():
            raise ValueError("probe_command must name an executable.")
        return value

    @field_validator("build_dir")
    @classmethod
    def _validate_build_dir(cls, value: str) -> str:
        if not value or Path(value).name != value or value in {".", ".."}:
            raise ValueError("build_dir must be a single directory name.")
        return value
