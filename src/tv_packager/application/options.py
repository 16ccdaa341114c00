"""Typed request objects shared across packaging use-cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tv_packager.cordova import CordovaConfig
from tv_packager.types import ScriptMap

DEFAULT_USERCONF_PATH = Path("platforms") / "userconf.json"


@dataclass(frozen=True)
class OrsayBuildRequest:
    """Paths and defaults for composing an Orsay widget."""

    www_src: Path
    dest: Path
    platform_repos: Path
    cordova: CordovaConfig = CordovaConfig()


@dataclass(frozen=True)
class WebOSPrepareRequest:
    """Paths and defaults for preparing a webOS application tree."""

    www_src: Path
    dest: Path
    platform_repos: Path
    userconf_path: Path = DEFAULT_USERCONF_PATH
    scripts: ScriptMap = field(default_factory=dict)
    cordova: CordovaConfig = CordovaConfig()


@dataclass(frozen=True)
class WebOSToolchainOptions:
    """External SDK executables and the temporary build directory name."""

    sdk_cli: str = "tizen"
    probe_command: tuple[str, ...] = ("webos", "version")
    build_dir: str = ".buildResult"


@dataclass(frozen=True)
class WebOSBuildRequest:
    """Inputs for signing and packaging a prepared webOS tree."""

    www: Path
    dest: Path
    profile_path: Path
    profile_name: str
    toolchain: WebOSToolchainOptions = WebOSToolchainOptions()
