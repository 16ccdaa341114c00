"""Application use-cases wiring requests to platform adapters."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from tv_packager.application.options import (
    DEFAULT_USERCONF_PATH,
    OrsayBuildRequest,
    WebOSBuildRequest,
    WebOSPrepareRequest,
    WebOSToolchainOptions,
)
from tv_packager.application.ports import (
    CommandExecutor,
    InputProvider,
    TemplateRenderer,
)
from tv_packager.application.results import OperationResult
from tv_packager.cordova import CordovaConfig, read_cordova_config
from tv_packager.errors import MetadataValidationError
from tv_packager.platforms.orsay import OrsayAdapter
from tv_packager.platforms.webos import WebOSAdapter
from tv_packager.schemas import ComposeConfig, WebOSBuildConfig


def _cordova(config_xml: Path | None) -> CordovaConfig:
    return read_cordova_config(config_xml) if config_xml is not None else CordovaConfig()


def build_orsay_request(
    *,
    www_src: Path,
    dest: Path,
    platform_repos: Path,
    config_xml: Path | None = None,
) -> OrsayBuildRequest:
    """Build a validated Orsay request from command/API params."""
    try:
        config = ComposeConfig(www_src=www_src, dest=dest, platform_repos=platform_repos)
    except ValidationError as exc:
        raise MetadataValidationError(f"Invalid Orsay build parameters: {exc}") from exc
    return OrsayBuildRequest(
        www_src=config.www_src,
        dest=config.dest,
        platform_repos=config.platform_repos,
        cordova=_cordova(config_xml),
    )


def build_webos_prepare_request(
    *,
    www_src: Path,
    dest: Path,
    platform_repos: Path,
    userconf_path: Path = DEFAULT_USERCONF_PATH,
    scripts: Mapping[str, Path] | None = None,
    config_xml: Path | None = None,
) -> WebOSPrepareRequest:
    """Build a validated webOS prepare request from command/API params."""
    try:
        config = ComposeConfig(
            www_src=www_src,
            dest=dest,
            platform_repos=platform_repos,
            scripts=dict(scripts or {}),
        )
    except ValidationError as exc:
        raise MetadataValidationError(f"Invalid webOS prepare parameters: {exc}") from exc
    return WebOSPrepareRequest(
        www_src=config.www_src,
        dest=config.dest,
        platform_repos=config.platform_repos,
        userconf_path=userconf_path,
        scripts=config.scripts,
        cordova=_cordova(config_xml),
    )


def build_webos_build_request(
    *,
    www: Path,
    dest: Path,
    profile_path: Path,
    profile_name: str,
    sdk_cli: str = "tizen",
    probe_command: tuple[str, ...] = ("webos", "version"),
    build_dir: str = ".buildResult",
) -> WebOSBuildRequest:
    """Build a validated webOS toolchain request from command/API params."""
    try:
        config = WebOSBuildConfig(
            www=www,
            dest=dest,
            profile_path=profile_path,
            profile_name=profile_name,
            sdk_cli=sdk_cli,
            probe_command=probe_command,
            build_dir=build_dir,
        )
    except ValidationError as exc:
        raise MetadataValidationError(f"Invalid webOS build parameters: {exc}") from exc
    return WebOSBuildRequest(
        www=config.www,
        dest=config.dest,
        profile_path=config.profile_path,
        profile_name=config.profile_name,
        toolchain=WebOSToolchainOptions(
            sdk_cli=config.sdk_cli,
            probe_command=config.probe_command,
            build_dir=config.build_dir,
        ),
    )


def orsay_build(
    request: OrsayBuildRequest,
    *,
    input_provider: InputProvider | None = None,
    renderer: TemplateRenderer | None = None,
) -> OperationResult:
    """Use-case: compose an Orsay widget tree."""
    adapter = OrsayAdapter(input_provider=input_provider, renderer=renderer)
    return adapter.build(request)


def orsay_package(request: OrsayBuildRequest) -> OperationResult:
    """Use-case: package a composed Orsay widget (placeholder)."""
    return OrsayAdapter().package(request)


def webos_prepare(
    request: WebOSPrepareRequest,
    *,
    input_provider: InputProvider | None = None,
    renderer: TemplateRenderer | None = None,
) -> OperationResult:
    """Use-case: prepare a webOS application tree."""
    adapter = WebOSAdapter(input_provider=input_provider, renderer=renderer)
    return adapter.prepare(request)


def webos_build(
    request: WebOSBuildRequest,
    *,
    executor: CommandExecutor | None = None,
) -> OperationResult:
    """Use-case: sign and package a prepared webOS tree."""
    return WebOSAdapter(executor=executor).build(request)
