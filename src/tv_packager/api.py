"""Public path-based packaging API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from tv_packager.application.options import DEFAULT_USERCONF_PATH
from tv_packager.application.ports import CommandExecutor, InputProvider
from tv_packager.application.results import OperationResult
from tv_packager.application.use_cases import build_orsay_request
from tv_packager.application.use_cases import build_webos_build_request
from tv_packager.application.use_cases import build_webos_prepare_request
from tv_packager.application.use_cases import orsay_build
from tv_packager.application.use_cases import orsay_package
from tv_packager.application.use_cases import webos_build
from tv_packager.application.use_cases import webos_prepare
from tv_packager.errors import PackagerError
from tv_packager.platforms.base import PipelineState
from tv_packager.types import ScriptMap

CONFIGURING = PipelineState.CONFIGURING.value


def build_orsay_widget(
    www_src: Path,
    dest: Path,
    platform_repos: Path,
    *,
    config_xml: Path | None = None,
    input_provider: InputProvider | None = None,
) -> OperationResult:
    """Compose an Orsay widget in ``dest`` and render its ``config.xml``.

    Parameters
    ----------
    www_src : Path
        Application source directory.
    dest : Path
        Output directory; removed and recreated.
    platform_repos : Path
        Platform repository whose ``www`` subdirectory is overlaid.
    config_xml : Path | None, default=None
        Cordova ``config.xml`` supplying default answers.
    input_provider : InputProvider | None, default=None
        Source of metadata answers. Prompts on the terminal when omitted.

    Returns
    -------
    OperationResult
        Success with ``dest`` and the metadata, or failure with the stage.
    """
    try:
        request = build_orsay_request(
            www_src=www_src, dest=dest, platform_repos=platform_repos, config_xml=config_xml
        )
    except PackagerError as exc:
        return OperationResult.failure("orsay", "build", CONFIGURING, exc)
    return orsay_build(request, input_provider=input_provider)


def package_orsay_widget(www_src: Path, dest: Path, platform_repos: Path) -> OperationResult:
    """Package a composed Orsay widget (currently a no-op)."""
    try:
        request = build_orsay_request(www_src=www_src, dest=dest, platform_repos=platform_repos)
    except PackagerError as exc:
        return OperationResult.failure("orsay", "package", CONFIGURING, exc)
    return orsay_package(request)


def prepare_webos_app(
    www_src: Path,
    dest: Path,
    platform_repos: Path,
    *,
    userconf_path: Path = DEFAULT_USERCONF_PATH,
    scripts: ScriptMap | None = None,
    config_xml: Path | None = None,
    input_provider: InputProvider | None = None,
) -> OperationResult:
    """Compose a webOS tree, render its templates and remember the metadata."""
    try:
        request = build_webos_prepare_request(
            www_src=www_src,
            dest=dest,
            platform_repos=platform_repos,
            userconf_path=userconf_path,
            scripts=scripts,
            config_xml=config_xml,
        )
    except PackagerError as exc:
        return OperationResult.failure("webos", "prepare", CONFIGURING, exc)
    return webos_prepare(request, input_provider=input_provider)


def build_webos_package(
    www: Path,
    dest: Path,
    profile_path: Path,
    profile_name: str,
    *,
    sdk_cli: str = "tizen",
    probe_command: tuple[str, ...] = ("webos", "version"),
    executor: CommandExecutor | None = None,
) -> OperationResult:
    """Sign and package a prepared webOS tree.

    Returns
    -------
    OperationResult
        Success with the path of the moved package inside ``dest``, or a
        failure at ``configuring`` when the parameters are invalid.
    """
    try:
        request = build_webos_build_request(
            www=www,
            dest=dest,
            profile_path=profile_path,
            profile_name=profile_name,
            sdk_cli=sdk_cli,
            probe_command=probe_command,
        )
    except PackagerError as exc:
        return OperationResult.failure("webos", "build", CONFIGURING, exc)
    return webos_build(request, executor=executor)
