#!/usr/bin/env python3
"""
tv_packager.cli.cli

Typer-based CLI for composing and packaging web applications for smart TVs.

Examples
--------
Compose an Orsay widget:

    tv-packager orsay-build www platforms/orsay/www platforms/orsay/repos

Prepare and package a webOS application:

    tv-packager webos-prepare www platforms/tv-webos/www platforms/tv-webos/repos
    tv-packager webos-build --profile-path profiles.xml --profile-name dev
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from tv_packager.application.options import DEFAULT_USERCONF_PATH
from tv_packager.application.ports import InputProvider
from tv_packager.application.results import OperationResult
from tv_packager.errors import PackagerError

app = typer.Typer(
    name="tv-packager",
    help="Package web applications for Orsay and webOS smart TVs.",
    no_args_is_help=True,
)

CONFIG_XML_HELP = "Cordova config.xml providing default metadata."
YES_HELP = "Accept default answers instead of prompting."
WWW_HELP = "Application source directory (www)."
PLATFORM_REPOS_HELP = "Platform repository containing the www overlay."


def _print_error(exc: BaseException, debug: bool, stage: str | None = None) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : BaseException
        Error raised or reported by an operation.
    debug : bool
        Whether to include traceback details.
    stage : str | None, default=None
        Name of the pipeline stage that failed.

    Returns
    -------
    int
        Process exit code.
    """
    where = f" [{stage}]" if stage else ""
    typer.secho(f"✗ {type(exc).__name__}{where}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _report(result: OperationResult, debug: bool, message: str) -> None:
    """Echo a success line or exit with the failure's code."""
    if result.succeeded:
        suffix = f" {result.output_path}" if result.output_path is not None else ""
        typer.secho(f"✓ {message}{suffix}", fg=typer.colors.GREEN)
        return
    error = result.error or PackagerError(f"{result.operation} failed")
    raise typer.Exit(code=_print_error(error, debug, result.stage))


def _parse_scripts(script_items: list[str] | None) -> dict[str, Path]:
    """Parse repeated NAME=PATH script entries."""
    parsed: dict[str, Path] = {}
    for item in script_items or []:
        if "=" not in item:
            raise typer.BadParameter(f"Invalid script entry '{item}'. Use NAME=PATH format.")
        name, path = item.split("=", 1)
        name = name.strip()
        if not name:
            raise typer.BadParameter("Script name cannot be empty.")
        parsed[name] = Path(path.strip())
    return parsed


def _input_provider(assume_yes: bool) -> InputProvider:
    from tv_packager.adapters.prompts import DefaultsInputProvider, TyperInputProvider

    return DefaultsInputProvider() if assume_yes else TyperInputProvider()


def _configure_logging(verbose: bool, debug: bool) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline progress."),
) -> None:
    """Initialize shared CLI state."""
    _configure_logging(verbose, debug)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("orsay-build")
def orsay_build_cmd(
    ctx: typer.Context,
    www_src: Path = typer.Argument(..., help=WWW_HELP),
    dest: Path = typer.Argument(..., help="Directory to compose the widget into."),
    platform_repos: Path = typer.Argument(..., help=PLATFORM_REPOS_HELP),
    config_xml: Path = typer.Option(Path("config.xml"), "--config-xml", help=CONFIG_XML_HELP),
    assume_yes: bool = typer.Option(False, "--yes", "-y", help=YES_HELP),
) -> None:
    """Compose an Orsay widget and render its config.xml."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from tv_packager.application.use_cases import build_orsay_request, orsay_build

        request = build_orsay_request(
            www_src=www_src, dest=dest, platform_repos=platform_repos, config_xml=config_xml
        )
        result = orsay_build(request, input_provider=_input_provider(assume_yes))
    except PackagerError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    _report(result, debug, "Built at")


@app.command("orsay-package")
def orsay_package_cmd(
    ctx: typer.Context,
    www_src: Path = typer.Argument(..., help=WWW_HELP),
    dest: Path = typer.Argument(..., help="Composed widget directory."),
    platform_repos: Path = typer.Argument(..., help=PLATFORM_REPOS_HELP),
) -> None:
    """Package a composed Orsay widget (not implemented yet)."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from tv_packager.application.use_cases import build_orsay_request, orsay_package

        request = build_orsay_request(www_src=www_src, dest=dest, platform_repos=platform_repos)
        result = orsay_package(request)
    except PackagerError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    _report(result, debug, "Nothing to package for orsay.")


@app.command("webos-prepare")
def webos_prepare_cmd(
    ctx: typer.Context,
    www_src: Path = typer.Argument(..., help=WWW_HELP),
    dest: Path = typer.Argument(..., help="Directory to prepare the application in."),
    platform_repos: Path = typer.Argument(..., help=PLATFORM_REPOS_HELP),
    script: list[str] | None = typer.Option(
        None, "--script", help="Extra file to copy as NAME=PATH (repeatable)."
    ),
    userconf: Path = typer.Option(
        DEFAULT_USERCONF_PATH,
        "--userconf",
        envvar="TV_PACKAGER_USERCONF",
        help="JSON file remembering metadata between runs.",
    ),
    config_xml: Path = typer.Option(Path("config.xml"), "--config-xml", help=CONFIG_XML_HELP),
    assume_yes: bool = typer.Option(False, "--yes", "-y", help=YES_HELP),
) -> None:
    """Prepare a webOS application tree and render its templates."""
    debug: bool = bool(ctx.obj.get("debug", False))
    scripts = _parse_scripts(script)
    try:
        from tv_packager.application.use_cases import (
            build_webos_prepare_request,
            webos_prepare,
        )

        request = build_webos_prepare_request(
            www_src=www_src,
            dest=dest,
            platform_repos=platform_repos,
            userconf_path=userconf,
            scripts=scripts,
            config_xml=config_xml,
        )
        result = webos_prepare(request, input_provider=_input_provider(assume_yes))
    except PackagerError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    _report(result, debug, "Prepared at")


@app.command("webos-build")
def webos_build_cmd(
    ctx: typer.Context,
    profile_path: Path = typer.Option(
        ...,
        "--profile-path",
        envvar="TV_PACKAGER_PROFILE_PATH",
        help="Signing profiles file passed to the SDK.",
    ),
    profile_name: str = typer.Option(
        ...,
        "--profile-name",
        envvar="TV_PACKAGER_PROFILE_NAME",
        help="Signing profile used to sign the package.",
    ),
    www: Path = typer.Option(
        Path("platforms") / "tv-webos" / "www", "--www", help="Prepared application tree."
    ),
    dest: Path = typer.Option(
        Path("platforms") / "tv-webos" / "build", "--dest", help="Directory for the package."
    ),
    sdk_cli: str = typer.Option("tizen", "--sdk-cli", help="SDK command-line executable."),
    probe: list[str] | None = typer.Option(
        None, "--probe", help="Preflight command word (repeatable). Default: webos version."
    ),
) -> None:
    """Sign and package a prepared webOS tree with the external SDK."""
    debug: bool = bool(ctx.obj.get("debug", False))
    try:
        from tv_packager.application.use_cases import build_webos_build_request, webos_build

        request = build_webos_build_request(
            www=www,
            dest=dest,
            profile_path=profile_path,
            profile_name=profile_name,
            sdk_cli=sdk_cli,
            probe_command=tuple(probe) if probe else ("webos", "version"),
        )
        result = webos_build(request)
    except PackagerError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    _report(result, debug, "Package created at")


@app.command("platforms")
def platforms_cmd() -> None:
    """List supported platforms."""
    from tv_packager.platforms.registry import create_default_registry

    for name in create_default_registry().names():
        typer.echo(name)


@app.command("doctor")
def doctor_cmd(
    sdk_cli: str = typer.Option("tizen", "--sdk-cli", help="SDK command-line executable."),
    probe: str = typer.Option("webos", "--probe", help="Preflight executable."),
) -> None:
    """Print library versions and whether the SDK executables are on PATH."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("typer", "pydantic", "jinja2"):
        try:
            typer.echo(f"{module}: {metadata.version(module)}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    for executable in dict.fromkeys((probe, sdk_cli)):
        location = shutil.which(executable)
        typer.echo(f"{executable}: {location or '<not found on PATH>'}")


if __name__ == "__main__":
    app()
