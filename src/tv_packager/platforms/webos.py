"""webOS (LG TV) platform adapter."""

from __future__ import annotations

import logging

from tv_packager.application.fields import FieldDescriptor, MetadataBuilder
from tv_packager.application.options import WebOSBuildRequest, WebOSPrepareRequest
from tv_packager.application.results import OperationResult
from tv_packager.cordova import CordovaConfig
from tv_packager.errors import ArtifactNotFoundError
from tv_packager.infrastructure.config_store import ConfigurationStore
from tv_packager.infrastructure.templates import render_all, warn_on_csp_declaration
from tv_packager.infrastructure.toolchain import (
    PACKAGE_LOCATION_PATTERN,
    ToolchainRunner,
    ToolchainStep,
    finalize_artifact,
)
from tv_packager.platforms.base import PipelineState, PlatformAdapter, StageOutput
from tv_packager.schemas import (
    WebOSMetadata,
    check_non_empty,
    check_webos_name,
    check_webos_version,
)
from tv_packager.version import next_revision

logger = logging.getLogger(__name__)

DEFAULT_VENDOR = "My Company"
DEFAULT_ICON = "img/logo.png"


def webos_fields(cordova: CordovaConfig) -> list[FieldDescriptor]:
    """Return the full set of webOS metadata questions."""
    return [
        FieldDescriptor(
            name="name",
            message="What's the application's name?",
            default=cordova.name or None,
            validator=check_webos_name,
        ),
        FieldDescriptor(
            name="version",
            message="Application Version (major.minor.patch)",
            default=cordova.version or None,
            validator=check_webos_version,
        ),
        FieldDescriptor(
            name="vendor",
            message=f"Vendor (default is '{DEFAULT_VENDOR}')",
            default=DEFAULT_VENDOR,
            validator=check_non_empty,
        ),
        FieldDescriptor(
            name="icon",
            message=f"Icon path (default is '{DEFAULT_ICON}')",
            default=DEFAULT_ICON,
            validator=check_non_empty,
        ),
        FieldDescriptor(
            name="largeicon",
            message=f"LargeIcon path (default is '{DEFAULT_ICON}')",
            default=DEFAULT_ICON,
            validator=check_non_empty,
        ),
    ]


def version_field(current: str) -> FieldDescriptor:
    """Ask only for a new version, suggesting the next revision."""
    return FieldDescriptor(
        name="version",
        message=f"Current version is {current}. Application version",
        default=next_revision(current),
        validator=check_webos_version,
    )


class WebOSAdapter(PlatformAdapter):
    """Prepare a webOS application tree and package it with the SDK."""

    name = "webos"

    def resolve_metadata(self, store: ConfigurationStore, cordova: CordovaConfig) -> WebOSMetadata:
        """Reuse stored metadata with a new version, or ask for everything."""
        stored = store.load_valid(self.name)
        if isinstance(stored, WebOSMetadata) and store.decide_reuse(stored, self.input_provider):
            return (
                MetadataBuilder(WebOSMetadata, stored.model_dump())
                .ask(self.input_provider, [version_field(stored.version)])
                .build()
            )
        return MetadataBuilder(WebOSMetadata).ask(self.input_provider, webos_fields(cordova)).build()

    def prepare(self, request: WebOSPrepareRequest) -> OperationResult:
        """Compose ``request.dest``, render ``*.tmpl`` files and save metadata."""
        logger.info("Start preparing code for the %s platform", self.name)
        pipeline = self.pipeline("prepare")
        store = ConfigurationStore(request.userconf_path)
        dest = request.dest.resolve()

        def body() -> StageOutput:
            with pipeline.stage(PipelineState.CONFIGURING):
                metadata = self.resolve_metadata(store, request.cordova)
            self.compose(
                pipeline,
                www_src=request.www_src.resolve(),
                dest=dest,
                platform_repos=request.platform_repos.resolve(),
                scripts=request.scripts,
            )
            with pipeline.stage(PipelineState.RENDERING, "render templates"):
                render_all(dest, metadata.template_context(), self.renderer)
                warn_on_csp_declaration(dest)
            with pipeline.stage(PipelineState.PERSISTING, "save configuration"):
                store.persist(self.name, metadata)
            logger.info("Prepared at %s", dest)
            return StageOutput(output_path=dest, metadata=metadata)

        return pipeline.run(body)

    def toolchain_steps(self, request: WebOSBuildRequest) -> list[ToolchainStep]:
        """Return the signing-profile, build and package commands."""
        options = request.toolchain
        www = request.www.resolve()
        cli = options.sdk_cli
        return [
            ToolchainStep(
                name="configure signing profile",
                command=(cli, "cli-config", f"default.profiles.path={request.profile_path.resolve()}"),
            ),
            ToolchainStep(
                name="build web application",
                command=(cli, "build-web", "-out", options.build_dir, "--", str(www)),
            ),
            ToolchainStep(
                name="package and sign",
                command=(
                    cli,
                    "package",
                    "--type",
                    "wgt",
                    "--sign",
                    request.profile_name,
                    "--",
                    str(www / options.build_dir),
                ),
                artifact_pattern=PACKAGE_LOCATION_PATTERN,
            ),
        ]

    def build(self, request: WebOSBuildRequest) -> OperationResult:
        """Run the SDK toolchain and move the signed package into ``dest``."""
        logger.info("Start packaging for the %s platform", self.name)
        pipeline = self.pipeline("build")
        runner = ToolchainRunner(self.executor)

        def body() -> StageOutput:
            with pipeline.stage(PipelineState.INVOKING, "preflight"):
                runner.preflight(request.toolchain.probe_command)
            with pipeline.stage(PipelineState.INVOKING, "toolchain"):
                result = runner.run(self.toolchain_steps(request))
                if result.artifact is None:
                    raise ArtifactNotFoundError("Toolchain did not report a package.")
            with pipeline.stage(PipelineState.INVOKING, "finalize artifact"):
                artifact = finalize_artifact(
                    result.artifact,
                    request.dest.resolve(),
                    request.www.resolve() / request.toolchain.build_dir,
                )
            return StageOutput(output_path=artifact)

        return pipeline.run(body)
