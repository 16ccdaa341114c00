"""Orsay (legacy Samsung TV) platform adapter."""

from __future__ import annotations

import logging

from tv_packager.application.fields import FieldDescriptor, MetadataBuilder
from tv_packager.application.options import OrsayBuildRequest
from tv_packager.application.results import OperationResult
from tv_packager.cordova import CordovaConfig
from tv_packager.infrastructure.templates import render_single
from tv_packager.platforms.base import PipelineState, PlatformAdapter, StageOutput
from tv_packager.schemas import (
    CATEGORIES,
    RESOLUTIONS,
    OrsayMetadata,
    check_non_empty,
    check_orsay_version,
)
from tv_packager.version import to_orsay_version

logger = logging.getLogger(__name__)

MANIFEST_NAME = "config.xml"


def orsay_fields(cordova: CordovaConfig) -> list[FieldDescriptor]:
    """Return the eight metadata questions for an Orsay widget."""
    return [
        FieldDescriptor(
            name="name",
            message="What's the application's name?",
            default=cordova.name or None,
            validator=check_non_empty,
        ),
        FieldDescriptor(
            name="resolution",
            message="Which resolution is your application developed for?",
            kind="choice",
            default=RESOLUTIONS[0],
            choices=RESOLUTIONS,
        ),
        FieldDescriptor(
            name="category",
            message="What's the application's category?",
            kind="choice",
            default=CATEGORIES[0],
            choices=CATEGORIES,
        ),
        FieldDescriptor(
            name="version",
            message="Application Version (Valid RegExp: ^[0-9]+\\.[0-9]+$)",
            default=to_orsay_version(cordova.version),
            validator=check_orsay_version,
        ),
        FieldDescriptor(
            name="description",
            message="Application Description",
            default=cordova.description,
        ),
        FieldDescriptor(
            name="authorName", message="Author's name", default=cordova.author_name
        ),
        FieldDescriptor(
            name="authorEmail", message="Author's email", default=cordova.author_email
        ),
        FieldDescriptor(
            name="authorHref", message="Author's IRI(href)", default=cordova.author_href
        ),
    ]


class OrsayAdapter(PlatformAdapter):
    """Compose an Orsay widget tree and render its ``config.xml``."""

    name = "orsay"

    def build(self, request: OrsayBuildRequest) -> OperationResult:
        """Configure, compose and render the widget into ``request.dest``.

        ``dest`` is removed first. On failure it is left as the last
        successful stage produced it.
        """
        pipeline = self.pipeline("build")
        www_src = request.www_src.resolve()
        dest = request.dest.resolve()
        platform_repos = request.platform_repos.resolve()

        def body() -> StageOutput:
            with pipeline.stage(PipelineState.CONFIGURING):
                metadata = (
                    MetadataBuilder(OrsayMetadata)
                    .ask(self.input_provider, orsay_fields(request.cordova))
                    .build()
                )
            self.compose(
                pipeline,
                www_src=www_src,
                dest=dest,
                platform_repos=platform_repos,
                clean=True,
                entry_file=request.cordova.content_src,
            )
            with pipeline.stage(PipelineState.RENDERING, "render manifest"):
                manifest = dest / MANIFEST_NAME
                render_single(manifest, manifest, metadata.template_context(), self.renderer)
            logger.info("Built at %s", dest)
            return StageOutput(output_path=dest, metadata=metadata)

        return pipeline.run(body)

    def package(self, request: OrsayBuildRequest) -> OperationResult:
        """Placeholder: Orsay widgets are not zipped into a package yet."""
        pipeline = self.pipeline("package")

        def body() -> StageOutput:
            # TODO: zip the built widget directory into an installable package.
            logger.warning(
                "Packaging is not implemented for %s; %s was left as built.",
                self.name,
                request.dest,
            )
            return StageOutput()

        return pipeline.run(body)
