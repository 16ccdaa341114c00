"""Application-layer use-cases, requests and results."""

from __future__ import annotations

from tv_packager.application.fields import FieldDescriptor, MetadataBuilder
from tv_packager.application.options import (
    OrsayBuildRequest,
    WebOSBuildRequest,
    WebOSPrepareRequest,
    WebOSToolchainOptions,
)
from tv_packager.application.results import CommandResult, OperationResult

__all__ = [
    "CommandResult",
    "FieldDescriptor",
    "MetadataBuilder",
    "OperationResult",
    "OrsayBuildRequest",
    "WebOSBuildRequest",
    "WebOSPrepareRequest",
    "WebOSToolchainOptions",
]
