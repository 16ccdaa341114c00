"""Package web applications for Orsay and webOS smart-TV platforms."""

from __future__ import annotations

from tv_packager.api import (
    build_orsay_widget,
    build_webos_package,
    package_orsay_widget,
    prepare_webos_app,
)
from tv_packager.application.results import OperationResult
from tv_packager.errors import PackagerError
from tv_packager.version import next_revision, to_orsay_version

__version__ = "0.1.0"

__all__ = [
    "OperationResult",
    "PackagerError",
    "__version__",
    "build_orsay_widget",
    "build_webos_package",
    "next_revision",
    "package_orsay_widget",
    "prepare_webos_app",
    "to_orsay_version",
]
