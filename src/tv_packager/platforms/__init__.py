"""Platform adapters and their registry."""

from .base import PipelineState, PlatformAdapter, StagePipeline
from .orsay import OrsayAdapter
from .registry import PlatformRegistry, create_default_registry
from .webos import WebOSAdapter

__all__ = [
    "OrsayAdapter",
    "PipelineState",
    "PlatformAdapter",
    "PlatformRegistry",
    "StagePipeline",
    "WebOSAdapter",
    "create_default_registry",
]
