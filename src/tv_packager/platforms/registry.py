"""Registry of platform adapters by name."""

from __future__ import annotations

from collections.abc import Callable

from tv_packager.errors import UnknownPlatformError
from tv_packager.platforms.base import PlatformAdapter
from tv_packager.platforms.orsay import OrsayAdapter
from tv_packager.platforms.webos import WebOSAdapter

type AdapterFactory = Callable[..., PlatformAdapter]


class PlatformRegistry:
    """Map platform names to adapter factories."""

    def __init__(self) -> None:
        self._factories: dict[str, AdapterFactory] = {}

    def register(self, name: str, factory: AdapterFactory) -> None:
        """Register ``factory`` under ``name``.

        Raises
        ------
        UnknownPlatformError
            If ``name`` is blank.
        """
        key = name.strip().lower()
        if not key:
            raise UnknownPlatformError("Platform name cannot be empty.")
        self._factories[key] = factory

    def names(self) -> list[str]:
        """Return registered platform names, sorted."""
        return sorted(self._factories)

    def create(self, name: str, **kwargs: object) -> PlatformAdapter:
        """Instantiate the adapter registered under ``name``.

        Raises
        ------
        UnknownPlatformError
            If no adapter is registered under ``name``.
        """
        try:
            factory = self._factories[name.strip().lower()]
        except KeyError as exc:
            raise UnknownPlatformError(
                f"Unknown platform '{name}'. Available platforms: {', '.join(self.names())}"
            ) from exc
        return factory(**kwargs)


def create_default_registry() -> PlatformRegistry:
    """Return a registry with the built-in Orsay and webOS adapters."""
    registry = PlatformRegistry()
    registry.register(OrsayAdapter.name, OrsayAdapter)
    registry.register(WebOSAdapter.name, WebOSAdapter)
    return registry
