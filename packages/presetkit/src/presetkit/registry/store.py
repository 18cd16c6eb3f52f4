# presetkit/registry/store.py
"""Named registries owned by an application."""
import logging
from threading import RLock
from typing import Any, Mapping

from .exceptions import RegistryAlreadyFrozenError, RegistryDuplicateError, RegistryLookupError
from .simple import Registry

logger = logging.getLogger(__name__)


class RegistryStore:
    """Container managing preset registries by name."""

    def __init__(self) -> None:
        self._registries: dict[str, Registry] = {}
        self._lock = RLock()

    def create(self, name: str, template: Mapping[str, Any], *, key_field: str | None = None) -> Registry:
        with self._lock:
            if name in self._registries:
                raise RegistryDuplicateError(f"Registry already exists: {name!r}")
            registry = Registry(name, template, key_field=key_field)
            self._registries[registry.name] = registry
            return registry

    def registry(self, name: str) -> Registry:
        with self._lock:
            try:
                return self._registries[name]
            except KeyError as err:
                raise RegistryLookupError(f"No registry named {name!r}") from err

    def get(self, name: str) -> Registry | None:
        with self._lock:
            return self._registries.get(name)

    def items(self) -> dict[str, Registry]:
        with self._lock:
            return dict(self._registries)

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._registries.keys()))

    def freeze_all(self) -> None:
        """Freeze every registry that is still open."""
        for registry in self.items().values():
            try:
                registry.freeze()
            except RegistryAlreadyFrozenError:
                continue
        logger.debug("Froze registries: %s", ",".join(self.names()))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._registries


__all__ = ["RegistryStore"]
