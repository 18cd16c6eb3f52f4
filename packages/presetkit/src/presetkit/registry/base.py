# presetkit/registry/base.py


import logging
from threading import RLock
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterator, Mapping, TypeVar

from asgiref.sync import sync_to_async

from .exceptions import (
    RegistryAlreadyFrozenError,
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryKeyTypeError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Mapping[str, Any])


class BaseRegistry(Generic[T]):
    """String-keyed record store with a one-way freeze.

    Owns the storage, the lock and the ``Open -> Frozen`` lifecycle. Subclasses
    decide how incoming records are validated and shaped, then hand them to
    :meth:`_insert`.
    """

    def __init__(self, *, name: str, key_field: str, freeze_records: bool = True) -> None:
        self._name = name
        self._key_field = key_field
        self._freeze_records = freeze_records
        self._lock = RLock()
        self._store: dict[str, T] = {}
        self._frozen = False

    # --- identity ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def key_field(self) -> str:
        return self._key_field

    # --- guards ---

    def _ensure_open(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Registry {self._name!r} is frozen")

    def _check_key(self, key: Any) -> str:
        if not isinstance(key, str):
            raise RegistryKeyTypeError(
                f"Registry {self._name!r} keys must be strings, got {type(key).__name__}"
            )
        return key

    def _insert(self, key: str, record: T) -> None:
        """Internal: store a fully prepared record under ``key``."""
        with self._lock:
            self._ensure_open()
            if key in self._store:
                raise RegistryDuplicateError(f"Registry {self._name!r} already has an entry {key!r}")
            self._store[key] = record
        logger.debug("Registered %r in registry %r", key, self._name)

    # --- retrieval ---

    def get(self, key: str) -> T | None:
        """
        Return the record stored at ``key``, or ``None`` if there is none.

        A missing key is a normal outcome; only a non-string key raises.

        :param key: The record key.
        :raises RegistryKeyTypeError: If ``key`` is not a string.
        """
        k = self._check_key(key)
        with self._lock:
            return self._store.get(k)

    async def aget(self, key: str) -> T | None:
        """Async wrapper around `get`."""
        return await sync_to_async(self.get)(key)

    def all(self) -> Mapping[str, T]:
        """
        Return a snapshot of every entry keyed by record key.

        The snapshot is a copy, so mutating it never changes the registry. Once
        the registry is frozen the snapshot is a read-only mapping view.
        """
        with self._lock:
            snapshot = dict(self._store)
            if self._frozen:
                return MappingProxyType(snapshot)
            return snapshot

    async def aall(self) -> Mapping[str, T]:
        """Async wrapper around `all`."""
        return await sync_to_async(self.all)()

    def keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._store.keys())

    def count(self) -> int:
        """Counts the number of registered records."""
        with self._lock:
            return len(self._store)

    def filter(self, pred: Callable[[T], bool]) -> tuple[T, ...]:
        """Return all registered records matching predicate `pred`."""
        with self._lock:
            return tuple(r for r in self._store.values() if pred(r))

    # --- mutation / control ---

    def freeze(self) -> None:
        """
        Mark the registry as frozen (no further mutations).

        :raises RegistryAlreadyFrozenError: If the registry is already frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryAlreadyFrozenError(f"Registry {self._name!r} is already frozen")
            if self._freeze_records:
                self._store = {k: MappingProxyType(v) for k, v in self._store.items()}
            self._frozen = True
            count = len(self._store)
        logger.debug("Froze registry %r with %d entries", self._name, count)

    async def afreeze(self) -> None:
        """Async: mark the registry as frozen."""
        return await sync_to_async(self.freeze)()

    def is_frozen(self) -> bool:
        return self._frozen

    # --- container protocol ---

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __iter__(self) -> Iterator[tuple[str, T]]:
        return iter(tuple(self.all().items()))

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return (
            f"<{type(self).__name__} {self._name!r} key_field={self._key_field!r} "
            f"entries={self.count()} {state}>"
        )
