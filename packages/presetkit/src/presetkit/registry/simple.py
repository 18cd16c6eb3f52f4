"""Template-backed preset registry with attribute-style access."""

from __future__ import annotations

import copy
import logging
from types import MappingProxyType
from typing import Any, Mapping

from asgiref.sync import sync_to_async
from pydantic import ValidationError

from presetkit.conf import RegistryOptions, settings
from presetkit.registry.base import BaseRegistry
from presetkit.registry.exceptions import RegistryArgumentError, RegistryMissingKeyError

logger = logging.getLogger(__name__)


class Registry(BaseRegistry[Mapping[str, Any]]):
    """Registry of records layered on a shared template.

    Records are mappings keyed by their ``key_field`` value. Each stored record
    is a fresh copy of the template overlaid with the supplied fields, so
    records never share mutable state with the template or with each other.

    Attribute access is sugar over :meth:`get` and :meth:`register`::

        atmosphere = Registry("Atmosphere", {"fadeInDuration": 1})
        atmosphere.chase = {"fadeInDuration": 0.2}   # register(..., name="chase")
        atmosphere.chase["fadeInDuration"]           # 0.2
        atmosphere.missing                           # None

    The registry's own methods and properties shadow data keys of the same
    name; use :meth:`get` to reach those.
    """

    def __init__(self, name: str, template: Mapping[str, Any], key_field: str | None = None) -> None:
        try:
            options = RegistryOptions(
                name=name,
                template=template,
                key_field=settings["KEY_FIELD"] if key_field is None else key_field,
            )
        except ValidationError as err:
            raise RegistryArgumentError(f"Invalid registry arguments for {name!r}: {err}") from err

        super().__init__(
            name=options.name,
            key_field=options.key_field,
            freeze_records=bool(settings["FREEZE_RECORDS"]),
        )
        try:
            template_copy = copy.deepcopy(options.template)
        except (TypeError, copy.Error) as err:
            raise RegistryArgumentError(f"Registry {options.name!r} template cannot be copied: {err}") from err
        self._template: dict[str, Any] = template_copy

    @property
    def template(self) -> Mapping[str, Any]:
        return MappingProxyType(self._template)

    # --- registration ---

    def register(self, record: Mapping[str, Any]) -> None:
        """
        Validate ``record`` and store it under its ``key_field`` value.

        :param record: Mapping of field name to value. Not mutated.
        :raises RegistryFrozenError: If the registry is frozen.
        :raises RegistryArgumentError: If ``record`` is not a mapping.
        :raises RegistryMissingKeyError: If the key field is absent, ``None`` or empty.
        :raises RegistryKeyTypeError: If the key field is not a string.
        :raises RegistryDuplicateError: If the key is already registered.
        """
        with self._lock:
            self._ensure_open()
            if not isinstance(record, Mapping):
                raise RegistryArgumentError(
                    f"Registry {self.name!r} expects a mapping record, got {type(record).__name__}"
                )

            key = record.get(self.key_field)
            if key is None or key == "":
                raise RegistryMissingKeyError(
                    f"Registry {self.name!r} record is missing key field {self.key_field!r}"
                )
            key = self._check_key(key)

            merged = copy.deepcopy(self._template)
            merged.update(record)
            self._insert(key, merged)

    async def aregister(self, record: Mapping[str, Any]) -> None:
        """Async wrapper around `register`."""
        return await sync_to_async(self.register)(record)

    def register_all(self, records: Mapping[str, Mapping[str, Any]]) -> None:
        """
        Register every ``key -> record`` pair, tagging each record with its key.

        Fails fast: the first invalid entry raises and entries registered before
        it stay registered.

        :raises RegistryFrozenError: If the registry is frozen.
        :raises RegistryArgumentError: If ``records`` or one of its values is not a mapping.
        """
        with self._lock:
            self._ensure_open()
            if not isinstance(records, Mapping):
                raise RegistryArgumentError(
                    f"Registry {self.name!r} expects a mapping of records, got {type(records).__name__}"
                )
            for key, value in records.items():
                if not isinstance(value, Mapping):
                    raise RegistryArgumentError(
                        f"Registry {self.name!r} entry {key!r} is not a mapping: {type(value).__name__}"
                    )
                self.register(self._tag(key, value))
        logger.debug("Bulk-registered %d entries in registry %r", len(records), self.name)

    async def aregister_all(self, records: Mapping[str, Mapping[str, Any]]) -> None:
        """Async wrapper around `register_all`."""
        return await sync_to_async(self.register_all)(records)

    def _tag(self, key: Any, record: Any) -> Any:
        """Return a copy of ``record`` with its key field set to ``key``."""
        if not isinstance(record, Mapping):
            return record
        return {**record, self.key_field: key}

    # --- attribute sugar ---

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so methods/properties win.
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        if hasattr(type(self), name):
            raise AttributeError(f"{name!r} is a read-only attribute of registry {self.name!r}")
        self.register(self._tag(name, value))
