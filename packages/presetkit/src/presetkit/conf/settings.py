"""Process-wide registry defaults, validated on every change."""


import importlib
import os
from typing import Any, Iterator, Mapping, MutableMapping

from pydantic import ValidationError

from presetkit.exceptions import ConfigurationError

from .models import PresetKitSettings

CONFIG_MODULE_ENVVAR = "PRESETKIT_CONFIG_MODULE"
SETTINGS_PREFIX = "PRESETKIT_"


class Settings(MutableMapping[str, Any]):
    """Overrides layered on the defaults of :class:`PresetKitSettings`.

    Only the model's fields are settings. Every write re-validates the full
    set of overrides, so a bad value raises :class:`ConfigurationError` and
    leaves the previous settings in place.
    """

    def __init__(self, overrides: Mapping[str, Any] | None = None) -> None:
        self._overrides: dict[str, Any] = {}
        self._current = PresetKitSettings()
        if overrides:
            self.update_from_mapping(overrides)

    def _apply(self, overrides: dict[str, Any]) -> None:
        try:
            current = PresetKitSettings(**overrides)
        except ValidationError as err:
            raise ConfigurationError(f"Invalid presetkit settings: {err}") from err
        self._overrides = overrides
        self._current = current

    # Mapping protocol -------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        if key not in PresetKitSettings.model_fields:
            raise KeyError(key)
        return getattr(self._current, key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._apply({**self._overrides, key: value})

    def __delitem__(self, key: str) -> None:
        overrides = dict(self._overrides)
        del overrides[key]
        self._apply(overrides)

    def __iter__(self) -> Iterator[str]:
        return iter(PresetKitSettings.model_fields)

    def __len__(self) -> int:
        return len(PresetKitSettings.model_fields)

    # Loaders ----------------------------------------------------------
    def update_from_mapping(self, mapping: Mapping[str, Any]) -> None:
        """Apply every setting found in ``mapping`` as one validated change.

        Keys may be bare (``KEY_FIELD``) or prefixed (``PRESETKIT_KEY_FIELD``);
        names that are not settings are ignored.
        """
        self._apply({**self._overrides, **_settings_in(mapping)})

    def update_from_object(self, obj: str) -> None:
        module = importlib.import_module(obj)
        self.update_from_mapping(vars(module))

    def update_from_envvar(self, envvar: str = CONFIG_MODULE_ENVVAR) -> bool:
        """Load overrides from the module named by ``envvar``.

        Returns ``False`` when the variable is unset or empty.
        """
        module_name = os.environ.get(envvar)
        if not module_name:
            return False
        self.update_from_object(module_name)
        return True

    def reset(self) -> None:
        """Drop every override, falling back to the defaults."""
        self._apply({})

    def as_dict(self) -> dict[str, Any]:
        return self._current.model_dump()


def _settings_in(mapping: Mapping[str, Any]) -> dict[str, Any]:
    found: dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            continue
        name = key[len(SETTINGS_PREFIX) :] if key.startswith(SETTINGS_PREFIX) else key
        if name in PresetKitSettings.model_fields:
            found[name] = value
    return found
