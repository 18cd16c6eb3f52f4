"""
presetkit: keyed, freezable registries for configuration presets.

A :class:`~presetkit.registry.Registry` holds a handful of named settings
records (lighting presets, camera profiles, ...) layered on a template of
defaults. Applications populate registries at startup, freeze them, and treat
them as read-only lookup tables afterwards.

Import Guidelines:
------------------
- Use `presetkit.registry` for `Registry` and `RegistryStore`.
- Use `presetkit.registry.exceptions` for the registry error hierarchy.
- Use `presetkit.conf` for process-wide settings.
"""
from .exceptions import PresetKitError
from .registry import Registry, RegistryStore

__version__ = "0.1.0"

__all__ = [
    "PresetKitError",
    "Registry",
    "RegistryStore",
    "__version__",
]
