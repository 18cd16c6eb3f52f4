"""
Package-wide exception root.

Sub-packages define their own errors on top of :class:`PresetKitError` so
callers can catch everything raised by presetkit with a single clause.
Registry errors live in `presetkit.registry.exceptions`.
"""
from .base import ConfigurationError, PresetKitError

__all__ = ["ConfigurationError", "PresetKitError"]
