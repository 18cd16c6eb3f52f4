"""Keyed, freezable preset registries."""

from .base import BaseRegistry
from .exceptions import (
    RegistryAlreadyFrozenError,
    RegistryArgumentError,
    RegistryDuplicateError,
    RegistryError,
    RegistryFrozenError,
    RegistryKeyTypeError,
    RegistryLookupError,
    RegistryMissingKeyError,
)
from .simple import Registry
from .store import RegistryStore

__all__ = [
    "BaseRegistry",
    "Registry",
    "RegistryStore",
    "RegistryError",
    "RegistryArgumentError",
    "RegistryMissingKeyError",
    "RegistryKeyTypeError",
    "RegistryDuplicateError",
    "RegistryLookupError",
    "RegistryFrozenError",
    "RegistryAlreadyFrozenError",
]
