# presetkit/registry/exceptions.py
"""Registry exceptions"""
from presetkit.exceptions.base import PresetKitError


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(PresetKitError): ...


class RegistryArgumentError(ValueError, RegistryError):
    """Raised for a missing or wrongly shaped constructor/registration argument."""


class RegistryMissingKeyError(ValueError, RegistryError):
    """Raised when a record lacks a value for the registry's key field."""


class RegistryKeyTypeError(TypeError, RegistryError):
    """Raised when a key field or lookup key is not a string."""


class RegistryDuplicateError(RegistryError): ...


class RegistryLookupError(LookupError, RegistryError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...


class RegistryAlreadyFrozenError(RuntimeError, RegistryError): ...
