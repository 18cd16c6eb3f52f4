class PresetKitError(Exception):
    """Base for all presetkit exceptions."""


class ConfigurationError(PresetKitError, ValueError):
    """Raised when presetkit settings fail validation."""
