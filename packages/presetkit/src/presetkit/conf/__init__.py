"""Process-wide presetkit settings.

``settings`` starts from :data:`~presetkit.conf.defaults.DEFAULTS` and is
overlaid with the module named by ``PRESETKIT_CONFIG_MODULE`` when that
environment variable is set. Invalid values raise
:class:`~presetkit.exceptions.ConfigurationError` at load time.
"""
from .defaults import DEFAULTS
from .models import PresetKitSettings, RegistryOptions
from .settings import CONFIG_MODULE_ENVVAR, Settings

settings = Settings()
settings.update_from_envvar()

__all__ = [
    "CONFIG_MODULE_ENVVAR",
    "DEFAULTS",
    "PresetKitSettings",
    "RegistryOptions",
    "Settings",
    "settings",
]
