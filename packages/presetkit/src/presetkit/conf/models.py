# presetkit/conf/models.py
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from .defaults import DEFAULTS


class PresetKitSettings(BaseModel):
    """Validated process-wide settings; unset fields fall back to :data:`DEFAULTS`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    KEY_FIELD: StrictStr = Field(default=DEFAULTS["KEY_FIELD"], min_length=1)
    FREEZE_RECORDS: StrictBool = DEFAULTS["FREEZE_RECORDS"]


class RegistryOptions(BaseModel):
    """Validated constructor arguments for a registry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr = Field(min_length=1)
    template: dict[str, Any]
    key_field: StrictStr = Field(min_length=1)
