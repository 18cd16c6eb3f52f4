"""Default configuration values for presetkit."""

DEFAULTS: dict[str, object] = {
    # Record attribute used as the registry key when none is passed.
    "KEY_FIELD": "name",
    # Wrap stored records in read-only views when a registry is frozen.
    "FREEZE_RECORDS": True,
}
