import pytest

from presetkit.registry import Registry, RegistryStore
from presetkit.registry.exceptions import (
    RegistryArgumentError,
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryLookupError,
)


def test_create_and_lookup():
    store = RegistryStore()
    atmosphere = store.create("Atmosphere", {"fadeInDuration": 1})
    cameras = store.create("Camera", {"fov": 70}, key_field="id")

    assert isinstance(atmosphere, Registry)
    assert store.registry("Atmosphere") is atmosphere
    assert store.get("Camera") is cameras
    assert cameras.key_field == "id"
    assert store.names() == ("Atmosphere", "Camera")
    assert "Camera" in store


def test_create_duplicate_name_fails():
    store = RegistryStore()
    store.create("Atmosphere", {})

    with pytest.raises(RegistryDuplicateError):
        store.create("Atmosphere", {})


def test_create_propagates_argument_errors():
    store = RegistryStore()

    with pytest.raises(RegistryArgumentError):
        store.create("Atmosphere", None)
    assert store.names() == ()


def test_unknown_registry():
    store = RegistryStore()

    assert store.get("Atmosphere") is None
    with pytest.raises(RegistryLookupError):
        store.registry("Atmosphere")


def test_freeze_all_skips_already_frozen():
    store = RegistryStore()
    atmosphere = store.create("Atmosphere", {})
    cameras = store.create("Camera", {})
    cameras.freeze()

    store.freeze_all()
    store.freeze_all()

    assert atmosphere.is_frozen() and cameras.is_frozen()
    with pytest.raises(RegistryFrozenError):
        atmosphere.register({"name": "default"})


def test_freeze_all_tolerates_registry_frozen_after_check(monkeypatch):
    store = RegistryStore()
    atmosphere = store.create("Atmosphere", {})
    cameras = store.create("Camera", {})
    cameras.freeze()
    # Report every registry as open, as if another thread froze one meanwhile.
    monkeypatch.setattr(Registry, "is_frozen", lambda self: False)

    store.freeze_all()

    assert atmosphere._frozen is True
    assert cameras._frozen is True
