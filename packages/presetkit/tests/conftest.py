import pytest

from presetkit.conf import settings
from presetkit.registry import Registry


@pytest.fixture(autouse=True)
def _reset_settings():
    yield
    settings.reset()


@pytest.fixture
def atmosphere():
    return Registry("Atmosphere", {"fadeInDuration": 1, "fogColor": "grey"})
