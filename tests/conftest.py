import pytest

from selective_assertions.settings import load_settings


@pytest.fixture()
def fresh_settings():
    """ Reload settings from the environment, before and after the test """
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
