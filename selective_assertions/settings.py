""" Settings for selective assertions

Loaded from the environment, with the `SELECTIVE_ASSERTIONS_` prefix:

    SELECTIVE_ASSERTIONS_STRICT_FIELDS=1 pytest

Example:
    with override_settings(SHOW_VALUES=False):
        assert_eq_ignoring(user1, user2, 'age')
"""

from __future__ import annotations

import functools
from contextlib import contextmanager

import pydantic as pd
import pydantic_settings as pds


class Settings(pds.BaseSettings):
    """ Settings: how assertions validate their arguments and report failures """
    model_config = pds.SettingsConfigDict(env_prefix='SELECTIVE_ASSERTIONS_')

    # Reject duplicate field names in one call.
    # When off, duplicates are tolerated: excluding a field twice is the same as excluding it once.
    STRICT_FIELDS: bool = False

    # Include the compared values into failure messages
    SHOW_VALUES: bool = True

    # Truncate every value's repr() to this many characters. 0 = no limit
    MAXREPR: int = pd.Field(0, ge=0)


def get_settings() -> Settings:
    """ Get current settings: overridden, or loaded from the environment """
    if _overrides:
        return _overrides[-1]
    return load_settings()


@functools.lru_cache(maxsize=None)
def load_settings() -> Settings:
    """ Load settings from the environment. Cached: use `load_settings.cache_clear()` to reload """
    return Settings()


@contextmanager
def override_settings(**values):
    """ Temporarily override some settings

    Example:
        with override_settings(STRICT_FIELDS=True):
            ...
    """
    settings = get_settings().model_copy(update=values)
    _overrides.append(settings)
    try:
        yield settings
    finally:
        _overrides.pop()


# Stack of overrides made by override_settings()
_overrides: list[Settings] = []
