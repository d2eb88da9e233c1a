# Configuration settings should be set in app.config
# Defaults are kept as ModelSettings class variables and may be overridden by environment variables
import os
import logging
from flask import current_app, has_app_context
from functools import lru_cache
import modelsettings
from typing import Optional, Union


def get_config(option: str) -> Optional[Union[bool, str, int]]:
    """Retrieve a configuration parameter from the app
    :param option: configuration parameter
    :return: configuration value
    """
    app = current_app._get_current_object() if has_app_context() else None
    return _get_config(app, option)


# lookups are cached per app (None outside an app context), init_app clears the cache
@lru_cache(maxsize=128)
def _get_config(app, option: str) -> Optional[Union[bool, str, int]]:
    if app is not None and option in app.config:
        return app.config[option]
    # not configured or no app context
    return getattr(modelsettings.ModelSettings, option, os.environ.get(option, None))


def clear_config_cache() -> None:
    _get_config.cache_clear()


def cache_key_fmt() -> str:
    """
    :return: format string for the cache keys, with `table`, `key` and `attribute` fields
    """
    fmt = get_config("MODEL_SETTINGS_CACHE_KEY_FMT")
    if not fmt:
        fmt = "{table}.{key}.{attribute}"
    return fmt


def pk_delimiter() -> str:
    """
    :return: delimiter used to join composite primary keys in cache keys
    """
    return get_config("MODEL_SETTINGS_PK_DELIMITER") or "_"


def is_debug() -> bool:
    """
    We use the loglevel to check whether we're running in debug mode
    :return: whether the app is in debug mode
    :rtype: Boolean
    """
    return modelsettings.log.getEffectiveLevel() < logging.INFO
