# flake8: noqa: F401
#
# Dot path accessible settings for SQLAlchemy models
#
from .settings_init import DB, log, ModelSettings
from .errors import ModelSettingsError, StorageError, DecodeError
from .cache import CacheBackend, InMemoryCache, RedisCache
from .dot_path import get_path, has_path, set_path, delete_path, only, to_mapping
from .settings_types import JSONText, decode_mapping, encode_mapping
from .accessor import Settings
from .hooks import populate_defaults, filter_allowed
from .base import SettingsRecord, HasSettings, HasOptions
from .__about__ import __version__, __description__

__all__ = (
    "__version__",
    "__description__",
    #
    "ModelSettings",
    # models:
    "SettingsRecord",
    "HasSettings",
    "HasOptions",
    "JSONText",
    # accessor:
    "Settings",
    "get_path",
    "has_path",
    "set_path",
    "delete_path",
    "only",
    "to_mapping",
    "decode_mapping",
    "encode_mapping",
    # hooks:
    "populate_defaults",
    "filter_allowed",
    # cache:
    "CacheBackend",
    "InMemoryCache",
    "RedisCache",
    # Errors:
    "ModelSettingsError",
    "StorageError",
    "DecodeError",
)
