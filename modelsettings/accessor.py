# -*- coding: utf-8 -*-
"""
    accessor.py: dot path access to the settings mapping of a record

    Example:

        user.model_settings().set("ui.theme", "light")
        user.model_settings().get("ui.theme")  # "light"
        user.model_settings("ui.theme")        # shorthand for the above

    Every mutation is written through `Settings.apply`, which saves the record
    and evicts the cache entry of the record attribute.
"""
import copy
import modelsettings
from .dot_path import get_path, has_path, set_path, delete_path, to_mapping
from .settings_types import decode_mapping
from .cache import CacheBackend
from typing import Any, Optional

_MISSING = object()


class Settings:
    """
    Accessor for the settings mapping stored in `attribute` of `record`
    When a cache backend is given, reads go through the cache
    """

    def __init__(self, record, attribute: str = "settings", cache: Optional[CacheBackend] = None) -> None:
        """
        :param record: `SettingsRecord` instance
        :param attribute: name of the settings attribute
        :param cache: cache backend, optional
        """
        self._record = record
        self.attribute = attribute
        self.cache = cache

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._record.__class__.__name__}.{self.attribute}>"

    @property
    def record(self):
        """
        :return: the record owning the settings
        """
        return self._record

    @property
    def cache_key(self) -> Optional[str]:
        """
        :return: cache key of the record attribute, None if the record has no identity yet
        """
        return self._record._s_cache_key(self.attribute)

    def _read(self) -> dict:
        return copy.deepcopy(decode_mapping(getattr(self._record, self.attribute, None)))

    def all(self) -> dict:
        """
        :return: a copy of the settings mapping, changing it doesn't affect the record or the cache
        """
        key = self.cache_key if self.cache is not None else None
        if key is None:
            return self._read()
        return copy.deepcopy(to_mapping(self.cache.remember_forever(key, self._read)))

    def get(self, path: Optional[str] = None, default: Any = None) -> Any:
        """
        :param path: dot path, the whole mapping is returned if omitted
        :param default: returned if the path doesn't exist
        :return: value at path
        """
        if not path:
            return self.all()
        return get_path(self.all(), path, default)

    def has(self, path: str) -> bool:
        """
        :return: True if the path exists, regardless of its value
        """
        return has_path(self.all(), path)

    def set(self, path: Optional[str] = None, value: Any = _MISSING) -> "Settings":
        """
        Set the value at the given path, `set(value)` replaces the whole mapping
        :param path: dot path
        :param value: new value
        :return: self
        """
        if value is _MISSING:
            value, path = path, None

        if not path:
            return self.apply(to_mapping(value))

        settings = self.all()
        settings = set_path(settings, path, value)
        return self.apply(settings)

    def update(self, path: str, value: Any) -> "Settings":
        """
        Alias for `set` with a required path
        """
        return self.set(path, value)

    def delete(self, path: Optional[str] = None) -> "Settings":
        """
        Delete the value at the given path, everything is deleted if the path is omitted
        :return: self
        """
        if not path:
            return self.apply({})

        settings = self.all()
        settings = delete_path(settings, path)
        return self.apply(settings)

    def forget(self, path: Optional[str] = None) -> "Settings":
        """
        Alias for `delete`
        """
        return self.delete(path)

    def reset(self, path: Optional[str] = None) -> "Settings":
        """
        Reset the value at the given path to its default value (None if there's no default),
        all settings are reset if the path is omitted
        :return: self
        """
        defaults = self._record._s_defaults(self.attribute)
        if path:
            return self.set(path, copy.deepcopy(get_path(defaults, path)))

        return self.apply(copy.deepcopy(defaults))

    def apply(self, settings: Optional[dict] = None) -> "Settings":
        """
        Store the settings mapping: assign the record attribute, save the record and evict the cache entry
        :param settings: the new settings mapping
        :return: self
        """
        setattr(self._record, self.attribute, copy.deepcopy(to_mapping(settings)))
        self._record.save()
        if self.cache is not None:
            key = self.cache_key
            if key is not None:
                self.cache.forget(key)
        modelsettings.log.debug(f"{self!r}: applied")
        return self
