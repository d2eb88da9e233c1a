# base.py: implements the SettingsRecord SQLAlchemy model mixins
#
# pylint: disable=logging-format-interpolation,no-self-argument,no-member,line-too-long,protected-access
#
"""
Model mixins that add a dot path accessible settings mapping to SQLAlchemy models.

HasSettings adds the "settings" column, HasOptions the "options" column:

    class User(HasSettings, db.Model):
        __tablename__ = "Users"
        id = db.Column(db.Integer, primary_key=True)
        default_settings = {"theme": "dark"}
        allowed_settings = ["theme", "ui"]

    user.model_settings().set("ui.font", "mono")

Customizable class attributes (replace `settings` by `options` for HasOptions):

default_settings:
Type: dict
Description: Mapping assigned to new records without settings, also used by `reset`.

allowed_settings:
Type: Optional[list]
Description: Top-level keys that are kept when the record is saved, all keys are kept if None.

cache_settings:
Type: bool
Description: Read the settings through the `ModelSettings.cache` backend.

db_commit:
Type: bool
Description: Commit the session on `save`, only flush if False.
"""
from __future__ import annotations
import copy
from collections.abc import Mapping
import sqlalchemy
from sqlalchemy import Column, inspect as sqla_inspect
from sqlalchemy.orm import declared_attr, object_session, validates

# modelsettings dependencies:
import modelsettings
from . import hooks
from .accessor import Settings
from .config import cache_key_fmt, pk_delimiter
from .errors import StorageError
from .settings_types import JSONText, decode_mapping
from typing import Any, Optional


class SettingsRecord:
    """This mixin implements the persistence and accessor plumbing for the settings attributes.
    It's used as a base class for `HasSettings` and `HasOptions` and should be combined with
    a declarative base (eg. `db.Model`)

    The object attributes should not match column names,
    this is why the helper methods have the '_s_' prefix
    """

    db_commit = True  # commit the session on save, otherwise the caller has to commit

    def save(self) -> SettingsRecord:
        """
        Persist the record
        :return: self
        """
        session = object_session(self) or modelsettings.DB.session
        session.add(self)
        try:
            for attribute in hooks.registered_attributes(self):
                if self._s_allowed_keys(attribute) is not None:
                    # load expired values, the mapper events only filter loaded values
                    getattr(self, attribute)
                    hooks.filter_allowed(self, attribute)
            if self.db_commit:
                session.commit()
            else:
                session.flush()
        except sqlalchemy.exc.SQLAlchemyError as exc:
            # Exception may arise when a DB constraint has been violated (e.g. duplicate key)
            session.rollback()
            raise StorageError(exc, record=self)
        return self

    @property
    def _s_identity(self) -> Optional[tuple]:
        """
        :return: (tablename, key) tuple, None if the record hasn't been persisted
        """
        state = sqla_inspect(self)
        if state.identity is None:
            return None
        key = pk_delimiter().join(str(pk) for pk in state.identity)
        return self.__table__.name, key

    def _s_cache_key(self, attribute: str) -> Optional[str]:
        """
        :param attribute: settings attribute name
        :return: the cache key of the attribute
        """
        identity = self._s_identity
        if identity is None:
            return None
        table, key = identity
        return cache_key_fmt().format(table=table, key=key, attribute=attribute)

    def _s_cache(self, attribute: str):
        """
        :return: cache backend for the attribute or None
        """
        if not getattr(self, f"cache_{attribute}", False):
            return None
        return modelsettings.ModelSettings.cache

    def _s_accessor(self, attribute: str) -> Settings:
        """
        Retrieve the accessor for the attribute, one instance is kept per record and attribute
        :param attribute: settings attribute name
        :return: Settings instance
        """
        accessors = self.__dict__.get("_s_accessors")
        if accessors is None:
            accessors = self._s_accessors = {}
        cache = self._s_cache(attribute)
        accessor = accessors.get(attribute)
        if accessor is None or accessor.record is not self or accessor.cache is not cache:
            accessor = accessors[attribute] = Settings(self, attribute, cache=cache)
        return accessor

    def _s_default_mapping(self, attribute: str) -> dict:
        """
        :return: copy of the `default_<attribute>` class attribute
        """
        defaults = getattr(self.__class__, f"default_{attribute}", None)
        if not isinstance(defaults, Mapping):
            return {}
        return copy.deepcopy(dict(defaults))

    def _s_defaults(self, attribute: str) -> dict:
        """
        :return: the default mapping, `get_default_<attribute>` may be overridden by subclasses
        """
        getter = getattr(self, f"get_default_{attribute}", None)
        if getter is None:
            return self._s_default_mapping(attribute)
        return decode_mapping(getter())

    def _s_allowed_keys(self, attribute: str) -> Optional[list]:
        """
        :return: the `allowed_<attribute>` keys or None if all keys are allowed
        """
        allowed = getattr(self.__class__, f"allowed_{attribute}", None)
        if isinstance(allowed, (list, tuple, set, frozenset)):
            return list(allowed)
        return None

    def _s_accessor_value(self, attribute: str, path: Optional[str], default: Any) -> Any:
        accessor = self._s_accessor(attribute)
        if path:
            return accessor.get(path, default)
        return accessor


class HasSettings(SettingsRecord):
    """
    Adds the (uncached) "settings" column
    """

    default_settings: Optional[dict] = None
    allowed_settings: Optional[list] = None
    cache_settings = False

    @declared_attr
    def settings(cls):
        return Column(JSONText, nullable=True)

    @validates("settings")
    def _s_validate_settings(self, key, value):
        return decode_mapping(value)

    def get_default_settings(self) -> dict:
        """
        :return: the model's default settings
        """
        return self._s_default_mapping("settings")

    def model_settings(self, path: Optional[str] = None, default: Any = None) -> Any:
        """
        The model's settings
        :param path: dot path
        :param default: default value for `path`
        :return: the value at `path` or the Settings accessor if no path is given
        """
        return self._s_accessor_value("settings", path, default)


class HasOptions(SettingsRecord):
    """
    Adds the (cached) "options" column
    """

    default_options: Optional[dict] = None
    allowed_options: Optional[list] = None
    cache_options = True

    @declared_attr
    def options(cls):
        return Column(JSONText, nullable=True)

    @validates("options")
    def _s_validate_options(self, key, value):
        return decode_mapping(value)

    def get_default_options(self) -> dict:
        """
        :return: the model's default options
        """
        return self._s_default_mapping("options")

    def model_options(self, path: Optional[str] = None, default: Any = None) -> Any:
        """
        The model's options
        :param path: dot path
        :param default: default value for `path`
        :return: the value at `path` or the Settings accessor if no path is given
        """
        return self._s_accessor_value("options", path, default)


hooks.register(HasSettings, "settings")
hooks.register(HasOptions, "options")
