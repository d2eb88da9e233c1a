import logging
import os
import sys
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
import modelsettings
import flask.app
from .config import clear_config_cache
from .cache import CacheBackend
from typing import Optional


class ModelSettings:
    """This class configures the Flask application to use model settings
    :param app: a Flask application.
    :param cache: cache backend used for the cached attributes (eg. "options")
    :param LOGLEVEL: loglevel configuration variable, values from logging module (0: trace, .. 50: critical)
    """

    # Configuration settings are stored as class variables
    LOGLEVEL = logging.WARNING
    MODEL_SETTINGS_CACHE_KEY_FMT = "{table}.{key}.{attribute}"
    MODEL_SETTINGS_PK_DELIMITER = "_"
    #
    # Process-wide cache backend, when None the cached attributes are read from the record
    cache: Optional[CacheBackend] = None

    def __init__(self, app: Optional[flask.app.Flask] = None, *args, **kwargs) -> None:
        """
        Constructor
        """
        self.app = app
        if app is not None:
            self.init_app(app, *args, **kwargs)

    def init_app(
        self,
        app: flask.app.Flask,
        cache: Optional[CacheBackend] = None,
        app_db: Optional[SQLAlchemy] = None,
        **kwargs,
    ) -> None:
        """
        Extension initialization
        """
        if not isinstance(app, Flask):  # pragma: no cover
            raise TypeError("'app' should be Flask.")

        if app_db is None:
            app_db = app.extensions.get("sqlalchemy", modelsettings.DB)

        modelsettings.DB = self.db = app_db

        if cache is not None:
            ModelSettings.cache = cache

        for conf_name, conf_val in kwargs.items():
            setattr(ModelSettings, conf_name, conf_val)

        for conf_name, conf_val in app.config.items():
            if conf_name.startswith("MODEL_SETTINGS_") or conf_name == "LOGLEVEL":
                setattr(ModelSettings, conf_name, conf_val)

        log.setLevel(ModelSettings.LOGLEVEL)
        if app.config.get("DEBUG", False):
            log.setLevel(logging.DEBUG)

        # the configuration may have changed
        clear_config_cache()
        app.extensions["model_settings"] = self
        log.debug("ModelSettings initialized (cache: %s)", ModelSettings.cache)

    @staticmethod
    def init_logging(loglevel: int = logging.WARNING) -> logging.Logger:
        """
        Specify the log format used in the webserver logs
        The webserver will catch stderr so we log everything to sys.stderr
        """
        log = logging.getLogger(__name__)
        if log.level == logging.NOTSET:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            log.setLevel(loglevel)
            log.addHandler(handler)
        return log


#
# DB and logging initialization
#
DB = SQLAlchemy()

try:
    DEBUG = os.getenv("DEBUG", logging.WARNING)
    LOGLEVEL = int(DEBUG)
except ValueError:  # pragma: no cover
    print(f'Invalid LogLevel in DEBUG Environment Variable! "{DEBUG}"')
    LOGLEVEL = logging.INFO

ModelSettings.LOGLEVEL = LOGLEVEL
log = ModelSettings.init_logging(LOGLEVEL)
