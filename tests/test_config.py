import logging

import pytest
from flask import Flask

import modelsettings
from modelsettings import ModelSettings
from modelsettings.config import clear_config_cache, get_config


@pytest.fixture
def restore_loglevel(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(ModelSettings, "LOGLEVEL", ModelSettings.LOGLEVEL)
    level = modelsettings.log.level
    yield
    modelsettings.log.setLevel(level)


def test_loglevel_kwarg(restore_loglevel) -> None:
    app = Flask("loglevel_kwarg")
    ModelSettings(app, LOGLEVEL=logging.DEBUG)
    assert modelsettings.log.level == logging.DEBUG
    assert ModelSettings.LOGLEVEL == logging.DEBUG


def test_loglevel_app_config(restore_loglevel) -> None:
    app = Flask("loglevel_config")
    app.config.update(LOGLEVEL=logging.ERROR)
    ModelSettings(app)
    assert modelsettings.log.level == logging.ERROR


def test_debug_app_config(restore_loglevel) -> None:
    app = Flask("debug_config")
    app.config.update(DEBUG=True)
    ModelSettings(app)
    assert modelsettings.log.level == logging.DEBUG


def test_init_logging_returns_package_logger() -> None:
    log = ModelSettings.init_logging(logging.INFO)
    assert log is modelsettings.log


def test_config_is_looked_up_per_app() -> None:
    clear_config_cache()
    first, second = Flask("first"), Flask("second")
    first.config.update(MODEL_SETTINGS_CACHE_KEY_FMT="first:{key}")
    second.config.update(MODEL_SETTINGS_CACHE_KEY_FMT="second:{key}")
    assert get_config("MODEL_SETTINGS_CACHE_KEY_FMT") == ModelSettings.MODEL_SETTINGS_CACHE_KEY_FMT
    with first.app_context():
        assert get_config("MODEL_SETTINGS_CACHE_KEY_FMT") == "first:{key}"
    with second.app_context():
        assert get_config("MODEL_SETTINGS_CACHE_KEY_FMT") == "second:{key}"
    with first.app_context():
        assert get_config("MODEL_SETTINGS_CACHE_KEY_FMT") == "first:{key}"
