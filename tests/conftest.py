import pytest
from flask import Flask

from modelsettings import ModelSettings
from tests.models import CountingCache, db


@pytest.fixture
def app():
    app = Flask("modelsettings_test")
    app.config.update(SQLALCHEMY_DATABASE_URI="sqlite://")
    db.init_app(app)
    ModelSettings(app)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(autouse=True)
def _reset_cache():
    ModelSettings.cache = None
    yield
    ModelSettings.cache = None


@pytest.fixture
def cache(app):
    cache = CountingCache()
    ModelSettings.cache = cache
    return cache
