#!/usr/bin/env python
#
# model settings example
#
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from modelsettings import HasSettings, HasOptions, ModelSettings, InMemoryCache

db = SQLAlchemy()


class User(HasSettings, HasOptions, db.Model):
    """
    description: User with settings and (cached) options
    """

    __tablename__ = "Users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String)
    email = db.Column(db.String)

    default_settings = {"theme": "dark", "notifications": {"email": True}}
    allowed_settings = ["theme", "notifications", "ui"]
    default_options = {"beta": False}


def create_app(config_filename=None):
    app = Flask("demo_app")
    app.config.update(SQLALCHEMY_DATABASE_URI="sqlite://", DEBUG=True)
    db.init_app(app)
    ModelSettings(app, cache=InMemoryCache())
    with app.app_context():
        db.create_all()
    return app


def demo(app):
    with app.app_context():
        user = User(name="test", email="email@x.org")
        user.save()
        print(user.model_settings().all())

        settings = user.model_settings()
        settings.set("ui.font", "mono").set("notifications.email", False)
        settings.set("not_allowed", 1)  # removed when saved
        print(settings.all())
        print(user.model_settings("notifications.email"))

        settings.reset("notifications")
        print(settings.all())

        user.model_options().set("beta", True)
        print(user.model_options().all())


if __name__ == "__main__":
    demo(create_app())
