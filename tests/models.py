from flask_sqlalchemy import SQLAlchemy

from modelsettings import HasOptions, HasSettings, InMemoryCache

db = SQLAlchemy()


class User(HasSettings, db.Model):
    __tablename__ = "Users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, default="")

    default_settings = {"theme": "dark"}


class Profile(HasSettings, db.Model):
    __tablename__ = "Profiles"
    id = db.Column(db.Integer, primary_key=True)

    default_settings = {"ui": {"theme": "dark", "font": "sans"}, "lang": "en"}


class Note(HasSettings, db.Model):
    __tablename__ = "Notes"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, unique=True)


class Account(HasSettings, HasOptions, db.Model):
    __tablename__ = "Accounts"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, default="")

    allowed_settings = ["a", "b"]
    default_options = {"plan": "free"}


class Team(HasOptions, db.Model):
    __tablename__ = "Teams"
    id = db.Column(db.Integer, primary_key=True)

    default_options = {"visibility": "private"}


class Membership(HasOptions, db.Model):
    __tablename__ = "Memberships"
    team_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, primary_key=True)


class CountingCache(InMemoryCache):
    """
    InMemoryCache that records the producer calls and evictions
    """

    def __init__(self):
        super().__init__()
        self.misses = 0
        self.forgotten = []

    def remember_forever(self, key, producer):
        def counted():
            self.misses += 1
            return producer()

        return super().remember_forever(key, counted)

    def forget(self, key):
        self.forgotten.append(key)
        super().forget(key)
