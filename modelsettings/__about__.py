__version__ = "1.0.0"
__description__ = "modelsettings : dot-path settings for SQLAlchemy models"
