import os

from config.base import build_database_uri, build_db_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = build_db_config(default_password="123456")
SQLALCHEMY_DATABASE_URI = build_database_uri(DB_CONFIG)
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will create missing tables on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
