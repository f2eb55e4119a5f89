from __future__ import annotations

import pytest

from config import get_settings_module
from config.base import build_database_uri


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_database_uri_escapes_password(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    uri = build_database_uri(
        {"host": "db", "port": 3306, "user": "svc", "password": "p@ss:word", "database": "users"}
    )
    assert uri == "mysql+mysqlconnector://svc:p%40ss%3Aword@db:3306/users"


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///local.sqlite3")
    assert build_database_uri({}) == "sqlite:///local.sqlite3"
