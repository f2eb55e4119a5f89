from __future__ import annotations

from datetime import datetime

import pytest

from src.user_directory.user_directory.main import create_app
from src.user_directory.user_directory.users.model import UserRequest
from src.user_directory.user_directory.users.sqlalchemy_user_repository import SQLAlchemyUserRepository


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def app():
    # every app gets its own in-memory SQLite database
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def repo(app_ctx):
    return SQLAlchemyUserRepository()


@pytest.fixture
def seed_user(app):
    def _seed(email: str, name: str, **fields):
        with app.app_context():
            return SQLAlchemyUserRepository().create_user(UserRequest(email=email, name=name, **fields))

    return _seed
