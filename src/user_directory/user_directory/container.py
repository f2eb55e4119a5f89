from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .users.repository import UserRepository
from .users.service import UserService
from .users.sqlalchemy_user_repository import SQLAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    user_service: UserService


def build_container(*, users_repo: Optional[UserRepository] = None) -> Container:
    users_repo = users_repo or SQLAlchemyUserRepository()
    user_service = UserService(users_repo)

    return Container(
        users_repo=users_repo,
        user_service=user_service,
    )
