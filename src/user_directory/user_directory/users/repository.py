from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User, UserRequest


class UserRepository(Protocol):
    """Repository interface for users.

    Note (DIP): the service layer depends on this interface, not on a concrete
    database. Email uniqueness is enforced by the implementation's storage.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email_ignore_case(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_name_containing(self, name: str) -> Sequence[User]:
        raise NotImplementedError

    def find_active_by_name_containing(self, name: str) -> Sequence[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def create_user(self, request: UserRequest) -> User:
        raise NotImplementedError

    def update_user(self, user_id: int, request: UserRequest) -> Optional[User]:
        raise NotImplementedError

    def exists_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
