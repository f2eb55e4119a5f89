from __future__ import annotations

import logging
from typing import List, Optional

from ..common.validators import require_email, require_name_query, require_positive_id
from ..core.exceptions import InvalidEmailError, InvalidInputError, UserNotFoundError
from .model import User, UserRequest
from .repository import UserRepository

logger = logging.getLogger("user_directory.users.service")


class UserService:
    """Use case: look up and maintain directory entries."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_user_by_email(self, email: Optional[str]) -> User:
        """Case-insensitive lookup of a single user by email.

        Raises :class:`InvalidEmailError` before the repository is touched when
        the address is missing or malformed, and :class:`UserNotFoundError`
        when nothing matches.
        """
        logger.info("Fetching user details for email: %s", email)
        if not email:
            logger.warning("Empty email provided")
            raise InvalidEmailError(email)

        try:
            email = require_email(email)
        except InvalidEmailError:
            logger.warning("Invalid email format provided: %s", email)
            raise

        user = self._users.get_by_email_ignore_case(email)
        if not user:
            logger.warning("User not found with email: %s", email)
            raise UserNotFoundError("email", email)
        return user

    def get_user_by_id(self, user_id: Optional[int]) -> User:
        user_id = self._require_id(user_id)
        logger.info("Fetching user with ID: %s", user_id)

        user = self._users.get_by_id(user_id)
        if not user:
            logger.warning("User not found with ID: %s", user_id)
            raise UserNotFoundError("id", user_id)
        return user

    def find_users_by_name(self, name: Optional[str]) -> List[User]:
        logger.info("Searching for users with name containing: %s", name)
        query = self._require_name(name)
        users = list(self._users.find_by_name_containing(query))
        logger.info("Found %d users matching name: %s", len(users), query)
        return users

    def find_active_users_by_name(self, name: Optional[str]) -> List[User]:
        logger.info("Searching for active users with name containing: %s", name)
        query = self._require_name(name)
        users = list(self._users.find_active_by_name_containing(query))
        logger.info("Found %d active users matching name: %s", len(users), query)
        return users

    def get_all_users(self) -> List[User]:
        users = list(self._users.list_all())
        logger.info("Found %d users in total", len(users))
        return users

    def create_user(self, request: UserRequest) -> User:
        # email uniqueness is left to the storage constraint
        user = self._users.create_user(request)
        logger.info("Created user %s with email: %s", user.user_id, user.email)
        return user

    def update_user(self, user_id: Optional[int], request: UserRequest) -> User:
        user_id = self._require_id(user_id)
        user = self._users.update_user(user_id, request)
        if not user:
            logger.warning("Cannot update, user not found with ID: %s", user_id)
            raise UserNotFoundError("id", user_id)
        logger.info("Updated user with ID: %s", user_id)
        return user

    def delete_user(self, user_id: int) -> bool:
        """Delete by id; ``False`` (and no deletion) when no such user exists."""
        if user_id is None or not self._users.exists_by_id(user_id):
            logger.info("Nothing to delete for user ID: %s", user_id)
            return False
        deleted = self._users.delete_by_id(user_id)
        logger.info("Deleted user with ID: %s", user_id)
        return deleted

    @staticmethod
    def _require_id(user_id: Optional[int]) -> int:
        try:
            return require_positive_id(user_id)
        except InvalidInputError:
            logger.warning("Invalid user ID: %s", user_id)
            raise

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        try:
            return require_name_query(name)
        except InvalidInputError:
            logger.warning("Invalid name parameter: %r", name)
            raise
