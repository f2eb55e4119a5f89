from __future__ import annotations

from typing import Iterable, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class InvalidEmailError(DomainError):
    """Raised when an email address does not match the accepted grammar."""

    def __init__(self, email: Optional[str]):
        self.email = email
        super().__init__(f"Invalid email format: {email}")


class InvalidInputError(DomainError):
    """Raised when request input is invalid.

    ``errors`` carries one message per failing field so that multi-field
    validation can be reported in a single response.
    """

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        self.errors = list(errors or [])
        super().__init__(message)


class UserNotFoundError(DomainError):
    """Raised when no user matches the lookup key."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"User not found with {field}: {value}")


class DuplicateEmailError(DomainError):
    """Raised when storage rejects a record because its email is taken."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User already exists with email: {email}")
