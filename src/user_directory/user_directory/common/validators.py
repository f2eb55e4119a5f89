from __future__ import annotations

import re
from typing import Optional

from ..core.constants import NAME_MAX_LENGTH
from ..core.exceptions import InvalidEmailError, InvalidInputError

# local part, "@", domain labels, "." and a TLD of two or more letters
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


def is_valid_email(value: Optional[str]) -> bool:
    if value is None or not value.strip():
        return False
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def require_email(value: Optional[str]) -> str:
    """Return the trimmed email or raise :class:`InvalidEmailError`."""
    if not is_valid_email(value):
        raise InvalidEmailError(value)
    return value.strip()


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise InvalidInputError(f"{field_name} cannot be blank or null")
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise InvalidInputError(f"{field_name} must not exceed {max_len} characters")
    return value


def require_name_query(value: Optional[str]) -> str:
    """Validate a name search term and return it trimmed."""
    name = require_non_empty(value, "Name")
    return require_max_length(name, "Name", NAME_MAX_LENGTH)


def require_positive_id(value: Optional[int]) -> int:
    if value is None or isinstance(value, bool) or int(value) <= 0:
        raise InvalidInputError("User ID must be a positive number")
    return int(value)
