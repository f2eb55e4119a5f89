from __future__ import annotations

from enum import Enum


class UserStatus(str, Enum):
    """Account status stored alongside each directory entry."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
