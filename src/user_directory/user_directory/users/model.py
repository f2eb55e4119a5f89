from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ..common.datetime_utils import format_timestamp
from ..common.validators import is_valid_email
from ..core.constants import CONTACT_FIELD_MAX_LENGTH, EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from ..core.enums import UserStatus
from ..core.exceptions import InvalidInputError

# attribute name -> JSON key
CONTACT_FIELDS = {
    "phone": "phone",
    "address": "address",
    "city": "city",
    "state": "state",
    "zip_code": "zipCode",
    "country": "country",
    "department": "department",
}


@dataclass(frozen=True)
class User:
    """Domain entity: one directory entry.

    Note: Plain data object, it holds no database access code. The storage
    layer owns persisted rows; services only pass around request-scoped copies.
    """

    user_id: int
    email: str
    name: str
    status: UserStatus = UserStatus.ACTIVE
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    department: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class UserRequest:
    """Payload for creating a user or replacing all of its mutable fields."""

    name: str
    email: str
    status: UserStatus = UserStatus.ACTIVE
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    department: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Any) -> "UserRequest":
        """Build a request from a decoded JSON body.

        Every field is checked before raising, so the resulting
        :class:`InvalidInputError` lists all problems at once.
        """
        if not isinstance(payload, Mapping):
            raise InvalidInputError("Request body must be a JSON object")

        errors: List[str] = []

        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append("Name is required")
        elif len(name.strip()) > NAME_MAX_LENGTH:
            errors.append(f"Name must not exceed {NAME_MAX_LENGTH} characters")

        email = payload.get("email")
        if not isinstance(email, str) or not email.strip():
            errors.append("Email is required")
        elif len(email.strip()) > EMAIL_MAX_LENGTH or not is_valid_email(email):
            errors.append("Email should be valid")

        status = UserStatus.ACTIVE
        raw_status = payload.get("status")
        if raw_status is not None:
            try:
                status = UserStatus(str(raw_status).upper())
            except ValueError:
                allowed = ", ".join(s.value for s in UserStatus)
                errors.append(f"Status must be one of {allowed}")

        contact: Dict[str, Optional[str]] = {}
        for attr, key in CONTACT_FIELDS.items():
            value = payload.get(key)
            if value is None:
                contact[attr] = None
            elif not isinstance(value, str):
                errors.append(f"{key} must be a string")
            elif len(value) > CONTACT_FIELD_MAX_LENGTH:
                errors.append(f"{key} must not exceed {CONTACT_FIELD_MAX_LENGTH} characters")
            else:
                contact[attr] = value.strip() or None

        if errors:
            raise InvalidInputError(errors[0], errors)

        return cls(name=name.strip(), email=email.strip(), status=status, **contact)


@dataclass(frozen=True)
class UserResponse:
    """Read-model returned to API clients (never exposes storage internals)."""

    id: int
    email: str
    name: str
    status: str
    phone: Optional[str]
    address: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip_code: Optional[str]
    country: Optional[str]
    department: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.user_id,
            email=user.email,
            name=user.name,
            status=user.status.value,
            phone=user.phone,
            address=user.address,
            city=user.city,
            state=user.state,
            zip_code=user.zip_code,
            country=user.country,
            department=user.department,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zipCode": self.zip_code,
            "country": self.country,
            "department": self.department,
            "status": self.status,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }
