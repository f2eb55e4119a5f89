from __future__ import annotations

from ..common.datetime_utils import now_local
from ..core.constants import CONTACT_FIELD_MAX_LENGTH, EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from ..core.enums import UserStatus
from .extensions import db


class UserRecord(db.Model):
    """ORM mapping for the ``users`` table."""

    __tablename__ = 'users'

    # BIGINT on MySQL; SQLite needs plain INTEGER for rowid autoincrement
    user_id = db.Column(db.BigInteger().with_variant(db.Integer, "sqlite"), primary_key=True, autoincrement=True)
    email = db.Column(db.String(EMAIL_MAX_LENGTH), unique=True, nullable=False)
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False, index=True)

    phone = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))
    address = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))
    city = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))
    state = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))
    zip_code = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))
    country = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))
    department = db.Column(db.String(CONTACT_FIELD_MAX_LENGTH))

    status = db.Column(
        db.Enum(UserStatus, name='user_status', native_enum=False, length=16),
        nullable=False,
        default=UserStatus.ACTIVE,
    )

    # created_at is written once; updated_at is refreshed by the repository on every save
    created_at = db.Column(db.DateTime, nullable=False, default=now_local)
    updated_at = db.Column(db.DateTime, nullable=False, default=now_local)
