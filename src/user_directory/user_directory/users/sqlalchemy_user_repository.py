from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from ..common.datetime_utils import now_local
from ..core.constants import MAX_USER_ID
from ..core.enums import UserStatus
from ..core.exceptions import DuplicateEmailError
from ..database.extensions import db
from ..database.models import UserRecord
from ..database.session import like_pattern, session_scope
from .model import User, UserRequest
from .repository import UserRepository

MUTABLE_FIELDS = (
    "email",
    "name",
    "status",
    "phone",
    "address",
    "city",
    "state",
    "zip_code",
    "country",
    "department",
)


def _to_user(row: UserRecord) -> User:
    return User(
        user_id=int(row.user_id),
        email=row.email,
        name=row.name,
        status=UserStatus(row.status),
        phone=row.phone,
        address=row.address,
        city=row.city,
        state=row.state,
        zip_code=row.zip_code,
        country=row.country,
        department=row.department,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply_request(row: UserRecord, request: UserRequest) -> None:
    for field in MUTABLE_FIELDS:
        setattr(row, field, getattr(request, field))
    # stored lower-cased so the unique constraint is case-insensitive too
    row.email = request.email.strip().lower()


def _in_id_range(user_id: int) -> bool:
    return 0 < user_id <= MAX_USER_ID


class SQLAlchemyUserRepository(UserRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        if not _in_id_range(user_id):
            return None
        row = db.session.get(UserRecord, user_id)
        if not row:
            return None
        return _to_user(row)

    def get_by_email_ignore_case(self, email: str) -> Optional[User]:
        row = UserRecord.query.filter(func.lower(UserRecord.email) == email.lower()).first()
        if not row:
            return None
        return _to_user(row)

    def find_by_name_containing(self, name: str) -> Sequence[User]:
        rows = (
            UserRecord.query
            .filter(UserRecord.name.ilike(like_pattern(name), escape="\\"))
            .order_by(UserRecord.user_id)
            .all()
        )
        return [_to_user(r) for r in rows]

    def find_active_by_name_containing(self, name: str) -> Sequence[User]:
        rows = (
            UserRecord.query
            .filter(UserRecord.name.ilike(like_pattern(name), escape="\\"))
            .filter(UserRecord.status == UserStatus.ACTIVE)
            .order_by(UserRecord.user_id)
            .all()
        )
        return [_to_user(r) for r in rows]

    def list_all(self) -> Sequence[User]:
        rows = UserRecord.query.order_by(UserRecord.user_id).all()
        return [_to_user(r) for r in rows]

    def create_user(self, request: UserRequest) -> User:
        now = now_local()
        row = UserRecord(created_at=now, updated_at=now)
        _apply_request(row, request)
        try:
            with session_scope() as session:
                session.add(row)
        except IntegrityError as e:
            raise DuplicateEmailError(request.email) from e
        return _to_user(row)

    def update_user(self, user_id: int, request: UserRequest) -> Optional[User]:
        if not _in_id_range(user_id):
            return None
        row = db.session.get(UserRecord, user_id)
        if not row:
            return None
        try:
            with session_scope():
                _apply_request(row, request)
                row.updated_at = now_local()
        except IntegrityError as e:
            raise DuplicateEmailError(request.email) from e
        return _to_user(row)

    def exists_by_id(self, user_id: int) -> bool:
        if not _in_id_range(user_id):
            return False
        return db.session.get(UserRecord, user_id) is not None

    def delete_by_id(self, user_id: int) -> bool:
        if not _in_id_range(user_id):
            return False
        with session_scope():
            deleted = UserRecord.query.filter(UserRecord.user_id == user_id).delete()
        return deleted > 0
