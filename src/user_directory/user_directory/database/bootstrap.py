from __future__ import annotations

import logging
from typing import Iterable, List, Mapping

from flask import Flask
from sqlalchemy import inspect

from ..common.datetime_utils import now_local
from ..core.enums import UserStatus
from .extensions import db
from .models import UserRecord

logger = logging.getLogger("user_directory.database.bootstrap")

DEMO_USERS: tuple[Mapping[str, object], ...] = (
    {
        "email": "admin@example.com",
        "name": "Admin Demo",
        "department": "IT",
        "status": UserStatus.ACTIVE,
    },
    {
        "email": "jane.doe@example.com",
        "name": "Jane Doe",
        "phone": "+1-555-0100",
        "city": "Springfield",
        "country": "US",
        "department": "HR",
        "status": UserStatus.ACTIVE,
    },
    {
        "email": "john.smith@example.com",
        "name": "John Smith",
        "department": "Sales",
        "status": UserStatus.INACTIVE,
    },
)


def init_schema(app: Flask) -> None:
    """Create missing tables (idempotent)."""
    with app.app_context():
        db.create_all()


def list_tables(app: Flask) -> List[str]:
    with app.app_context():
        return sorted(inspect(db.engine).get_table_names())


def seed_demo_users(app: Flask, users: Iterable[Mapping[str, object]] = DEMO_USERS) -> int:
    """Insert or refresh demo users keyed by email. Returns how many were written."""
    written = 0
    with app.app_context():
        for data in users:
            email = str(data["email"])
            row = UserRecord.query.filter_by(email=email).first()
            now = now_local()
            if row is None:
                row = UserRecord(email=email, created_at=now)
                db.session.add(row)
            for key, value in data.items():
                setattr(row, key, value)
            row.updated_at = now
            written += 1
        db.session.commit()
    logger.info("Seeded %d demo users", written)
    return written
