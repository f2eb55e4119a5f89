from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .extensions import db


@contextmanager
def session_scope() -> Iterator[Session]:
    """Yield the request-scoped session, commit on success, roll back on error."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def like_pattern(term: str) -> str:
    """Build a ``%term%`` LIKE pattern with wildcards in ``term`` escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
