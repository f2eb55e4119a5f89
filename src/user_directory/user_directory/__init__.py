"""User Directory package.

Organized by feature module (users) with a thin Flask controller layer on top
of service and repository layers. Persistence goes through Flask-SQLAlchemy.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
