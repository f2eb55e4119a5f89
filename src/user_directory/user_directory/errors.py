"""Translation of failures into structured JSON error responses.

Services raise :class:`DomainError` subclasses; the handlers registered here
turn them (and any other exception escaping a view) into an
:class:`ErrorResponse` with the matching HTTP status.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict, List

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .common.datetime_utils import format_timestamp, now_local
from .core.constants import GENERIC_ERROR_MESSAGE
from .core.exceptions import (
    DomainError,
    DuplicateEmailError,
    InvalidEmailError,
    InvalidInputError,
    UserNotFoundError,
)

logger = logging.getLogger("user_directory.errors")

STATUS_BY_ERROR = {
    InvalidEmailError: HTTPStatus.BAD_REQUEST,
    InvalidInputError: HTTPStatus.BAD_REQUEST,
    UserNotFoundError: HTTPStatus.NOT_FOUND,
    DuplicateEmailError: HTTPStatus.CONFLICT,
}


@dataclass(frozen=True)
class ErrorResponse:
    status: int
    error: str
    message: str
    path: str
    errors: List[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=now_local)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "error": self.error,
            "message": self.message,
            "errors": list(self.errors),
            "path": self.path,
            "timestamp": format_timestamp(self.timestamp),
        }


def status_for(exc: BaseException) -> HTTPStatus:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return HTTPStatus.INTERNAL_SERVER_ERROR


def translate_exception(exc: BaseException, path: str) -> ErrorResponse:
    """Map any exception to the error body sent to the client."""
    if isinstance(exc, HTTPException):
        code = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
        return ErrorResponse(
            status=int(code),
            error=exc.name,
            message=exc.description or HTTPStatus(code).phrase,
            path=path,
        )

    status = status_for(exc)
    if status == HTTPStatus.INTERNAL_SERVER_ERROR:
        message = GENERIC_ERROR_MESSAGE
    else:
        message = str(exc)

    return ErrorResponse(
        status=int(status),
        error=status.phrase,
        message=message,
        path=path,
        errors=list(getattr(exc, "errors", None) or []),
    )


def register_error_handlers(app: Flask) -> None:
    def respond(exc: BaseException):
        body = translate_exception(exc, request.path)
        return jsonify(body.to_dict()), body.status

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        logger.warning("%s: %s", type(exc).__name__, exc)
        return respond(exc)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        logger.warning("HTTP %s on %s: %s", exc.code, request.path, exc.description)
        return respond(exc)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unexpected exception on %s", request.path)
        return respond(exc)
