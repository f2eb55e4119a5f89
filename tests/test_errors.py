from __future__ import annotations

from datetime import datetime

from werkzeug.exceptions import MethodNotAllowed

from src.user_directory.user_directory.core.exceptions import (
    DuplicateEmailError,
    InvalidEmailError,
    InvalidInputError,
    UserNotFoundError,
)
from src.user_directory.user_directory.errors import ErrorResponse, translate_exception


def test_invalid_email_maps_to_400():
    body = translate_exception(InvalidEmailError("bad"), "/api/v1/users")

    assert body.status == 400
    assert body.error == "Bad Request"
    assert body.message == "Invalid email format: bad"
    assert body.path == "/api/v1/users"


def test_invalid_input_keeps_every_detail():
    exc = InvalidInputError("Name is required", ["Name is required", "Email should be valid"])

    body = translate_exception(exc, "/api/v1/users")

    assert body.status == 400
    assert body.errors == ["Name is required", "Email should be valid"]


def test_not_found_and_conflict():
    assert translate_exception(UserNotFoundError("id", 5), "/x").status == 404
    assert translate_exception(UserNotFoundError("id", 5), "/x").message == "User not found with id: 5"
    assert translate_exception(DuplicateEmailError("a@b.com"), "/x").status == 409


def test_unexpected_errors_hide_details():
    body = translate_exception(RuntimeError("database password is hunter2"), "/x")

    assert body.status == 500
    assert body.error == "Internal Server Error"
    assert "hunter2" not in body.message


def test_http_exceptions_keep_their_status():
    body = translate_exception(MethodNotAllowed(), "/x")

    assert body.status == 405
    assert body.error == "Method Not Allowed"


def test_to_dict_formats_timestamp():
    body = ErrorResponse(status=404, error="Not Found", message="m", path="/p", timestamp=datetime(2026, 1, 2, 3, 4, 5))

    assert body.to_dict() == {
        "status": 404,
        "error": "Not Found",
        "message": "m",
        "errors": [],
        "path": "/p",
        "timestamp": "2026-01-02T03:04:05",
    }


def test_unhandled_exception_returns_500_json(app, client, monkeypatch):
    container = app.extensions["user_directory"]

    def boom():
        raise RuntimeError("boom")

    monkeypatch.setattr(container.users_repo, "list_all", boom)

    resp = client.get("/api/v1/users")

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "An unexpected error occurred. Please try again later."
