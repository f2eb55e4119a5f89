from __future__ import annotations

import logging
import re

from flask import Flask, Response, jsonify, request

from ..container import Container
from ..core.constants import API_PREFIX, HEALTH_MESSAGE
from ..core.exceptions import InvalidInputError, UserNotFoundError
from .model import User, UserRequest, UserResponse

logger = logging.getLogger("user_directory.users.controller")

ID_PATTERN = re.compile(r"-?[0-9]+")


def _as_json(user: User):
    return jsonify(UserResponse.from_user(user).to_dict())


def _as_json_list(users):
    return jsonify([UserResponse.from_user(u).to_dict() for u in users])


def _parse_id(raw: str) -> int:
    if not ID_PATTERN.fullmatch(raw):
        raise InvalidInputError("Invalid parameter type for 'id'")
    return int(raw)


def _required_arg(name: str) -> str:
    value = request.args.get(name)
    if value is None:
        raise InvalidInputError(f"Required parameter '{name}' is missing")
    return value


def register(app: Flask, container: Container) -> None:
    service = container.user_service

    @app.route(f"{API_PREFIX}/health", methods=["GET"], endpoint="health_check")
    def health_check():
        return Response(HEALTH_MESSAGE, status=200, mimetype="text/plain")

    @app.route(API_PREFIX, methods=["GET"], endpoint="list_or_lookup_users")
    def list_or_lookup_users():
        # ?email= selects a single user; no query lists everybody
        if "email" in request.args:
            email = request.args.get("email", "")
            logger.info("Received request to get user by email: %s", email)
            return _as_json(service.get_user_by_email(email))
        return _as_json_list(service.get_all_users())

    @app.route(f"{API_PREFIX}/email/<path:email>", methods=["GET"], endpoint="get_user_by_email_path")
    def get_user_by_email_path(email: str):
        logger.info("Received request to get user by email (path): %s", email)
        return _as_json(service.get_user_by_email(email))

    @app.route(f"{API_PREFIX}/<user_id>", methods=["GET"], endpoint="get_user_by_id")
    def get_user_by_id(user_id: str):
        user_id = _parse_id(user_id)
        return _as_json(service.get_user_by_id(user_id))

    @app.route(f"{API_PREFIX}/search", methods=["GET"], endpoint="search_users")
    def search_users():
        return _as_json_list(service.find_users_by_name(_required_arg("name")))

    @app.route(f"{API_PREFIX}/search/active", methods=["GET"], endpoint="search_active_users")
    def search_active_users():
        return _as_json_list(service.find_active_users_by_name(_required_arg("name")))

    @app.route(API_PREFIX, methods=["POST"], endpoint="create_user")
    def create_user():
        payload = UserRequest.from_json(request.get_json(silent=True))
        user = service.create_user(payload)
        return _as_json(user), 201

    @app.route(f"{API_PREFIX}/<user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: str):
        user_id = _parse_id(user_id)
        payload = UserRequest.from_json(request.get_json(silent=True))
        return _as_json(service.update_user(user_id, payload))

    @app.route(f"{API_PREFIX}/<user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: str):
        user_id = _parse_id(user_id)
        if not service.delete_user(user_id):
            raise UserNotFoundError("id", user_id)
        return jsonify({"message": "User deleted"})
