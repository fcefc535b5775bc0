"""Account blueprint providing register, verify and login endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from services import accounts
from storage import get_store
from utils.request_validation import parse_json_request

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Register a user and hand back its verification code."""
    payload = parse_json_request(request, required_keys=("nickname", "email", "password"))

    with get_store().transaction() as dataset:
        user, code = accounts.register(
            dataset,
            payload.get("nickname"),
            payload.get("email"),
            payload.get("password"),
        )

    current_app.logger.info("Registered user %s with role %s", user.id, user.role)
    return jsonify({"ok": True, "code": code}), HTTPStatus.CREATED


@auth_bp.route("/verify", methods=["POST"])
def verify() -> tuple:
    """Consume a pending verification code."""
    payload = parse_json_request(request, required_keys=("email", "code"))

    with get_store().transaction() as dataset:
        user = accounts.verify(dataset, payload.get("email"), payload.get("code"))

    current_app.logger.info("Verified user %s", user.id)
    return jsonify({"ok": True}), HTTPStatus.OK


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Check credentials and return the public user record."""
    payload = parse_json_request(request, required_keys=("email", "password"))

    dataset = get_store().load()
    user = accounts.login(dataset, payload.get("email"), payload.get("password"))

    return jsonify({"ok": True, "user": user.to_public_dict()}), HTTPStatus.OK
