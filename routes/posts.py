"""Posts blueprint with listing, admin CRUD and comments."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from services import posts as post_service
from storage import get_store
from utils.request_validation import optional_json_request, parse_json_request

posts_bp = Blueprint("posts", __name__)


@posts_bp.route("", methods=["GET"])
def list_posts():
    """Return all posts, newest first, with comments oldest first."""

    dataset = get_store().load()
    return jsonify(
        {"posts": [post.to_dict(ordered=True) for post in post_service.list_posts(dataset)]}
    )


@posts_bp.route("/<post_id>", methods=["GET"])
def get_post(post_id: str):
    dataset = get_store().load()
    post = post_service.get_post(dataset, post_id)
    return jsonify({"post": post.to_dict(ordered=True)})


@posts_bp.route("", methods=["POST"])
def create_post():
    """Create a post; the author must be a verified admin."""

    payload = parse_json_request(request, required_keys=("title", "content", "authorId"))

    with get_store().transaction() as dataset:
        post = post_service.create_post(
            dataset,
            payload.get("title"),
            payload.get("content"),
            payload.get("authorId"),
        )

    current_app.logger.info("Post %s created by %s", post.id, payload.get("authorId"))
    return jsonify({"ok": True, "post": post.to_dict()}), HTTPStatus.CREATED


@posts_bp.route("/<post_id>", methods=["PUT"])
def edit_post(post_id: str):
    """Update the title and/or content of a post."""

    payload = optional_json_request(request)

    with get_store().transaction() as dataset:
        post = post_service.edit_post(
            dataset,
            post_id,
            payload.get("authorId"),
            title=payload.get("title"),
            content=payload.get("content"),
        )

    current_app.logger.info("Post %s edited by %s", post.id, payload.get("authorId"))
    return jsonify({"ok": True, "post": post.to_dict(ordered=True)})


@posts_bp.route("/<post_id>", methods=["DELETE"])
def delete_post(post_id: str):
    payload = optional_json_request(request)

    with get_store().transaction() as dataset:
        post_service.delete_post(dataset, post_id, payload.get("authorId"))

    current_app.logger.info("Post %s deleted by %s", post_id, payload.get("authorId"))
    return jsonify({"ok": True})


@posts_bp.route("/<post_id>/comments", methods=["POST"])
def add_comment(post_id: str):
    """Append a comment; any verified user may comment."""

    payload = parse_json_request(request, required_keys=("authorId", "content"))

    with get_store().transaction() as dataset:
        comment = post_service.add_comment(
            dataset,
            post_id,
            payload.get("content"),
            payload.get("authorId"),
        )

    return jsonify({"ok": True, "comment": comment.to_dict()}), HTTPStatus.CREATED
