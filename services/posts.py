"""Post and comment operations."""

from __future__ import annotations

from errors import NotFound, ValidationError
from models import Comment, Dataset, Post

from .policy import require_admin, require_verified


def _clean(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _get_post_or_404(dataset: Dataset, post_id: str) -> Post:
    post = dataset.find_post(post_id)
    if post is None:
        raise NotFound("Post not found.")
    return post


def list_posts(dataset: Dataset) -> list[Post]:
    """Return posts newest first; posts sharing a timestamp keep reverse append order."""

    return sorted(reversed(dataset.posts), key=lambda post: post.created_at, reverse=True)


def get_post(dataset: Dataset, post_id: str) -> Post:
    return _get_post_or_404(dataset, post_id)


def create_post(dataset: Dataset, title: str, content: str, actor_id: str | None) -> Post:
    title = _clean(title)
    content = _clean(content)
    if not title or not content or not actor_id:
        raise ValidationError("Missing fields.")

    author = require_admin(dataset, actor_id)
    post = Post.create(title=title, content=content, author=author)
    dataset.posts.append(post)
    return post


def edit_post(
    dataset: Dataset,
    post_id: str,
    actor_id: str | None,
    title: str | None = None,
    content: str | None = None,
) -> Post:
    """Update the supplied fields of a post; omitted or empty ones are kept."""

    require_admin(dataset, actor_id)
    post = _get_post_or_404(dataset, post_id)
    post.update(title=_clean(title), content=_clean(content))
    return post


def delete_post(dataset: Dataset, post_id: str, actor_id: str | None) -> Post:
    """Remove a post together with its comments."""

    require_admin(dataset, actor_id)
    post = _get_post_or_404(dataset, post_id)
    dataset.posts = [item for item in dataset.posts if item.id != post.id]
    return post


def add_comment(dataset: Dataset, post_id: str, content: str, actor_id: str | None) -> Comment:
    content = _clean(content)
    if not content or not actor_id:
        raise ValidationError("Missing fields.")

    author = require_verified(dataset, actor_id)
    post = _get_post_or_404(dataset, post_id)
    return post.add_comment(content, author)
