"""Authorization rules for post and comment mutations.

Checks always run against the user record in the dataset loaded for the
current request, never against author snapshots stored on posts.
"""

from __future__ import annotations

from errors import Forbidden
from models import Dataset, User


def can_manage_posts(user: User | None) -> bool:
    return user is not None and user.is_admin and user.verified


def can_comment(user: User | None) -> bool:
    return user is not None and user.verified


def require_admin(dataset: Dataset, actor_id: str | None) -> User:
    """Return the actor if it is a verified admin, otherwise raise ``Forbidden``."""

    user = dataset.find_user(actor_id)
    if not can_manage_posts(user):
        raise Forbidden("Forbidden")
    return user


def require_verified(dataset: Dataset, actor_id: str | None) -> User:
    """Return the actor if it is verified, otherwise raise ``Forbidden``."""

    user = dataset.find_user(actor_id)
    if not can_comment(user):
        raise Forbidden("Forbidden")
    return user
