"""The whole persisted document: users, posts and pending codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .post import Post
from .user import PendingVerification, User


def email_key(email: object) -> str:
    """Comparison form of an email: stripped and lower-cased."""

    return email.strip().lower() if isinstance(email, str) else ""


@dataclass
class Dataset:
    """In-memory view of the data file.

    Storage order of every collection is append order; display ordering is
    derived when reading.
    """

    users: list[User] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)
    pending: list[PendingVerification] = field(default_factory=list)

    def find_user(self, user_id: str | None) -> User | None:
        if not user_id:
            return None
        return next((user for user in self.users if user.id == user_id), None)

    def find_user_by_email(self, email: str) -> User | None:
        """Case-insensitive lookup by email."""

        normalized = email_key(email)
        if not normalized:
            return None
        return next(
            (user for user in self.users if email_key(user.email) == normalized),
            None,
        )

    def find_post(self, post_id: str | None) -> Post | None:
        if not post_id:
            return None
        return next((post for post in self.posts if post.id == post_id), None)

    def find_pending(self, email: str) -> PendingVerification | None:
        """Case-insensitive lookup of the pending code for an email."""

        normalized = email_key(email)
        if not normalized:
            return None
        return next(
            (item for item in self.pending if email_key(item.email) == normalized),
            None,
        )

    def discard_pending(self, email: str) -> None:
        normalized = email_key(email)
        self.pending = [item for item in self.pending if email_key(item.email) != normalized]

    def to_dict(self) -> dict[str, Any]:
        return {
            "users": [user.to_dict() for user in self.users],
            "posts": [post.to_dict() for post in self.posts],
            "pending": [item.to_dict() for item in self.pending],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dataset":
        """Build a dataset, treating missing top-level keys as empty."""

        return cls(
            users=[User.from_dict(item) for item in data.get("users") or []],
            posts=[Post.from_dict(item) for item in data.get("posts") or []],
            pending=[PendingVerification.from_dict(item) for item in data.get("pending") or []],
        )
