"""Post and comment records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from utils.identifiers import new_id, utc_timestamp

from .user import User


@dataclass(frozen=True)
class Comment:
    """A comment on a post. Comments are never edited once created."""

    id: str
    author: str
    author_role: str
    content: str
    created_at: str

    @classmethod
    def create(cls, content: str, author: User) -> "Comment":
        return cls(
            id=new_id("c"),
            author=author.nickname,
            author_role=author.role,
            content=content,
            created_at=utc_timestamp(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "authorRole": self.author_role,
            "content": self.content,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Comment":
        return cls(
            id=data["id"],
            author=data.get("author", ""),
            author_role=data.get("authorRole", "user"),
            content=data.get("content", ""),
            created_at=data.get("createdAt", ""),
        )


@dataclass
class Post:
    """An official project post written by an admin.

    ``author`` and ``author_role`` are a snapshot of the writer at creation
    time; they do not follow later changes to the user record.
    """

    id: str
    title: str
    content: str
    author: str
    author_role: str
    created_at: str
    comments: list[Comment] = field(default_factory=list)

    @classmethod
    def create(cls, title: str, content: str, author: User) -> "Post":
        return cls(
            id=new_id("p"),
            title=title,
            content=content,
            author=author.nickname,
            author_role=author.role,
            created_at=utc_timestamp(),
        )

    def update(self, title: str | None = None, content: str | None = None) -> None:
        """Apply a partial update; empty values leave the field unchanged."""

        if title:
            self.title = title
        if content:
            self.content = content

    def add_comment(self, content: str, author: User) -> Comment:
        comment = Comment.create(content, author)
        self.comments.append(comment)
        return comment

    def sorted_comments(self) -> list[Comment]:
        """Return comments oldest first."""

        return sorted(self.comments, key=lambda comment: comment.created_at)

    def to_dict(self, ordered: bool = False) -> dict[str, Any]:
        """Serialize the post.

        With ``ordered`` the comments are emitted oldest first instead of in
        storage order.
        """

        comments = self.sorted_comments() if ordered else self.comments
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "authorRole": self.author_role,
            "createdAt": self.created_at,
            "comments": [comment.to_dict() for comment in comments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Post":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            content=data.get("content", ""),
            author=data.get("author", ""),
            author_role=data.get("authorRole", "admin"),
            created_at=data.get("createdAt", ""),
            comments=[Comment.from_dict(item) for item in data.get("comments") or []],
        )
