"""Dataset records and model exports."""

from .dataset import Dataset
from .post import Comment, Post
from .user import ROLES, PendingVerification, User

__all__ = [
    "ROLES",
    "Comment",
    "Dataset",
    "PendingVerification",
    "Post",
    "User",
]
