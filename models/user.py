"""User and pending verification records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from utils.identifiers import new_id


ROLES = ("admin", "user")


@dataclass
class User:
    """Represents a registered blog user."""

    id: str
    nickname: str
    email: str
    password_hash: str = ""
    role: str = "user"
    verified: bool = False

    @classmethod
    def create(cls, nickname: str, email: str, password: str, role: str = "user") -> "User":
        """Build a new unverified user with a fresh id and hashed password."""

        user = cls(id=new_id("u"), nickname=nickname, email=email, role=role)
        user.set_password(password)
        return user

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def mark_verified(self) -> None:
        self.verified = True

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_public_dict(self) -> dict[str, Any]:
        """Serialize the user without the password hash."""

        return {
            "id": self.id,
            "nickname": self.nickname,
            "email": self.email,
            "role": self.role,
            "verified": self.verified,
        }

    def to_dict(self) -> dict[str, Any]:
        data = self.to_public_dict()
        data["passwordHash"] = self.password_hash
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            nickname=data.get("nickname") or "",
            email=data.get("email") or "",
            password_hash=data.get("passwordHash", ""),
            role=data.get("role", "user"),
            verified=bool(data.get("verified", False)),
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"


@dataclass
class PendingVerification:
    """An issued, not yet consumed verification code for one email."""

    email: str
    code: str

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "code": self.code}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PendingVerification":
        return cls(email=data.get("email") or "", code=str(data.get("code", "")))
