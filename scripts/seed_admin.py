"""Seed a verified administrator directly into the data file.

Registration only makes the very first user an admin. This script is the
operator's way to add further admins; it bypasses the email code.
"""

from __future__ import annotations

import argparse

from config import Config
from models import User
from services.accounts import normalize_email
from storage import AbstractStore, JsonFileStore

ADMIN_NICKNAME = "admin"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "AdminPass123"


def seed_admin(store: AbstractStore, nickname: str, email: str, password: str) -> tuple[User, str]:
    """Create or promote ``email`` to a verified admin and return it with the action taken."""

    email = normalize_email(email)
    with store.transaction() as dataset:
        admin = dataset.find_user_by_email(email)
        if admin is None:
            admin = User.create(nickname=nickname, email=email, password=password, role="admin")
            dataset.users.append(admin)
            action = "created"
        else:
            admin.role = "admin"
            admin.set_password(password)
            action = "updated"
        admin.mark_verified()
        dataset.discard_pending(email)
    return admin, action


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data-file", default=Config.DATA_FILE)
    parser.add_argument("--nickname", default=ADMIN_NICKNAME)
    parser.add_argument("--email", default=ADMIN_EMAIL)
    parser.add_argument("--password", default=ADMIN_PASSWORD)
    args = parser.parse_args(argv)

    admin, action = seed_admin(
        JsonFileStore(args.data_file), args.nickname, args.email, args.password
    )
    print(f"Admin user {action}: {admin.email}")


if __name__ == "__main__":
    main()
