"""Registration, email-code verification and login."""

from __future__ import annotations

import secrets

from errors import Conflict, InvalidCode, InvalidCredentials, NotFound, ValidationError
from models import Dataset, PendingVerification, User


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return _text(raw_email).lower()


def generate_code() -> str:
    """Return a uniformly random 6-digit numeric code."""
    return str(100000 + secrets.randbelow(900000))


def issue_code(dataset: Dataset, email: str) -> str:
    """Issue a fresh pending code for ``email``, replacing any earlier one."""

    code = generate_code()
    dataset.discard_pending(email)
    dataset.pending.append(PendingVerification(email=email, code=code))
    return code


def register(dataset: Dataset, nickname: str, email: str, password: str) -> tuple[User, str]:
    """Create a user and return it together with its verification code.

    The first user of an empty dataset becomes ``admin``; everybody after is
    a plain ``user``. The code is handed back to the caller instead of being
    mailed.
    """

    nickname = _text(nickname)
    email = normalize_email(email)
    if not nickname or not email or not isinstance(password, str) or not password:
        raise ValidationError("Missing fields.")

    if dataset.find_user_by_email(email) is not None:
        raise Conflict("Email already exists.")

    role = "admin" if not dataset.users else "user"
    user = User.create(nickname=nickname, email=email, password=password, role=role)
    dataset.users.append(user)

    code = issue_code(dataset, email)
    return user, code


def verify(dataset: Dataset, email: str, code: str) -> User:
    """Consume the pending code for ``email`` and mark the user verified."""

    email = normalize_email(email)
    code = str(code).strip() if code is not None else ""
    if not email or not code:
        raise ValidationError("Missing fields.")

    pending = dataset.find_pending(email)
    if pending is None or pending.code != code:
        raise InvalidCode()

    user = dataset.find_user_by_email(email)
    if user is None:
        raise NotFound("User not found.")

    user.mark_verified()
    dataset.discard_pending(email)
    return user


def login(dataset: Dataset, email: str, password: str) -> User:
    """Return the user matching the credentials.

    Unknown emails and wrong passwords raise the same ``InvalidCredentials``.
    """

    email = normalize_email(email)
    if not email or not isinstance(password, str) or not password:
        raise ValidationError("Missing fields.")

    user = dataset.find_user_by_email(email)
    if user is None or not user.check_password(password):
        raise InvalidCredentials()
    return user
