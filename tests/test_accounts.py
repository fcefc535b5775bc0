"""Tests for registration, verification and login."""

from __future__ import annotations

import pytest

from errors import Conflict, InvalidCode, InvalidCredentials, ValidationError
from models import Dataset, User
from services import accounts


def test_first_user_is_admin_and_later_users_are_not(dataset):
    first, _ = accounts.register(dataset, "alice", "a@x.com", "pw")
    second, _ = accounts.register(dataset, "bob", "b@x.com", "pw")
    third, _ = accounts.register(dataset, "carol", "c@x.com", "pw")

    assert first.role == "admin"
    assert second.role == "user"
    assert third.role == "user"
    assert not any(user.verified for user in dataset.users)


def test_register_returns_six_digit_code(dataset):
    user, code = accounts.register(dataset, "alice", "a@x.com", "pw")

    assert len(code) == 6 and code.isdigit()
    assert dataset.find_pending(user.email).code == code


@pytest.mark.parametrize("email", ["a@x.com", "A@X.com", "  a@x.COM "])
def test_duplicate_email_is_rejected_case_insensitively(dataset, email):
    accounts.register(dataset, "alice", "a@x.com", "pw")

    with pytest.raises(Conflict):
        accounts.register(dataset, "alice2", email, "pw")

    assert len(dataset.users) == 1


@pytest.mark.parametrize(
    "nickname, email, password",
    [("", "a@x.com", "pw"), ("alice", "", "pw"), ("alice", "a@x.com", ""), (None, None, None)],
)
def test_register_requires_all_fields(dataset, nickname, email, password):
    with pytest.raises(ValidationError):
        accounts.register(dataset, nickname, email, password)

    assert dataset.users == []


def test_issue_code_replaces_previous_code(dataset, monkeypatch):
    codes = iter(["111111", "222222"])
    monkeypatch.setattr(accounts, "generate_code", lambda: next(codes))

    accounts.issue_code(dataset, "a@x.com")
    accounts.issue_code(dataset, "a@x.com")

    assert [item.code for item in dataset.pending] == ["222222"]


def test_verify_only_accepts_latest_code(dataset, monkeypatch):
    codes = iter(["111111", "222222"])
    monkeypatch.setattr(accounts, "generate_code", lambda: next(codes))
    user, _ = accounts.register(dataset, "alice", "a@x.com", "pw")
    accounts.issue_code(dataset, "a@x.com")

    with pytest.raises(InvalidCode):
        accounts.verify(dataset, "a@x.com", "111111")
    assert user.verified is False

    accounts.verify(dataset, "a@x.com", "222222")

    assert user.verified is True
    assert dataset.pending == []


def test_verify_code_is_single_use(dataset):
    _, code = accounts.register(dataset, "alice", "a@x.com", "pw")
    accounts.verify(dataset, "a@x.com", code)

    with pytest.raises(InvalidCode):
        accounts.verify(dataset, "a@x.com", code)


def test_verify_accepts_numeric_code(dataset):
    user, code = accounts.register(dataset, "alice", "a@x.com", "pw")

    accounts.verify(dataset, "a@x.com", int(code))

    assert user.verified is True


def test_verify_unknown_email_fails(dataset):
    with pytest.raises(InvalidCode):
        accounts.verify(dataset, "nobody@x.com", "123456")


def test_verify_requires_fields(dataset):
    with pytest.raises(ValidationError):
        accounts.verify(dataset, "a@x.com", "")


def test_login_returns_user(dataset):
    user, _ = accounts.register(dataset, "alice", "a@x.com", "pw")

    assert accounts.login(dataset, "A@x.com", "pw") is user


def test_login_failures_are_indistinguishable(dataset):
    accounts.register(dataset, "alice", "a@x.com", "pw")

    with pytest.raises(InvalidCredentials) as unknown:
        accounts.login(dataset, "nobody@x.com", "pw")
    with pytest.raises(InvalidCredentials) as wrong:
        accounts.login(dataset, "a@x.com", "nope")

    assert unknown.value.description == wrong.value.description
    assert unknown.value.code == wrong.value.code == 401


def _legacy_dataset() -> Dataset:
    """A document as written by the earlier server, which kept emails as typed."""

    user = User.create(nickname="alice", email="a@x.com", password="pw", role="admin")
    document = {
        "users": [dict(user.to_dict(), email="Alice@X.com")],
        "posts": [],
        "pending": [{"email": "Alice@X.com", "code": "123456"}],
    }
    return Dataset.from_dict(document)


@pytest.mark.parametrize("email", ["Alice@X.com", "alice@x.com", " ALICE@x.com "])
def test_verify_matches_mixed_case_stored_email(email):
    dataset = _legacy_dataset()

    user = accounts.verify(dataset, email, "123456")

    assert user.verified is True
    assert dataset.pending == []


def test_mixed_case_stored_email_blocks_duplicate_and_allows_login():
    dataset = _legacy_dataset()

    with pytest.raises(Conflict):
        accounts.register(dataset, "other", "alice@x.com", "pw")
    assert accounts.login(dataset, "alice@X.com", "pw").nickname == "alice"


def test_new_code_replaces_mixed_case_pending_record():
    dataset = _legacy_dataset()

    accounts.issue_code(dataset, "alice@x.com")

    assert len(dataset.pending) == 1
    assert dataset.pending[0].email == "alice@x.com"


def test_user_record_without_email_is_ignored():
    dataset = Dataset.from_dict({"users": [{"id": "u_1", "email": None}]})

    with pytest.raises(InvalidCredentials):
        accounts.login(dataset, "b@x.com", "pw")

    user, _ = accounts.register(dataset, "bob", "b@x.com", "pw")
    assert user.role == "user"
    assert dataset.users[0].email == ""
