from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from employee_management.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from employee_management.users.identity import Identity
from employee_management.users.service import AuthService

from fakes import InMemoryDatabase, InMemoryUsers


def _register(auth: AuthService, **overrides) -> int:
    fields = dict(username="ann", password="pw-123", first_name="Ann", last_name="Lee", email="ann@x.com")
    fields.update(overrides)
    return auth.register(**fields)


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def auth(db):
    return AuthService(InMemoryUsers(db))


def test_register_stores_salted_hash(auth, db):
    user_id = _register(auth)

    stored = db.users[user_id]
    assert stored.password_hash != "pw-123"
    assert check_password_hash(stored.password_hash, "pw-123")


@pytest.mark.parametrize("missing", ["username", "password", "first_name", "last_name", "email"])
def test_register_requires_every_field(auth, missing):
    with pytest.raises(ValidationError):
        _register(auth, **{missing: ""})


def test_register_same_username_conflicts_every_time(auth):
    _register(auth)

    for _ in range(2):
        with pytest.raises(ConflictError):
            _register(auth, email="other@x.com")


def test_register_same_email_conflicts_every_time(auth):
    _register(auth)

    for _ in range(2):
        with pytest.raises(ConflictError):
            _register(auth, username="someone-else")


def test_login_wrong_password_raises_for_known_and_unknown_users(auth):
    _register(auth)

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        auth.login("ann", "wrong")
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        auth.login("nobody", "wrong")


def test_login_requires_both_fields(auth):
    with pytest.raises(ValidationError):
        auth.login("ann", "")


def test_login_returns_identity_and_public_profile(auth):
    user_id = _register(auth)

    identity, profile = auth.login("ann", "pw-123")

    assert identity == Identity(user_id=user_id, username="ann")
    assert profile == {"id": user_id, "username": "ann", "firstName": "Ann", "lastName": "Lee", "email": "ann@x.com"}
    assert "password" not in profile


def test_login_with_corrupted_hash_is_rejected(auth, db):
    from dataclasses import replace

    user_id = _register(auth)
    db.users[user_id] = replace(db.users[user_id], password_hash="CHANGE_ME")

    with pytest.raises(AuthenticationError):
        auth.login("ann", "pw-123")


def test_profile_of_vanished_user_is_not_found(auth):
    with pytest.raises(NotFoundError):
        auth.get_profile(Identity(user_id=999, username="ghost"))


def test_identity_round_trips_through_session_mapping():
    identity = Identity(user_id=7, username="ann")

    assert Identity.from_session({"identity": identity.to_session()}) == identity
    assert Identity.from_session({}) is None
    assert Identity.from_session({"identity": {"user_id": "x"}}) is None
