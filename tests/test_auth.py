"""Tests for registration, login and token checks."""

from datetime import timedelta

import pytest

from village import auth, storage
from village.errors import Conflict, Unauthorized, ValidationError
from village.models import utcnow


def test_register_starts_with_bells():
    user = auth.register("alice", "password1")
    assert user.points == 1000
    assert user.role == "USER"
    assert user.password_hash != "password1"
    assert storage.get_user("alice") == user


def test_register_uses_starting_bells_setting():
    storage.update_config({"starting_bells": 250})
    assert auth.register("bob", "password1").points == 250


def test_register_duplicate():
    auth.register("alice", "password1")
    with pytest.raises(Conflict):
        auth.register("alice", "other-pass")


@pytest.mark.parametrize("username", ["", "ab", "bad name", "../etc", "x" * 21])
def test_register_invalid_username(username):
    with pytest.raises(ValidationError):
        auth.register(username, "password1")


def test_register_short_password():
    with pytest.raises(ValidationError):
        auth.register("alice", "123")


def test_login_returns_token_and_user():
    auth.register("alice", "password1")
    result = auth.login("alice", "password1")
    assert result["user"] == {"username": "alice", "role": "USER"}
    assert auth.authenticate(result["token"]).username == "alice"


def test_login_wrong_password():
    auth.register("alice", "password1")
    with pytest.raises(Unauthorized):
        auth.login("alice", "wrong-pass")


def test_login_unknown_user():
    with pytest.raises(Unauthorized):
        auth.login("nobody", "password1")


def test_authenticate_missing_token():
    with pytest.raises(Unauthorized):
        auth.authenticate(None)


def test_authenticate_expired_token():
    auth.register("alice", "password1")
    token = auth.login("alice", "password1")["token"]
    with pytest.raises(Unauthorized):
        auth.authenticate(token, now=utcnow() + timedelta(hours=25))


def test_logout_revokes_token():
    auth.register("alice", "password1")
    token = auth.login("alice", "password1")["token"]
    auth.logout(token)
    with pytest.raises(Unauthorized):
        auth.authenticate(token)


def test_login_purges_expired_sessions():
    auth.register("alice", "password1")
    auth.login("alice", "password1")
    auth.login("alice", "password1", now=utcnow() + timedelta(days=2))
    assert len(storage.get_sessions()) == 1
