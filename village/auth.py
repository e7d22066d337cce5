"""Accounts and bearer tokens.

Passwords are stored as salted PBKDF2-SHA256 hashes. Tokens are opaque
random strings kept in ``sessions.json`` with an expiry of
``token_ttl_hours`` (game setting); expired tokens are purged on login.
"""

import hashlib
import hmac
import logging
import re
import secrets
from datetime import datetime, timedelta
from typing import Any

from village import storage
from village.errors import Conflict, Unauthorized, ValidationError
from village.models import Session, User, utcnow

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000
MIN_PASSWORD_LENGTH = 6
_USERNAME_RE = re.compile(r"^[A-Za-z0-9_]{3,20}$")


def hash_password(password: str, salt: str) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt), PBKDF2_ITERATIONS
    )
    return digest.hex()


def verify_password(user: User, password: str) -> bool:
    return hmac.compare_digest(hash_password(password, user.salt), user.password_hash)


def register(username: str, password: str, role: str = "USER") -> User:
    """Create an account with the configured starting balance."""
    username = username.strip()
    if not _USERNAME_RE.match(username):
        raise ValidationError(
            "Username must be 3-20 characters: letters, digits or underscore"
        )
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    with storage.aggregate_lock(username):
        if storage.get_user(username) is not None:
            raise Conflict(f"Username '{username}' is already taken")
        salt = secrets.token_hex(16)
        user = User(
            username=username,
            password_hash=hash_password(password, salt),
            salt=salt,
            points=storage.get_config()["starting_bells"],
            role=role,
        )
        storage.save_user(user)
    logger.info("account registered user=%s", username)
    return user


def login(username: str, password: str, now: datetime | None = None) -> dict[str, Any]:
    """Check credentials and issue a token. Returns ``{token, user}``."""
    now = now or utcnow()
    username = username.strip()
    user = storage.get_user(username) if _USERNAME_RE.match(username) else None
    if user is None or not verify_password(user, password):
        logger.info("login failed user=%s", username)
        raise Unauthorized("Invalid username or password")
    ttl = timedelta(hours=storage.get_config()["token_ttl_hours"])
    session = Session(token=secrets.token_urlsafe(32), username=user.username, expires_at=now + ttl)
    with storage.aggregate_lock(":sessions"):
        storage.purge_sessions(now)
        storage.save_session(session)
    return {"token": session.token, "user": user.to_dto()}


def logout(token: str) -> None:
    with storage.aggregate_lock(":sessions"):
        storage.delete_session(token)


def authenticate(token: str | None, now: datetime | None = None) -> User:
    """Resolve a bearer token to its user, or raise Unauthorized."""
    if not token:
        raise Unauthorized("Missing bearer token")
    now = now or utcnow()
    session = storage.get_session(token)
    if session is None or session.expires_at <= now:
        raise Unauthorized("Invalid or expired token")
    user = storage.get_user(session.username)
    if user is None:
        raise Unauthorized("Invalid or expired token")
    return user
