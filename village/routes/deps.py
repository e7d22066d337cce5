"""Shared endpoint dependencies: the calling user and the game's random source."""

import random

from fastapi import Header, Request

from village import auth
from village.models import User


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def current_user(authorization: str | None = Header(default=None)) -> User:
    """Resolve the ``Authorization: Bearer`` header to a user (401 otherwise)."""
    return auth.authenticate(bearer_token(authorization))


def game_rng(request: Request) -> random.Random:
    return request.app.state.rng
