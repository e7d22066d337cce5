"""Account endpoints: register, login, logout, profile."""

from fastapi import APIRouter, Depends, Header

from village import auth
from village.models import User

from .deps import bearer_token, current_user
from .models import Credentials

router = APIRouter(prefix="/v1/auth")


@router.post("/register", status_code=201)
def register(body: Credentials):
    """Create an account with the starting Bells balance."""
    user = auth.register(body.username, body.password)
    return user.to_dto()


@router.post("/login")
def login(body: Credentials):
    """Exchange credentials for a bearer token."""
    return auth.login(body.username, body.password)


@router.post("/logout")
async def logout(
    authorization: str | None = Header(default=None),
    user: User = Depends(current_user),
):
    """Revoke the token used for this request."""
    auth.logout(bearer_token(authorization))
    return {"ok": True}


@router.get("/me")
async def me(user: User = Depends(current_user)):
    """Profile and Bells balance of the caller."""
    return user.profile()
