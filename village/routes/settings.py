"""Health check and game settings endpoints."""

from fastapi import APIRouter, Depends

from village import storage
from village.errors import Forbidden
from village.models import User

from .deps import current_user
from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(user: User = Depends(current_user)):
    """Current game settings."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings, user: User = Depends(current_user)):
    """Update game settings (partial merge). Admins only."""
    if user.role != "ADMIN":
        raise Forbidden("Only admins can change game settings")
    return storage.update_config(body.model_dump(exclude_none=True))
