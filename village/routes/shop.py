"""Furniture shop endpoints."""

from fastapi import APIRouter, Depends

from village import economy, storage
from village.models import User

from .deps import current_user
from .models import PurchaseBody

router = APIRouter(prefix="/shop")


@router.get("/furniture")
async def list_furniture(user: User = Depends(current_user)):
    """Furniture catalog."""
    return [f.to_dto() for f in storage.list_furniture()]


@router.post("/purchase")
async def purchase(body: PurchaseBody, user: User = Depends(current_user)):
    """Buy furniture for one of the caller's villagers."""
    return economy.purchase(user.username, body.furnitureId, body.villagerId)
