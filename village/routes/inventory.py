"""Inventory listing and selling endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from village import economy, inventory
from village.models import User

from .deps import current_user

router = APIRouter(prefix="/inventory")


@router.get("")
async def get_inventory(user: User = Depends(current_user)):
    """Caught bugs and fish with summary stats."""
    return inventory.inventory_view(user.username)


@router.get("/furniture")
async def get_furniture(user: User = Depends(current_user)):
    """Owned furniture."""
    return inventory.owned_furniture(user.username)


@router.delete("/item/{item_id}", response_class=PlainTextResponse)
async def sell_item(item_id: str, user: User = Depends(current_user)):
    """Sell one unit of a caught bug or fish."""
    return economy.sell_item(user.username, item_id)


@router.delete("/furniture/{item_id}", response_class=PlainTextResponse)
async def sell_furniture(item_id: str, user: User = Depends(current_user)):
    """Sell one piece of owned furniture."""
    return economy.sell_furniture(user.username, item_id)
