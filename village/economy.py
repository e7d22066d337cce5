"""Bells economy: buying furniture and selling inventory.

Each operation runs under the owner's aggregate lock and checks everything
(item exists and is owned, villager is owned, balance covers the price)
before writing. The inventory file is written before the account, both
inside the lock, so no other request can observe one without the other.

Furniture resells for ``price * furniture_resale_rate`` (rounded down); that
amount is stored as the item's value when bought.
"""

import logging
from datetime import datetime
from typing import Any

from village import storage
from village.errors import InsufficientFunds, NotFoundError, Unauthorized
from village.inventory import new_item_id, stack_item
from village.models import InventoryItem, User, utcnow

logger = logging.getLogger(__name__)


def _require_user(username: str) -> User:
    user = storage.get_user(username)
    if user is None:
        raise Unauthorized("Unknown account")
    return user


def purchase(
    username: str, furniture_id: int, villager_id: int, now: datetime | None = None,
) -> dict[str, Any]:
    """Buy a piece of furniture for one of the caller's villagers."""
    now = now or utcnow()
    furniture = storage.get_furniture(furniture_id)
    if furniture is None:
        raise NotFoundError(f"Furniture {furniture_id} not found")

    with storage.aggregate_lock(username):
        user = _require_user(username)
        villager = storage.get_villager(username, villager_id)
        if villager is None:
            raise NotFoundError(f"Villager {villager_id} not found")
        if user.points < furniture.price:
            logger.info(
                "purchase rejected user=%s price=%d balance=%d",
                username, furniture.price, user.points,
            )
            raise InsufficientFunds(
                f"Not enough Bells: {furniture.name} costs {furniture.price}, "
                f"you have {user.points}"
            )
        rate = storage.get_config()["furniture_resale_rate"]
        items = storage.get_inventory(username)
        item = stack_item(items, InventoryItem(
            id=new_item_id("FURNITURE"),
            item_id=furniture.id,
            item_type="FURNITURE",
            item_name=furniture.name,
            item_description=furniture.description,
            value=int(furniture.price * rate),
            villager_id=villager.id,
            caught_by=villager.name,
            acquired_at=now,
            category=furniture.category,
            size=furniture.size,
        ))
        user.points -= furniture.price
        storage.save_inventory(username, items)
        storage.save_user(user)

    logger.info("purchase user=%s furniture=%d villager=%d", username, furniture_id, villager_id)
    return {
        "message": f"{furniture.name} purchased for {villager.name}!",
        "points": user.points,
        "item": item.to_dto(),
    }


def _sell(username: str, item_id: str, furniture: bool) -> InventoryItem:
    with storage.aggregate_lock(username):
        user = _require_user(username)
        items = storage.get_inventory(username)
        item = next((i for i in items if i.id == item_id), None)
        if item is None or (item.item_type == "FURNITURE") != furniture:
            raise NotFoundError(f"Item {item_id} not found")
        if item.quantity > 1:
            item.quantity -= 1
        else:
            items.remove(item)
        user.points += item.value
        storage.save_inventory(username, items)
        storage.save_user(user)
    logger.info("sell user=%s item=%s value=%d", username, item_id, item.value)
    return item


def sell_item(username: str, item_id: str) -> str:
    """Sell one unit of a caught bug or fish. Returns a message for the player."""
    item = _sell(username, item_id, furniture=False)
    return f"Sold {item.item_name} for {item.value} Bells"


def sell_furniture(username: str, item_id: str) -> str:
    """Sell one piece of owned furniture. Returns a message for the player."""
    item = _sell(username, item_id, furniture=True)
    return f"Sold {item.item_name} for {item.value} Bells"
