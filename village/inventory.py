"""Inventory stacking and the inventory summary served to the client."""

from typing import Any

from village import storage
from village.models import RARE_RARITIES, InventoryItem


def stack_item(items: list[InventoryItem], new: InventoryItem) -> InventoryItem:
    """Add ``new`` to ``items``, merging into an existing stack for the same
    villager, type, item id and unit value. Returns the stack that now holds it.

    Units bought or caught at a different value (resale rate or catalog
    change) start their own stack so each sells for what it was worth.
    """
    key = (new.villager_id, new.item_type, new.item_id, new.value)
    for item in items:
        if (item.villager_id, item.item_type, item.item_id, item.value) == key:
            item.quantity += new.quantity
            item.acquired_at = new.acquired_at
            return item
    items.append(new)
    return new


def new_item_id(item_type: str) -> str:
    return f"{item_type}_{storage.next_id('item')}"


def compute_stats(items: list[InventoryItem]) -> dict[str, int]:
    return {
        "totalItems": sum(i.quantity for i in items),
        "totalValue": sum(i.value * i.quantity for i in items),
        "uniqueSpecies": len({(i.item_type, i.item_id) for i in items}),
        "rareItems": sum(i.quantity for i in items if i.rarity.lower() in RARE_RARITIES),
    }


def inventory_view(username: str) -> dict[str, Any]:
    """Caught creatures (bugs and fish) with summary stats, newest first."""
    items = [i for i in storage.get_inventory(username) if i.item_type != "FURNITURE"]
    items.sort(key=_newest_first)
    return {"items": [i.to_dto() for i in items], "stats": compute_stats(items)}


def owned_furniture(username: str) -> list[dict[str, Any]]:
    items = [i for i in storage.get_inventory(username) if i.item_type == "FURNITURE"]
    items.sort(key=_newest_first)
    return [i.to_dto() for i in items]


def _newest_first(item: InventoryItem) -> float:
    return -item.acquired_at.timestamp()
