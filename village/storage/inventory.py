"""Inventory storage: caught creatures and owned furniture, one list per owner."""

from pathlib import Path

from village.models import InventoryItem

from .core import read_json, user_dir, write_json


def _inventory_path(username: str) -> Path:
    return user_dir(username) / "inventory.json"


def get_inventory(username: str) -> list[InventoryItem]:
    """Load an owner's inventory. Returns [] if missing."""
    return [InventoryItem.model_validate(i) for i in read_json(_inventory_path(username), [])]


def save_inventory(username: str, items: list[InventoryItem]) -> None:
    write_json(_inventory_path(username), [i.model_dump(mode="json") for i in items])


def get_item(username: str, item_id: str) -> InventoryItem | None:
    for item in get_inventory(username):
        if item.id == item_id:
            return item
    return None
