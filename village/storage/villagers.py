"""Villager storage (one list per owner)."""

from pathlib import Path

from village.models import Villager

from .core import read_json, user_dir, write_json


def _villagers_path(username: str) -> Path:
    return user_dir(username) / "villagers.json"


def get_villagers(username: str) -> list[Villager]:
    """Load an owner's villagers. Returns [] if missing."""
    return [Villager.model_validate(v) for v in read_json(_villagers_path(username), [])]


def save_villagers(username: str, villagers: list[Villager]) -> None:
    write_json(_villagers_path(username), [v.model_dump(mode="json") for v in villagers])


def get_villager(username: str, villager_id: int) -> Villager | None:
    """Find one villager owned by ``username``. Returns None if absent or not theirs."""
    for villager in get_villagers(username):
        if villager.id == villager_id:
            return villager
    return None


def save_villager(villager: Villager) -> None:
    """Upsert a villager by id in its owner's list."""
    villagers = get_villagers(villager.username)
    for i, v in enumerate(villagers):
        if v.id == villager.id:
            villagers[i] = villager
            break
    else:
        villagers.append(villager)
    save_villagers(villager.username, villagers)


def delete_villager(username: str, villager_id: int) -> Villager | None:
    """Remove a villager along with its museum records, catch log and inventory.

    Returns the removed villager, or None if it was not found.
    """
    from .inventory import get_inventory, save_inventory
    from .museum import get_catch_log, get_museum, save_catch_log, save_museum

    villagers = get_villagers(username)
    removed = next((v for v in villagers if v.id == villager_id), None)
    if removed is None:
        return None
    save_inventory(username, [i for i in get_inventory(username) if i.villager_id != villager_id])
    save_museum(username, [r for r in get_museum(username) if r.villager_id != villager_id])
    save_catch_log(username, [e for e in get_catch_log(username) if e.villager_id != villager_id])
    save_villagers(username, [v for v in villagers if v.id != villager_id])
    return removed
