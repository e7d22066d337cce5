"""Museum (unique species per villager) and legacy catch history views."""

import logging
from typing import Any

from village import storage
from village.errors import NotFoundError

logger = logging.getLogger(__name__)


def _require_villager(username: str, villager_id: int) -> None:
    if storage.get_villager(username, villager_id) is None:
        raise NotFoundError(f"Villager {villager_id} not found")


def museum_view(username: str, villager_id: int, kind: str) -> list[dict[str, Any]]:
    """Species this villager has caught, each with first-catch info and timesCaught."""
    _require_villager(username, villager_id)
    species = {s.id: s for s in storage.list_species(kind)}
    entries = []
    for record in storage.get_museum(username):
        if record.villager_id != villager_id or record.kind != kind:
            continue
        known = species.get(record.species_id)
        if known is None:
            # Species dropped from the catalog; keep the record but skip display
            logger.warning("museum record for unknown %s id=%d", kind, record.species_id)
            continue
        dto = known.to_dto()
        dto["caughtAt"] = record.first_caught_at.isoformat()
        dto["lastCaughtAt"] = record.last_caught_at.isoformat()
        dto["location"] = record.location
        dto["timesCaught"] = record.times_caught
        entries.append(dto)
    entries.sort(key=lambda d: d["caughtAt"])
    return entries


def catch_history(username: str, villager_id: int, kind: str) -> list[dict[str, Any]]:
    """Every successful catch by this villager, newest first."""
    _require_villager(username, villager_id)
    species = {s.id: s for s in storage.list_species(kind)}
    entries = []
    for entry in reversed(storage.get_catch_log(username)):
        if entry.villager_id != villager_id or entry.kind != kind:
            continue
        known = species.get(entry.species_id)
        if known is None:
            continue
        dto = known.to_dto()
        dto["caughtAt"] = entry.caught_at.isoformat()
        dto["location"] = entry.location
        entries.append(dto)
    return entries
