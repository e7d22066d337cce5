"""Villager lifecycle: create, read (with decay), rename, release."""

import logging
import re
from datetime import datetime

from village import needs, storage
from village.errors import NotFoundError, ValidationError
from village.models import Villager, utcnow

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 30
_NAME_RE = re.compile(r"^[\w' .-]+$")


def clean_name(name: str) -> str:
    """Strip and validate a villager name."""
    cleaned = " ".join(name.split())
    if not cleaned:
        raise ValidationError("Villager name is required")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationError(f"Villager name must be at most {MAX_NAME_LENGTH} characters")
    if not _NAME_RE.match(cleaned):
        raise ValidationError("Villager name contains invalid characters")
    return cleaned


def _catch_up(villager: Villager, now: datetime, enabled: bool) -> None:
    if enabled:
        needs.decay(villager, now)
    else:
        needs.skip_decay(villager, now)


def load_for_update(username: str, villager_id: int, now: datetime) -> Villager:
    """Fetch an owned villager and bring its needs up to ``now``.

    Call with the owner's aggregate lock held; the caller persists the result.
    """
    villager = storage.get_villager(username, villager_id)
    if villager is None:
        raise NotFoundError(f"Villager {villager_id} not found")
    _catch_up(villager, now, storage.get_config()["needs_decay"])
    return villager


def get_villager(username: str, villager_id: int, now: datetime | None = None) -> Villager:
    now = now or utcnow()
    with storage.aggregate_lock(username):
        villager = load_for_update(username, villager_id, now)
        storage.save_villager(villager)
    return villager


def list_villagers(username: str, now: datetime | None = None) -> list[Villager]:
    now = now or utcnow()
    with storage.aggregate_lock(username):
        villagers = storage.get_villagers(username)
        enabled = storage.get_config()["needs_decay"]
        for villager in villagers:
            _catch_up(villager, now, enabled)
        storage.save_villagers(username, villagers)
    return villagers


def create_villager(
    username: str, name: str, animal_type: str, personality: str,
    now: datetime | None = None,
) -> Villager:
    """Create a villager with default needs for ``username``."""
    now = now or utcnow()
    cleaned = clean_name(name)
    with storage.aggregate_lock(username):
        existing = storage.get_villagers(username)
        limit = storage.get_config()["max_villagers"]
        if len(existing) >= limit:
            raise ValidationError(f"You can have at most {limit} villagers")
        if any(v.name.lower() == cleaned.lower() for v in existing):
            raise ValidationError(f"You already have a villager named {cleaned}")
        villager = Villager(
            id=storage.next_id("villager"),
            name=cleaned,
            animal_type=animal_type,
            personality=personality,
            username=username,
            last_sleep=now,
            last_tick=now,
            created_at=now,
        )
        existing.append(villager)
        storage.save_villagers(username, existing)
    logger.info("villager created id=%d owner=%s", villager.id, username)
    return villager


def rename_villager(username: str, villager_id: int, name: str) -> Villager:
    cleaned = clean_name(name)
    with storage.aggregate_lock(username):
        villagers = storage.get_villagers(username)
        found = next((v for v in villagers if v.id == villager_id), None)
        if found is None:
            raise NotFoundError(f"Villager {villager_id} not found")
        if any(v.id != villager_id and v.name.lower() == cleaned.lower() for v in villagers):
            raise ValidationError(f"You already have a villager named {cleaned}")
        found.name = cleaned
        storage.save_villagers(username, villagers)
    return found


def release_villager(username: str, villager_id: int) -> Villager:
    """Delete a villager with its museum records, catch log and inventory."""
    with storage.aggregate_lock(username):
        removed = storage.delete_villager(username, villager_id)
    if removed is None:
        raise NotFoundError(f"Villager {villager_id} not found")
    logger.info("villager released id=%d owner=%s", villager_id, username)
    return removed
