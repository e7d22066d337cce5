"""Villager CRUD and care interaction endpoints."""

import random

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from village import interactions, villagers
from village.models import User

from .deps import current_user, game_rng
from .models import CreateVillager, RenameVillager

router = APIRouter(prefix="/villagers")


@router.get("")
async def list_villagers(user: User = Depends(current_user)):
    """List the caller's villagers."""
    return [v.to_dto() for v in villagers.list_villagers(user.username)]


@router.post("/create", status_code=201)
async def create_villager(body: CreateVillager, user: User = Depends(current_user)):
    """Create a villager with default needs."""
    villager = villagers.create_villager(
        user.username, body.villagerName, body.animalType, body.personality
    )
    return villager.to_dto()


@router.get("/{villager_id}")
async def get_villager(villager_id: int, user: User = Depends(current_user)):
    """Villager detail with up-to-date needs."""
    return villagers.get_villager(user.username, villager_id).to_dto()


@router.put("/{villager_id}/name")
async def rename_villager(
    villager_id: int, body: RenameVillager, user: User = Depends(current_user)
):
    """Rename a villager."""
    return villagers.rename_villager(user.username, villager_id, body.villagerName).to_dto()


@router.delete("/{villager_id}", response_class=PlainTextResponse)
async def release_villager(villager_id: int, user: User = Depends(current_user)):
    """Release a villager, deleting its museum records and inventory."""
    removed = villagers.release_villager(user.username, villager_id)
    return f"{removed.name} has left the village. Goodbye!"


# ── Interactions ─────────────────────────────────────────


@router.post("/{villager_id}/talk")
async def talk(
    villager_id: int,
    user: User = Depends(current_user),
    rng: random.Random = Depends(game_rng),
):
    """Chat with a villager."""
    return interactions.talk(user.username, villager_id, rng=rng).to_dto()


@router.post("/{villager_id}/give-gift")
async def give_gift(villager_id: int, user: User = Depends(current_user)):
    """Give a villager a gift."""
    return interactions.give_gift(user.username, villager_id).to_dto()


@router.post("/{villager_id}/play")
async def play(villager_id: int, user: User = Depends(current_user)):
    """Play with a villager (refused when too sick or too tired)."""
    return interactions.play(user.username, villager_id).to_dto()


@router.post("/{villager_id}/feed")
async def feed(villager_id: int, user: User = Depends(current_user)):
    """Feed a villager."""
    return interactions.feed(user.username, villager_id).to_dto()


@router.post("/{villager_id}/heal")
async def heal(villager_id: int, user: User = Depends(current_user)):
    """Heal a villager (refused when already very healthy)."""
    return interactions.heal(user.username, villager_id).to_dto()


@router.post("/{villager_id}/sleep")
async def sleep(villager_id: int, user: User = Depends(current_user)):
    """Put a villager to sleep to restore energy."""
    return interactions.sleep(user.username, villager_id).to_dto()
