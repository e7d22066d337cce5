"""Species catalogs, catch attempts and per-villager catch history."""

import random

from fastapi import APIRouter, Depends

from village import catching, museum, storage
from village.models import HABITATS, Habitat, User

from .deps import current_user, game_rng

router = APIRouter(prefix="/activities")


@router.get("/bugs")
async def list_bugs(user: User = Depends(current_user)):
    """Bug catalog."""
    return [s.to_dto() for s in storage.list_bugs()]


@router.get("/fish")
async def list_fish(user: User = Depends(current_user)):
    """Fish catalog."""
    return [s.to_dto() for s in storage.list_fish()]


@router.get("/habitats")
async def list_habitats(user: User = Depends(current_user)):
    """Habitats with how many bug and fish species live in each."""
    bugs = storage.list_bugs()
    fish = storage.list_fish()
    return [
        {
            "habitat": h,
            "bugs": sum(1 for s in bugs if s.habitat == h),
            "fish": sum(1 for s in fish if s.habitat == h),
        }
        for h in HABITATS
    ]


@router.post("/villagers/{villager_id}/catch-bug")
async def catch_bug(
    villager_id: int,
    habitat: Habitat,
    user: User = Depends(current_user),
    rng: random.Random = Depends(game_rng),
):
    """Send a villager bug catching in a habitat."""
    return catching.attempt_catch(user.username, villager_id, "bug", habitat, rng=rng).to_dto()


@router.post("/villagers/{villager_id}/catch-fish")
async def catch_fish(
    villager_id: int,
    habitat: Habitat,
    user: User = Depends(current_user),
    rng: random.Random = Depends(game_rng),
):
    """Send a villager fishing in a habitat."""
    return catching.attempt_catch(user.username, villager_id, "fish", habitat, rng=rng).to_dto()


@router.get("/villagers/{villager_id}/caught-bugs")
async def caught_bugs(villager_id: int, user: User = Depends(current_user)):
    """Every bug this villager caught, newest first."""
    return museum.catch_history(user.username, villager_id, "bug")


@router.get("/villagers/{villager_id}/caught-fish")
async def caught_fish(villager_id: int, user: User = Depends(current_user)):
    """Every fish this villager caught, newest first."""
    return museum.catch_history(user.username, villager_id, "fish")
