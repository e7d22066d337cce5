"""Museum endpoints: unique species per villager with timesCaught."""

from fastapi import APIRouter, Depends

from village import museum
from village.models import User

from .deps import current_user

router = APIRouter(prefix="/museum")


@router.get("/villagers/{villager_id}/bugs")
async def museum_bugs(villager_id: int, user: User = Depends(current_user)):
    return museum.museum_view(user.username, villager_id, "bug")


@router.get("/villagers/{villager_id}/fish")
async def museum_fish(villager_id: int, user: User = Depends(current_user)):
    return museum.museum_view(user.username, villager_id, "fish")
