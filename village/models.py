"""Core domain models.

Every engine and storage function operates on these types. Pydantic is used
for validation and serialisation at every data boundary: stored JSON is
snake_case, wire DTOs (``to_dto``) are camelCase to match the game client.

Enum-like fields are closed ``Literal`` types so an unknown animal type,
personality, rarity or habitat is rejected when a record is parsed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, get_args

from pydantic import BaseModel, Field

AnimalType = Literal["WOLF", "CAT", "DOG", "EAGLE", "TIGER", "MOUSE"]
Personality = Literal["LAZY", "NORMAL", "PEPPY", "JOCK", "CRANKY", "SNOOTY", "SMUG"]
Rarity = Literal["common", "uncommon", "rare", "epic", "legendary"]
Habitat = Literal[
    "FOREST",
    "GRASSLAND",
    "DESERT",
    "RIVER",
    "OCEAN",
    "POND",
    "MOUNTAIN",
    "BEACH",
    "CAVE",
]
SpeciesKind = Literal["bug", "fish"]
ItemType = Literal["BUG", "FISH", "FURNITURE"]
Role = Literal["USER", "ADMIN"]
VillagerStatus = Literal["HAPPY", "NEUTRAL", "SAD", "SICK"]

ANIMAL_TYPES: tuple[str, ...] = get_args(AnimalType)
PERSONALITIES: tuple[str, ...] = get_args(Personality)
RARITIES: tuple[str, ...] = get_args(Rarity)
HABITATS: tuple[str, ...] = get_args(Habitat)

RARE_RARITIES = {"rare", "epic", "legendary"}

# Fields that are clamped to [0, 100] after every mutation
NEEDS_FIELDS = ("friendship_level", "happiness", "hunger", "energy", "health_level")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Villager(BaseModel):
    """A player-owned villager with needs and friendship state."""

    id: int
    name: str
    animal_type: AnimalType
    personality: Personality
    username: str
    friendship_level: int = 10
    happiness: int = 70
    hunger: int = 30  # higher = hungrier
    energy: int = 100
    health_level: int = 100
    last_sleep: datetime = Field(default_factory=utcnow)
    last_tick: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def sick(self) -> bool:
        return self.health_level < 30

    @property
    def status(self) -> VillagerStatus:
        if self.sick:
            return "SICK"
        if self.happiness >= 70:
            return "HAPPY"
        if self.happiness < 30:
            return "SAD"
        return "NEUTRAL"

    def to_dto(self) -> dict[str, Any]:
        return {
            "villagerId": self.id,
            "villagerName": self.name,
            "animalType": self.animal_type,
            "personality": self.personality,
            "friendshipLevel": self.friendship_level,
            "happiness": self.happiness,
            "hunger": self.hunger,
            "energy": self.energy,
            "healthLevel": self.health_level,
            "lastSleep": self.last_sleep.isoformat(),
            "username": self.username,
            "status": self.status,
            "sick": self.sick,
        }


class Species(BaseModel):
    """A bug or fish catalog entry. Read-only reference data."""

    id: int
    kind: SpeciesKind
    name: str
    description: str = ""
    rarity: Rarity
    value: int = Field(ge=0)
    habitat: Habitat
    catch_difficulty: float = Field(ge=0.0, le=1.0)

    def to_dto(self) -> dict[str, Any]:
        if self.kind == "bug":
            return {
                "bugId": self.id,
                "bugName": self.name,
                "bugDescription": self.description,
                "bugRarity": self.rarity,
                "bugValue": self.value,
                "bugHabitat": self.habitat,
                "catchDifficulty": self.catch_difficulty,
            }
        return {
            "fishId": self.id,
            "fishName": self.name,
            "fishDescription": self.description,
            "fishRarity": self.rarity,
            "fishValue": self.value,
            "habitat": self.habitat,
            "catchDifficulty": self.catch_difficulty,
        }


class Furniture(BaseModel):
    """A shop catalog entry."""

    id: int
    name: str
    description: str = ""
    price: int = Field(ge=0)
    category: str = ""
    size: str = "1x1"

    def to_dto(self) -> dict[str, Any]:
        return self.model_dump()


class CaughtRecord(BaseModel):
    """Museum entry: unique per (villager, kind, species)."""

    villager_id: int
    kind: SpeciesKind
    species_id: int
    location: Habitat
    first_caught_at: datetime
    last_caught_at: datetime
    times_caught: int = 1

    def key(self) -> tuple[int, str, int]:
        return (self.villager_id, self.kind, self.species_id)


class CatchLogEntry(BaseModel):
    """One successful catch, kept in an append-only history."""

    villager_id: int
    kind: SpeciesKind
    species_id: int
    location: Habitat
    caught_at: datetime


class InventoryItem(BaseModel):
    """A stack of caught creatures or a piece of owned furniture."""

    id: str  # "<TYPE>_<n>", e.g. "BUG_12"
    item_id: int
    item_type: ItemType
    item_name: str
    item_description: str = ""
    rarity: str = "common"
    value: int = Field(ge=0)  # Bells credited per unit sold
    quantity: int = Field(default=1, ge=1)
    habitat: str | None = None
    location: str | None = None
    villager_id: int
    caught_by: str = ""
    acquired_at: datetime = Field(default_factory=utcnow)
    category: str | None = None  # furniture only
    size: str | None = None  # furniture only

    def to_dto(self) -> dict[str, Any]:
        dto: dict[str, Any] = {
            "id": self.id,
            "itemId": self.item_id,
            "itemName": self.item_name,
            "itemDescription": self.item_description,
            "itemType": self.item_type,
            "rarity": self.rarity,
            "value": self.value,
            "habitat": self.habitat,
            "caughtAt": self.acquired_at.isoformat(),
            "caughtBy": self.caught_by,
            "location": self.location,
            "quantity": self.quantity,
            "villagerId": self.villager_id,
        }
        if self.item_type == "FURNITURE":
            dto["category"] = self.category
            dto["size"] = self.size
        return dto


class User(BaseModel):
    """Account record. ``points`` is the Bells balance."""

    username: str
    password_hash: str
    salt: str
    points: int = Field(default=0, ge=0)
    role: Role = "USER"
    created_at: datetime = Field(default_factory=utcnow)

    def to_dto(self) -> dict[str, Any]:
        return {"username": self.username, "role": self.role}

    def profile(self) -> dict[str, Any]:
        return {"username": self.username, "role": self.role, "points": self.points}


class Session(BaseModel):
    token: str
    username: str
    expires_at: datetime


class TalkResult(BaseModel):
    message: str
    friendship_change: int
    current_friendship: int

    def to_dto(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "friendshipChange": self.friendship_change,
            "currentFriendship": self.current_friendship,
        }


class ActionResult(BaseModel):
    message: str
    new_energy: int
    new_friendship: int

    def to_dto(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "newEnergy": self.new_energy,
            "newFriendship": self.new_friendship,
        }


class ActivityResult(BaseModel):
    """Outcome of a catch attempt."""

    success: bool
    message: str
    caught_item: Species | None = None
    experience_gained: int = 0
    friendship_gained: int = 0

    def to_dto(self) -> dict[str, Any]:
        dto: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
            "experienceGained": self.experience_gained,
            "friendshipGained": self.friendship_gained,
        }
        if self.caught_item is not None:
            dto["caughtItem"] = self.caught_item.to_dto()
        return dto
