"""Pydantic request models for API endpoints.

Field names follow the game client's camelCase JSON.
"""

from pydantic import BaseModel, Field

from village.models import AnimalType, Personality


class Credentials(BaseModel):
    username: str
    password: str


class CreateVillager(BaseModel):
    villagerName: str
    animalType: AnimalType
    personality: Personality


class RenameVillager(BaseModel):
    villagerName: str


class PurchaseBody(BaseModel):
    furnitureId: int
    villagerId: int


class UpdateSettings(BaseModel):
    starting_bells: int | None = Field(default=None, ge=0)
    max_villagers: int | None = Field(default=None, ge=1)
    token_ttl_hours: int | None = Field(default=None, ge=1)
    needs_decay: bool | None = None
    furniture_resale_rate: float | None = Field(default=None, ge=0.0, le=1.0)
