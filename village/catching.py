"""Catch resolution — bugs and fish.

Energy (checked before anything else; a failed check changes nothing):
  bug   needs 10, costs 10 on success / 5 on failure
  fish  needs 15, costs 15 on success / 8 on failure

Candidate: a species of the requested kind living in the habitat, drawn with
weight ``1.05 - catch_difficulty`` so hard species show up less often.

Success chance for the drawn species:
  0.95 - 0.85 * catch_difficulty     (0.95 at 0.0, 0.10 at 1.0)

Rewards on success, by rarity:
  rarity     experience  friendship
  common         10          1
  uncommon       25          2
  rare           50          3
  epic           80          4
  legendary     120          5

Experience is credited to the owner's Bells balance. The catch also stacks
an inventory item, creates or increments the museum record for the
(villager, species) pair, and appends to the catch log.

All randomness comes from the ``random.Random`` passed in, so a seeded
generator replays the same outcomes.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime

from village import needs, storage
from village.errors import InsufficientEnergy, NoSpeciesAvailable, ValidationError
from village.inventory import new_item_id, stack_item
from village.models import (
    HABITATS,
    ActivityResult,
    CatchLogEntry,
    CaughtRecord,
    InventoryItem,
    Species,
    Villager,
    utcnow,
)
from village.villagers import load_for_update

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityRules:
    min_energy: int
    success_cost: int
    failure_cost: int


ACTIVITY_RULES = {
    "bug": ActivityRules(min_energy=10, success_cost=10, failure_cost=5),
    "fish": ActivityRules(min_energy=15, success_cost=15, failure_cost=8),
}

RARITY_EXPERIENCE = {"common": 10, "uncommon": 25, "rare": 50, "epic": 80, "legendary": 120}
RARITY_FRIENDSHIP = {"common": 1, "uncommon": 2, "rare": 3, "epic": 4, "legendary": 5}

CATCH_HAPPINESS = 3
WEIGHT_FLOOR = 1.05

SUCCESS_MESSAGES = {
    "bug": "{villager} caught a {species}!",
    "fish": "{villager} reeled in a {species}!",
}
FAILURE_MESSAGES = {
    "bug": [
        "The {species} flew away just in time...",
        "{villager} swung the net and missed the {species}.",
    ],
    "fish": [
        "The {species} slipped off the hook...",
        "The line went slack. The {species} got away!",
    ],
}


def success_chance(difficulty: float) -> float:
    """Probability of landing a species of the given difficulty (clamped to 0..1)."""
    difficulty = max(0.0, min(1.0, difficulty))
    return 0.95 - 0.85 * difficulty


def resolve(seed: int | float | str | random.Random, difficulty: float) -> bool:
    """Decide one catch. Pure given the seed: the same seed always gives the same answer.

    ``seed`` may be a seed value or an existing generator to draw from.
    """
    rng = seed if isinstance(seed, random.Random) else random.Random(seed)
    return rng.random() < success_chance(difficulty)


def pick_candidate(pool: list[Species], rng: random.Random) -> Species:
    weights = [WEIGHT_FLOOR - s.catch_difficulty for s in pool]
    return rng.choices(pool, weights=weights, k=1)[0]


def candidates(kind: str, habitat: str) -> list[Species]:
    return [s for s in storage.list_species(kind) if s.habitat == habitat]


def attempt_catch(
    username: str,
    villager_id: int,
    kind: str,
    habitat: str,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> ActivityResult:
    """Send a villager out to catch a bug or fish in ``habitat``."""
    if kind not in ACTIVITY_RULES:
        raise ValidationError(f"Unknown activity: {kind}")
    if habitat not in HABITATS:
        raise ValidationError(f"Unknown habitat: {habitat}")
    rules = ACTIVITY_RULES[kind]
    rng = rng or random.Random()
    now = now or utcnow()

    with storage.aggregate_lock(username):
        villager = load_for_update(username, villager_id, now)
        if villager.energy < rules.min_energy:
            logger.info(
                "catch rejected villager=%d kind=%s energy=%d", villager.id, kind, villager.energy
            )
            raise InsufficientEnergy(
                f"{villager.name} is too tired to go {'fishing' if kind == 'fish' else 'bug catching'}"
                f" (needs {rules.min_energy} energy, has {villager.energy})"
            )
        pool = candidates(kind, habitat)
        if not pool:
            raise NoSpeciesAvailable(f"No {'fish' if kind == 'fish' else 'bugs'} live in {habitat}")

        species = pick_candidate(pool, rng)
        if resolve(rng, species.catch_difficulty):
            result = _reward(username, villager, species, rules, now)
        else:
            needs.apply(villager, energy=-rules.failure_cost)
            storage.save_villager(villager)
            message = rng.choice(FAILURE_MESSAGES[kind])
            result = ActivityResult(
                success=False,
                message=message.format(villager=villager.name, species=species.name),
            )

    logger.debug(
        "catch villager=%d kind=%s habitat=%s species=%s success=%s",
        villager_id, kind, habitat, species.name, result.success,
    )
    return result


def _reward(
    username: str, villager: Villager, species: Species, rules: ActivityRules, now: datetime,
) -> ActivityResult:
    experience = RARITY_EXPERIENCE[species.rarity]
    friendship_before = villager.friendship_level
    needs.apply(
        villager,
        energy=-rules.success_cost,
        happiness=CATCH_HAPPINESS,
        friendship_level=RARITY_FRIENDSHIP[species.rarity],
    )
    friendship_gained = villager.friendship_level - friendship_before

    items = storage.get_inventory(username)
    stack_item(items, InventoryItem(
        id=new_item_id(species.kind.upper()),
        item_id=species.id,
        item_type=species.kind.upper(),
        item_name=species.name,
        item_description=species.description,
        rarity=species.rarity,
        value=species.value,
        habitat=species.habitat,
        location=species.habitat,
        villager_id=villager.id,
        caught_by=villager.name,
        acquired_at=now,
    ))

    records = storage.get_museum(username)
    key = (villager.id, species.kind, species.id)
    record = next((r for r in records if r.key() == key), None)
    if record is None:
        records.append(CaughtRecord(
            villager_id=villager.id,
            kind=species.kind,
            species_id=species.id,
            location=species.habitat,
            first_caught_at=now,
            last_caught_at=now,
        ))
    else:
        record.times_caught += 1
        record.last_caught_at = now

    user = storage.get_user(username)
    if user is not None:
        user.points += experience

    storage.save_inventory(username, items)
    storage.save_museum(username, records)
    storage.append_catches(username, [CatchLogEntry(
        villager_id=villager.id,
        kind=species.kind,
        species_id=species.id,
        location=species.habitat,
        caught_at=now,
    )])
    storage.save_villager(villager)
    if user is not None:
        storage.save_user(user)

    message = SUCCESS_MESSAGES[species.kind].format(villager=villager.name, species=species.name)
    return ActivityResult(
        success=True,
        message=message,
        caught_item=species,
        experience_gained=experience,
        friendship_gained=friendship_gained,
    )
