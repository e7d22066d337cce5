"""Villager needs — clamping, passive decay, and per-action deltas.

Fields (all ints, clamped to 0..100 after every change):
  friendship_level, happiness, hunger (higher = hungrier), energy, health_level

Passive decay (one tick per whole hour since last_tick, at most 48 ticks):
  hunger +4, energy -2, happiness -2
  starving (hunger >= 80 after the tick): health -3, happiness -2 more

Action deltas:
  feed   hunger -30, happiness +5, health +2, friendship +2
  sleep  energy +50, health +5, hunger +5, last_sleep = now
  play   energy -15, happiness +15, hunger +10, friendship +3
         rejected if health < 20 (too sick) or energy < 15
  heal   health +30, happiness +2, friendship +1
         rejected if health >= 90 (already healthy)

A villager is sick while health < 30. Functions here mutate the model in
place and never touch storage; callers hold the owner's lock and persist.
"""

import logging
from datetime import datetime, timedelta

from village.errors import AlreadyHealthy, InsufficientEnergy, VillagerTooSick
from village.models import NEEDS_FIELDS, Villager

logger = logging.getLogger(__name__)

MIN_VALUE = 0
MAX_VALUE = 100

TICK = timedelta(hours=1)
MAX_TICKS = 48

DECAY_PER_TICK = {"hunger": 4, "energy": -2, "happiness": -2}
STARVING_HUNGER = 80
STARVING_PER_TICK = {"health_level": -3, "happiness": -2}

FEED = {"hunger": -30, "happiness": 5, "health_level": 2, "friendship_level": 2}
SLEEP = {"energy": 50, "health_level": 5, "hunger": 5}
PLAY = {"energy": -15, "happiness": 15, "hunger": 10, "friendship_level": 3}
HEAL = {"health_level": 30, "happiness": 2, "friendship_level": 1}

PLAY_MIN_HEALTH = 20
PLAY_MIN_ENERGY = 15
HEAL_MAX_HEALTH = 90


def clamp(value: int) -> int:
    return max(MIN_VALUE, min(MAX_VALUE, int(value)))


def apply(villager: Villager, **deltas: int) -> Villager:
    """Add each delta to the named field, then clamp every needs field."""
    for field, delta in deltas.items():
        if field not in NEEDS_FIELDS:
            raise KeyError(f"Unknown needs field: {field}")
        setattr(villager, field, getattr(villager, field) + delta)
    for field in NEEDS_FIELDS:
        setattr(villager, field, clamp(getattr(villager, field)))
    return villager


def decay(villager: Villager, now: datetime) -> int:
    """Apply passive decay for whole hours elapsed since last_tick.

    Advances last_tick by the hours consumed (not to ``now``), so partial
    hours carry over to the next call. Returns the number of ticks applied.
    """
    elapsed = now - villager.last_tick
    if elapsed < TICK:
        return 0
    ticks = int(elapsed / TICK)
    applied = min(ticks, MAX_TICKS)
    for _ in range(applied):
        apply(villager, **DECAY_PER_TICK)
        if villager.hunger >= STARVING_HUNGER:
            apply(villager, **STARVING_PER_TICK)
    # Time beyond the cap is forgiven rather than queued
    villager.last_tick = villager.last_tick + TICK * ticks
    logger.debug("decay villager=%s ticks=%d", villager.id, applied)
    return applied


def skip_decay(villager: Villager, now: datetime) -> int:
    """Move last_tick past the whole hours elapsed without changing any need.

    Used while decay is switched off, so turning it back on only counts
    hours from that point. Returns the number of hours skipped.
    """
    elapsed = now - villager.last_tick
    if elapsed < TICK:
        return 0
    ticks = int(elapsed / TICK)
    villager.last_tick = villager.last_tick + TICK * ticks
    return ticks


def feed(villager: Villager) -> Villager:
    return apply(villager, **FEED)


def sleep(villager: Villager, now: datetime) -> Villager:
    apply(villager, **SLEEP)
    villager.last_sleep = now
    return villager


def play(villager: Villager) -> Villager:
    if villager.health_level < PLAY_MIN_HEALTH:
        raise VillagerTooSick(f"{villager.name} is too sick to play")
    if villager.energy < PLAY_MIN_ENERGY:
        raise InsufficientEnergy(
            f"{villager.name} is too tired to play (needs {PLAY_MIN_ENERGY} energy)"
        )
    return apply(villager, **PLAY)


def heal(villager: Villager) -> Villager:
    if villager.health_level >= HEAL_MAX_HEALTH:
        raise AlreadyHealthy(f"{villager.name} is already very healthy")
    return apply(villager, **HEAL)
