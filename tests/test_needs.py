"""Tests for needs clamping, passive decay and action deltas."""

from datetime import timedelta

import pytest

from village import needs
from village.errors import AlreadyHealthy, InsufficientEnergy, VillagerTooSick
from village.models import NEEDS_FIELDS, Villager, utcnow


def _villager(**fields) -> Villager:
    return Villager(id=1, name="Bob", animal_type="CAT", personality="LAZY",
                    username="alice", **fields)


def _in_bounds(v: Villager) -> bool:
    return all(0 <= getattr(v, f) <= 100 for f in NEEDS_FIELDS)


# ── clamp / apply ────────────────────────────────────────


def test_clamp():
    assert needs.clamp(-5) == 0
    assert needs.clamp(50) == 50
    assert needs.clamp(130) == 100


def test_apply_clamps_every_field():
    v = _villager(energy=95, hunger=3)
    needs.apply(v, energy=20, hunger=-10)
    assert v.energy == 100
    assert v.hunger == 0


def test_apply_unknown_field():
    with pytest.raises(KeyError):
        needs.apply(_villager(), charisma=5)


# ── actions ──────────────────────────────────────────────


@pytest.mark.parametrize("hunger", [0, 1, 29, 30, 50, 99, 100])
def test_feed_never_increases_hunger(hunger):
    v = _villager(hunger=hunger)
    needs.feed(v)
    assert v.hunger <= hunger
    assert _in_bounds(v)


def test_feed_raises_happiness():
    v = _villager(happiness=50, hunger=60)
    needs.feed(v)
    assert v.hunger == 30
    assert v.happiness == 55


@pytest.mark.parametrize("energy", [0, 10, 49, 50, 51, 99, 100])
def test_sleep_never_decreases_energy(energy):
    v = _villager(energy=energy)
    needs.sleep(v, utcnow())
    assert v.energy >= energy
    assert _in_bounds(v)


def test_sleep_updates_last_sleep():
    v = _villager()
    later = v.last_sleep + timedelta(hours=3)
    needs.sleep(v, later)
    assert v.last_sleep == later


def test_play_costs_energy_and_raises_happiness():
    v = _villager(energy=50, happiness=40)
    needs.play(v)
    assert v.energy == 35
    assert v.happiness == 55


def test_play_blocked_when_too_sick():
    v = _villager(health_level=19)
    with pytest.raises(VillagerTooSick):
        needs.play(v)
    assert v.health_level == 19


def test_play_blocked_when_too_tired():
    v = _villager(energy=14)
    with pytest.raises(InsufficientEnergy):
        needs.play(v)
    assert v.energy == 14


def test_heal_rejected_when_healthy():
    v = _villager(health_level=95)
    with pytest.raises(AlreadyHealthy):
        needs.heal(v)
    assert v.health_level == 95


def test_heal_at_89():
    v = _villager(health_level=89)
    needs.heal(v)
    assert v.health_level == 100


# ── decay ────────────────────────────────────────────────


def test_decay_nothing_within_the_hour():
    v = _villager()
    assert needs.decay(v, v.last_tick + timedelta(minutes=59)) == 0
    assert v.hunger == 30


def test_decay_applies_whole_hours():
    v = _villager(hunger=30, energy=100, happiness=70)
    start = v.last_tick
    assert needs.decay(v, start + timedelta(hours=3, minutes=30)) == 3
    assert v.hunger == 42
    assert v.energy == 94
    assert v.happiness == 64
    # The half hour carries over
    assert v.last_tick == start + timedelta(hours=3)


def test_decay_starving_costs_health():
    v = _villager(hunger=78, health_level=50)
    needs.decay(v, v.last_tick + timedelta(hours=2))
    assert v.hunger == 86
    assert v.health_level == 44


def test_decay_is_capped():
    v = _villager()
    start = v.last_tick
    applied = needs.decay(v, start + timedelta(days=30))
    assert applied == needs.MAX_TICKS
    assert _in_bounds(v)
    assert v.last_tick == start + timedelta(days=30)


def test_skip_decay_moves_last_tick_only():
    v = _villager()
    start = v.last_tick
    assert needs.skip_decay(v, start + timedelta(hours=30, minutes=20)) == 30
    assert (v.hunger, v.energy, v.happiness) == (30, 100, 70)
    assert v.last_tick == start + timedelta(hours=30)
