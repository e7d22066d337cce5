import random

import pytest

from village import auth, storage, villagers


class FixedRandom(random.Random):
    """A generator whose ``random()`` always returns the same value.

    0.0 picks the easiest candidate and always succeeds; 0.999 picks the
    hardest candidate and always fails. ``choice`` still draws normally.
    """

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def always_catch() -> random.Random:
    return FixedRandom(0.0)


@pytest.fixture
def never_catch() -> random.Random:
    return FixedRandom(0.999)


@pytest.fixture
def player() -> str:
    auth.register("alice", "password1")
    return "alice"


@pytest.fixture
def villager(player):
    return villagers.create_villager(player, "Lobo", "WOLF", "CRANKY")


@pytest.fixture
def set_stats():
    """Overwrite stored fields of a villager: set_stats(villager, energy=12)."""

    def _set(villager, **fields):
        stored = storage.get_villager(villager.username, villager.id)
        for key, value in fields.items():
            setattr(stored, key, value)
        storage.save_villager(stored)
        return stored

    return _set


@pytest.fixture
def set_points():
    def _set(username: str, points: int):
        user = storage.get_user(username)
        user.points = points
        storage.save_user(user)
        return user

    return _set
