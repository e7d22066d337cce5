"""Friendship and care interactions: talk, gift, play, feed, heal, sleep.

Every interaction runs inside the owner's aggregate lock: the villager is
loaded, brought up to date with passive decay, checked, mutated through
``village.needs`` and written back. A rejected action raises before the
write, so nothing changes.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime

from village import needs, storage
from village.models import ActionResult, TalkResult, Villager, utcnow
from village.villagers import load_for_update

logger = logging.getLogger(__name__)

TALK_FRIENDSHIP = 2
GRUMPY_TALK_FRIENDSHIP = -1
GRUMPY_BELOW_HAPPINESS = 25
TALK_HAPPINESS = 3
GIFT_FRIENDSHIP = 5
GIFT_HAPPINESS = 10

TALK_LINES: dict[str, list[str]] = {
    "LAZY": [
        "I was just about to take a nap... want to join?",
        "Have you ever tried eating snacks lying down? Life-changing.",
        "Let's do nothing together. I'm great at it.",
    ],
    "NORMAL": [
        "It's such a lovely day, isn't it?",
        "I baked cookies this morning! Well, I tried to.",
        "I'm so glad we're friends.",
    ],
    "PEPPY": [
        "OMG, hi!! I was literally just thinking about you!",
        "Today is going to be AMAZING, I can feel it!",
        "Let's go on an adventure! Right now!",
    ],
    "JOCK": [
        "Just finished my two hundredth push-up. Feeling pumped!",
        "You look like you could use a jog. Race you!",
        "Protein, hydration, friendship. That's the formula.",
    ],
    "CRANKY": [
        "Hmph. You again. ...Fine, I suppose I don't mind.",
        "Back in my day we caught fish with our bare paws.",
        "Don't tell anyone, but I'm glad you stopped by.",
    ],
    "SNOOTY": [
        "Oh, it's you. I suppose you may admire my outfit.",
        "One simply must keep up appearances, darling.",
        "I only associate with the finest company. You'll do.",
    ],
    "SMUG": [
        "Ah, you've come to bask in my charm. Understandable.",
        "I've been told I have impeccable taste. Correctly, of course.",
        "Relax, I'll let you in on my secrets one day.",
    ],
}

GRUMPY_LINES = [
    "I'm not really in the mood to chat right now...",
    "Can we talk later? I'm feeling down.",
]


def _interact(
    username: str,
    villager_id: int,
    action: Callable[[Villager], str],
    now: datetime,
) -> tuple[Villager, str]:
    with storage.aggregate_lock(username):
        villager = load_for_update(username, villager_id, now)
        message = action(villager)
        storage.save_villager(villager)
    logger.debug(
        "interaction villager=%d energy=%d friendship=%d: %s",
        villager.id, villager.energy, villager.friendship_level, message,
    )
    return villager, message


def _action_result(
    username: str, villager_id: int, action: Callable[[Villager], str], now: datetime | None,
) -> ActionResult:
    villager, message = _interact(username, villager_id, action, now or utcnow())
    return ActionResult(
        message=message,
        new_energy=villager.energy,
        new_friendship=villager.friendship_level,
    )


def talk(
    username: str, villager_id: int,
    rng: random.Random | None = None, now: datetime | None = None,
) -> TalkResult:
    """Chat with a villager. Lines depend on personality; mood sets the friendship change."""
    rng = rng or random.Random()
    change = 0

    def run(villager: Villager) -> str:
        nonlocal change
        if villager.happiness < GRUMPY_BELOW_HAPPINESS:
            delta, line = GRUMPY_TALK_FRIENDSHIP, rng.choice(GRUMPY_LINES)
        else:
            delta, line = TALK_FRIENDSHIP, rng.choice(TALK_LINES[villager.personality])
        before = villager.friendship_level
        needs.apply(villager, friendship_level=delta, happiness=TALK_HAPPINESS)
        change = villager.friendship_level - before
        return line

    villager, message = _interact(username, villager_id, run, now or utcnow())
    return TalkResult(
        message=message,
        friendship_change=change,
        current_friendship=villager.friendship_level,
    )


def give_gift(username: str, villager_id: int, now: datetime | None = None) -> ActionResult:
    def run(villager: Villager) -> str:
        needs.apply(villager, friendship_level=GIFT_FRIENDSHIP, happiness=GIFT_HAPPINESS)
        return f"{villager.name} loves the gift!"

    return _action_result(username, villager_id, run, now)


def play(username: str, villager_id: int, now: datetime | None = None) -> ActionResult:
    def run(villager: Villager) -> str:
        needs.play(villager)
        return f"You played with {villager.name}. What fun!"

    return _action_result(username, villager_id, run, now)


def feed(username: str, villager_id: int, now: datetime | None = None) -> ActionResult:
    def run(villager: Villager) -> str:
        needs.feed(villager)
        return f"{villager.name} enjoyed the meal."

    return _action_result(username, villager_id, run, now)


def heal(username: str, villager_id: int, now: datetime | None = None) -> ActionResult:
    def run(villager: Villager) -> str:
        needs.heal(villager)
        return f"{villager.name} is feeling better."

    return _action_result(username, villager_id, run, now)


def sleep(username: str, villager_id: int, now: datetime | None = None) -> ActionResult:
    now = now or utcnow()

    def run(villager: Villager) -> str:
        needs.sleep(villager, now)
        return f"{villager.name} had a good rest."

    return _action_result(username, villager_id, run, now)
