"""Create demo accounts and villagers for development/testing."""

import random
import shutil

from village import auth, catching, storage, villagers

DEMO_PASSWORD = "villager"

DEMO_ACCOUNTS = [
    {"username": "demo", "role": "USER"},
    {"username": "mayor", "role": "ADMIN"},
]

DEMO_VILLAGERS = [
    {"name": "Lobo", "animal_type": "WOLF", "personality": "CRANKY"},
    {"name": "Bob", "animal_type": "CAT", "personality": "LAZY"},
    {"name": "Goldie", "animal_type": "DOG", "personality": "NORMAL"},
    {"name": "Apollo", "animal_type": "EAGLE", "personality": "CRANKY"},
]


def create_demo_data(seed: int = 7) -> None:
    """Wipe existing players and create demo accounts with a few villagers and catches."""
    if storage.users_dir().exists():
        shutil.rmtree(storage.users_dir())
    storage.users_dir().mkdir(parents=True, exist_ok=True)
    for name in ("sessions.json", "counters.json"):
        (storage.data_dir() / name).unlink(missing_ok=True)

    for account in DEMO_ACCOUNTS:
        auth.register(account["username"], DEMO_PASSWORD, role=account["role"])

    created = [
        villagers.create_villager("demo", v["name"], v["animal_type"], v["personality"])
        for v in DEMO_VILLAGERS
    ]

    # A few seeded outings so the museum and inventory are not empty
    rng = random.Random(seed)
    outings = [("bug", "GRASSLAND"), ("fish", "RIVER"), ("bug", "FOREST"), ("fish", "POND")]
    caught = 0
    for villager, (kind, habitat) in zip(created, outings):
        for _ in range(3):
            result = catching.attempt_catch("demo", villager.id, kind, habitat, rng=rng)
            caught += result.success

    print(
        f"Created {len(DEMO_ACCOUNTS)} demo accounts (password '{DEMO_PASSWORD}') + "
        f"{len(created)} villagers + {caught} catches."
    )
