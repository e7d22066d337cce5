"""Species and furniture catalogs (presets merged with data overrides).

Presets ship in ``presets/{bugs,fish,furniture}.json``. A file of the same
name under ``<data>/catalog/`` overrides preset entries by id and may add new
ones. Catalogs are read-only during play, so the merged lists are cached
until the next ``init_storage``.
"""

import json
from typing import Any

from village.models import Furniture, Species

from .core import catalog_dir, presets_dir

_cache: dict[str, list[dict[str, Any]]] = {}


def _load(name: str) -> list[dict[str, Any]]:
    if name in _cache:
        return _cache[name]
    by_id: dict[int, dict[str, Any]] = {}
    # Presets first (lower priority)
    for path in (presets_dir() / f"{name}.json", catalog_dir() / f"{name}.json"):
        if path.is_file():
            for entry in json.loads(path.read_text()):
                by_id[entry["id"]] = entry
    _cache[name] = [by_id[k] for k in sorted(by_id)]
    return _cache[name]


def list_bugs() -> list[Species]:
    return [Species.model_validate({**e, "kind": "bug"}) for e in _load("bugs")]


def list_fish() -> list[Species]:
    return [Species.model_validate({**e, "kind": "fish"}) for e in _load("fish")]


def list_species(kind: str) -> list[Species]:
    return list_bugs() if kind == "bug" else list_fish()


def get_species(kind: str, species_id: int) -> Species | None:
    for species in list_species(kind):
        if species.id == species_id:
            return species
    return None


def list_furniture() -> list[Furniture]:
    return [Furniture.model_validate(e) for e in _load("furniture")]


def get_furniture(furniture_id: int) -> Furniture | None:
    for furniture in list_furniture():
        if furniture.id == furniture_id:
            return furniture
    return None
