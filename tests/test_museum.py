import json
import logging

import pytest

from village import catching, museum, storage
from village.errors import NotFoundError


def test_museum_lists_unique_species(player, villager, always_catch):
    for _ in range(3):
        catching.attempt_catch(player, villager.id, "bug", "BEACH", rng=always_catch)
    view = museum.museum_view(player, villager.id, "bug")
    assert len(view) == 1
    assert view[0]["bugName"] == "Hermit Crab"
    assert view[0]["timesCaught"] == 3
    assert view[0]["location"] == "BEACH"
    assert museum.museum_view(player, villager.id, "fish") == []


def test_catch_history_is_newest_first(player, villager, always_catch):
    catching.attempt_catch(player, villager.id, "bug", "BEACH", rng=always_catch)
    catching.attempt_catch(player, villager.id, "bug", "GRASSLAND", rng=always_catch)
    history = museum.catch_history(player, villager.id, "bug")
    assert [h["location"] for h in history] == ["GRASSLAND", "BEACH"]


def test_unknown_villager(player):
    with pytest.raises(NotFoundError):
        museum.museum_view(player, 42, "bug")
    with pytest.raises(NotFoundError):
        museum.catch_history(player, 42, "fish")


def test_species_removed_from_catalog_is_skipped(player, villager, always_catch, caplog):
    catching.attempt_catch(player, villager.id, "bug", "BEACH", rng=always_catch)
    presets = storage.presets_dir()
    bugs = [b for b in json.loads((presets / "bugs.json").read_text()) if b["id"] != 14]
    custom = storage.data_dir() / "presets"
    custom.mkdir()
    (custom / "bugs.json").write_text(json.dumps(bugs))
    storage.init_storage(storage.data_dir(), presets_dir=custom)

    with caplog.at_level(logging.WARNING, logger="village.museum"):
        assert museum.museum_view(player, villager.id, "bug") == []
    assert "unknown bug id=14" in caplog.text
