import json

from village import storage


def test_presets_loaded():
    assert len(storage.list_bugs()) == 16
    assert len(storage.list_fish()) == 12
    assert len(storage.list_furniture()) == 8


def test_get_species_by_kind():
    assert storage.get_species("bug", 14).name == "Hermit Crab"
    assert storage.get_species("fish", 1).name == "Bitterling"
    assert storage.get_species("fish", 99) is None


def test_get_furniture():
    assert storage.get_furniture(3).price == 800
    assert storage.get_furniture(99) is None


def test_data_catalog_overrides_presets():
    override = [
        {"id": 1, "name": "Bitterling", "description": "Cheaper now", "rarity": "common",
         "value": 1, "habitat": "RIVER", "catch_difficulty": 0.2},
        {"id": 50, "name": "Mud Skipper", "description": "", "rarity": "rare",
         "value": 400, "habitat": "BEACH", "catch_difficulty": 0.5},
    ]
    (storage.catalog_dir() / "fish.json").write_text(json.dumps(override))
    storage.init_storage(storage.data_dir(), presets_dir=storage.presets_dir())

    fish = storage.list_fish()
    assert len(fish) == 13
    assert storage.get_species("fish", 1).value == 1
    assert storage.get_species("fish", 50).habitat == "BEACH"
