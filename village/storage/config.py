"""Game settings (starting balance, limits, decay switch, resale rate)."""

from pathlib import Path
from typing import Any

from .core import data_dir, read_json, write_json

_CONFIG_DEFAULTS: dict[str, Any] = {
    "starting_bells": 1000,
    "max_villagers": 10,
    "token_ttl_hours": 24,
    "needs_decay": True,
    "furniture_resale_rate": 0.5,
}


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    stored = read_json(_config_path(), {})
    for key, value in stored.items():
        if key in config:
            config[key] = value
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into config and persist. Returns full config.

    Unknown keys are ignored; values are coerced to the type of the default.
    """
    config = get_config()
    for key, value in fields.items():
        if key not in _CONFIG_DEFAULTS:
            continue
        default = _CONFIG_DEFAULTS[key]
        if isinstance(default, bool):
            config[key] = bool(value)
        elif isinstance(default, int):
            config[key] = int(value)
        elif isinstance(default, float):
            config[key] = float(value)
        else:
            config[key] = value
    write_json(_config_path(), config)
    return config
