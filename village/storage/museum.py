"""Museum records (unique per villager and species) and the append-only catch log."""

from pathlib import Path

from village.models import CatchLogEntry, CaughtRecord

from .core import read_json, user_dir, write_json


def _museum_path(username: str) -> Path:
    return user_dir(username) / "museum.json"


def _catch_log_path(username: str) -> Path:
    return user_dir(username) / "catches.json"


def get_museum(username: str) -> list[CaughtRecord]:
    return [CaughtRecord.model_validate(r) for r in read_json(_museum_path(username), [])]


def save_museum(username: str, records: list[CaughtRecord]) -> None:
    write_json(_museum_path(username), [r.model_dump(mode="json") for r in records])


def get_catch_log(username: str) -> list[CatchLogEntry]:
    return [CatchLogEntry.model_validate(e) for e in read_json(_catch_log_path(username), [])]


def save_catch_log(username: str, entries: list[CatchLogEntry]) -> None:
    write_json(_catch_log_path(username), [e.model_dump(mode="json") for e in entries])


def append_catches(username: str, entries: list[CatchLogEntry]) -> None:
    """Append entries to an owner's catch log."""
    existing = get_catch_log(username)
    existing.extend(entries)
    save_catch_log(username, existing)
