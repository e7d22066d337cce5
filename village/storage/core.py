"""Storage initialization, path helpers, JSON I/O and aggregate locks."""

import json
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

_data_dir: Path | None = None
_presets_dir: Path | None = None

_locks: dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()
_counter_lock = threading.Lock()


def init_storage(data_dir: Path, presets_dir: Path | None = None) -> None:
    global _data_dir, _presets_dir
    from . import catalog as _catalog_mod

    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    users_dir().mkdir(exist_ok=True)
    catalog_dir().mkdir(exist_ok=True)
    if presets_dir is None:
        # Default: repo_root/presets
        presets_dir = Path(__file__).parent.parent.parent / "presets"
    _presets_dir = presets_dir
    _catalog_mod._cache.clear()  # catalogs are re-read from the new roots


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def presets_dir() -> Path:
    assert _presets_dir is not None, "Call init_storage() before using storage"
    return _presets_dir


def users_dir() -> Path:
    return data_dir() / "users"


def user_dir(username: str) -> Path:
    return users_dir() / username


def catalog_dir() -> Path:
    return data_dir() / "catalog"


def read_json(path: Path, default: Any = None) -> Any:
    """Load a JSON file, returning ``default`` if it does not exist."""
    if not path.is_file():
        return default
    return json.loads(path.read_text())


def write_json(path: Path, data: Any) -> None:
    """Write JSON atomically: readers see the old file or the new one, never half."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as fh:
            fh.write(json.dumps(data, indent=2))
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


@contextmanager
def aggregate_lock(key: str) -> Iterator[None]:
    """Serialize every mutation of one aggregate (a user and everything they own).

    Re-entrant, so an engine step can call helpers that take the same lock.
    """
    with _locks_guard:
        lock = _locks.setdefault(key, threading.RLock())
    with lock:
        yield


def next_id(counter: str) -> int:
    """Allocate the next integer id for a counter name ("villager", "item", ...)."""
    path = data_dir() / "counters.json"
    with _counter_lock:
        counters = read_json(path, {})
        value = counters.get(counter, 0) + 1
        counters[counter] = value
        write_json(path, counters)
    return value
