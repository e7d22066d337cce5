"""File-based JSON storage, one directory per player.

Data layout:
  data/
    users/
      <username>/
        account.json     Credentials, role and Bells balance
        villagers.json   Villager list with needs and friendship
        inventory.json   Caught creature stacks and owned furniture
        museum.json      One record per (villager, species), with timesCaught
        catches.json     Append-only history of successful catches
    catalog/             Optional overrides of the preset catalogs (by id)
    sessions.json        Bearer token -> username + expiry
    counters.json        Id allocation for villagers and inventory items
    config.json          Game settings (defaults merged at read time)
  presets/
    bugs.json, fish.json, furniture.json   Built-in read-only catalogs

Every mutation of a player's files happens inside aggregate_lock(username),
so two requests for the same player never interleave. Files are replaced
atomically on write.
"""

# Re-export all public symbols so `from village import storage` keeps working.

from .core import (  # noqa: F401
    aggregate_lock,
    catalog_dir,
    data_dir,
    init_storage,
    next_id,
    presets_dir,
    read_json,
    user_dir,
    users_dir,
    write_json,
)

from .accounts import (  # noqa: F401
    delete_session,
    get_session,
    get_sessions,
    get_user,
    list_users,
    purge_sessions,
    save_session,
    save_user,
)

from .villagers import (  # noqa: F401
    delete_villager,
    get_villager,
    get_villagers,
    save_villager,
    save_villagers,
)

from .inventory import (  # noqa: F401
    get_inventory,
    get_item,
    save_inventory,
)

from .museum import (  # noqa: F401
    append_catches,
    get_catch_log,
    get_museum,
    save_catch_log,
    save_museum,
)

from .catalog import (  # noqa: F401
    get_furniture,
    get_species,
    list_bugs,
    list_fish,
    list_furniture,
    list_species,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
