"""Write the seed roster into the file storage backend.

Overwrites whatever snapshot is stored under STORAGE_KEY.
"""
from __future__ import annotations

import importlib

from attendance_tracker.config import get_settings_module
from attendance_tracker.core.constants import STORAGE_KEY
from attendance_tracker.roster import codec
from attendance_tracker.roster.store import seed_roster
from attendance_tracker.storage import JsonFileStorage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    path = getattr(settings, "STORAGE_PATH", None)
    if not path:
        raise SystemExit("STORAGE_PATH is not set for this environment.")

    key = getattr(settings, "STORAGE_KEY", None) or STORAGE_KEY
    storage = JsonFileStorage(path)
    roster = seed_roster()
    storage.set(key, codec.dumps(roster))

    print(f"OK: Seeded {len(roster)} students -> {storage.path} [{key}]")


if __name__ == "__main__":
    main()
