"""Back up the file storage snapshot.

Only meaningful for STORAGE_BACKEND=file; session snapshots live in browsers.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path

from attendance_tracker.config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    path = getattr(settings, "STORAGE_PATH", None)
    if not path:
        raise SystemExit("STORAGE_PATH is not set for this environment.")

    src = Path(path)
    if not src.exists():
        raise SystemExit(f"Nothing to back up: {src} does not exist.")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{src.stem}_{ts}{src.suffix}"
    shutil.copy2(src, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
