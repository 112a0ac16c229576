"""Backup the document store.

Note: Writes the whole tree as one JSON file under ``backups/``; the same
dump is served by ``GET /api/backup``.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.site_attendance.site_attendance.backup.service import BackupService
from src.site_attendance.site_attendance.common.log import configure_logging
from src.site_attendance.site_attendance.core.exceptions import StoreError
from src.site_attendance.site_attendance.database.connection import StoreConfig, connect_store


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    store = connect_store(StoreConfig.from_mapping(settings.STORE_CONFIG))
    out_dir = REPO_ROOT / "backups"

    try:
        out_file = BackupService(store).write_snapshot(out_dir)
    except StoreError as e:
        raise SystemExit(f"Backup failed: {e}")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
