from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.site_attendance.site_attendance.common.log import configure_logging
from src.site_attendance.site_attendance.database.bootstrap import ensure_default_admin
from src.site_attendance.site_attendance.database.connection import StoreConfig, connect_store


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    config = StoreConfig.from_mapping(settings.STORE_CONFIG)
    store = connect_store(config)
    result = ensure_default_admin(store, password=str(settings.DEFAULT_ADMIN_PASSWORD))

    print(
        "OK: Seeded store -> "
        f"{config.backend} {config.database_url or '(in-memory)'} "
        f"worker_created={result.admin_worker_created} credential_created={result.admin_credential_created}"
    )


if __name__ == "__main__":
    main()
