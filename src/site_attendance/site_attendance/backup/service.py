from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..database.store import DocumentStore

logger = logging.getLogger(__name__)


class BackupService:
    """Use case: dump the whole store tree."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def snapshot(self) -> Dict[str, Any]:
        return self._store.get("") or {}

    def write_snapshot(self, out_dir: str | Path, *, now: Optional[datetime] = None) -> Path:
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        out_file = out_dir / f"store_{ts}.json"
        with out_file.open("w", encoding="utf-8") as f:
            json.dump(self.snapshot(), f, ensure_ascii=False, indent=2, sort_keys=True)

        logger.info("Wrote backup to %s", out_file)
        return out_file
