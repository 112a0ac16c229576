from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..core import constants
from ..database.locks import KeyedLocks
from ..database.store import DocumentStore, child_path
from ..database.workflows import upsert_by_child
from .model import AttendanceEntry
from .repository import AttendanceRepository


class StoreAttendanceRepository(AttendanceRepository):
    """Attendance lives at ``attendance/{workerID}/{projectName}/{key}``."""

    def __init__(self, store: DocumentStore, locks: Optional[KeyedLocks] = None):
        self._store = store
        self._locks = locks

    def list_for_worker(self, worker_id: str) -> Dict[str, dict]:
        return self._store.get(child_path(constants.ATTENDANCE, worker_id)) or {}

    def upsert(self, *, worker_id: str, project_name: str, entry: AttendanceEntry) -> Tuple[str, bool]:
        path = child_path(constants.ATTENDANCE, worker_id, project_name)
        return upsert_by_child(self._store, path, "Date", entry.date, entry.to_record(), locks=self._locks)
