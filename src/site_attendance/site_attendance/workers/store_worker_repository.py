from __future__ import annotations

from typing import Dict, Optional

from ..core import constants
from ..core.enums import MatchPolicy
from ..database.locks import KeyedLocks
from ..database.store import DocumentStore
from ..database.workflows import create_if_absent, find_entry, find_then_remove
from .model import Worker
from .repository import WorkerRepository


class StoreWorkerRepository(WorkerRepository):
    def __init__(self, store: DocumentStore, locks: Optional[KeyedLocks] = None):
        self._store = store
        self._locks = locks

    def list_all(self) -> Dict[str, dict]:
        return self._store.get(constants.WORKERS) or {}

    def create(self, worker: Worker) -> str:
        return create_if_absent(
            self._store,
            constants.WORKERS,
            worker.to_record(),
            unique_field="username",
            conflict_message="username already exists",
            locks=self._locks,
        )

    def find_by_username(self, username: str) -> Optional[Worker]:
        entry = find_entry(self._store, constants.WORKERS, "username", username, policy=MatchPolicy.EXACT)
        if not entry:
            return None
        return Worker.from_record(*entry)

    def remove_by_username(self, username: str) -> str:
        return find_then_remove(
            self._store,
            constants.WORKERS,
            "username",
            username,
            policy=MatchPolicy.EXACT,
            not_found_message="Worker not found",
        )
