from __future__ import annotations

from typing import Dict, Protocol, Tuple

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_for_worker(self, worker_id: str) -> Dict[str, dict]:
        """Entries of one worker, grouped by project name then entry key."""

        raise NotImplementedError

    def upsert(self, *, worker_id: str, project_name: str, entry: AttendanceEntry) -> Tuple[str, bool]:
        """Store ``entry``, replacing the fields of an existing entry with the same date.

        Returns ``(entry_id, created)``.
        """

        raise NotImplementedError
