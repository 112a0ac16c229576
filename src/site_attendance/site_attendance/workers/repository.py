from __future__ import annotations

from typing import Dict, Optional, Protocol

from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for the worker roster.

    Username lookups here are exact; the duplicate check on create is
    case-insensitive.
    """

    def list_all(self) -> Dict[str, dict]:
        raise NotImplementedError

    def create(self, worker: Worker) -> str:
        raise NotImplementedError

    def find_by_username(self, username: str) -> Optional[Worker]:
        raise NotImplementedError

    def remove_by_username(self, username: str) -> str:
        raise NotImplementedError
