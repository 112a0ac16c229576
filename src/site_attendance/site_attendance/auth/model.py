from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Credential:
    """Login record kept beside each worker, linked only by username."""

    credential_id: str
    username: str
    password: str
    role: str

    @classmethod
    def from_record(cls, key: str, record: Mapping[str, Any]) -> "Credential":
        return cls(
            credential_id=key,
            username=record.get("username", ""),
            password=record.get("password", ""),
            role=record.get("role", ""),
        )
