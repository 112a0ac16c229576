from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..core.enums import Role

PROFILE_FIELDS = ("fullName", "contactNumber", "dob", "doj", "address")


@dataclass(frozen=True)
class Worker:
    """Roster entry. The password lives in the matching credential record."""

    worker_id: str
    username: str
    role: Role
    full_name: str
    contact_number: str
    dob: str
    doj: str
    address: str

    @classmethod
    def from_record(cls, key: str, record: Mapping[str, Any]) -> "Worker":
        return cls(
            worker_id=key,
            username=record.get("username", ""),
            role=Role(record.get("role", Role.WORKER.value)),
            full_name=record.get("fullName", ""),
            contact_number=record.get("contactNumber", ""),
            dob=record.get("dob", ""),
            doj=record.get("doj", ""),
            address=record.get("address", ""),
        )

    def to_record(self) -> Dict[str, str]:
        return {
            "username": self.username,
            "role": self.role.value,
            "fullName": self.full_name,
            "contactNumber": self.contact_number,
            "dob": self.dob,
            "doj": self.doj,
            "address": self.address,
        }

    def to_details(self) -> Dict[str, str]:
        """Shape used when workers are listed inside a project."""
        return {
            "username": self.username,
            "name": self.full_name,
            "contact_number": self.contact_number,
            "address": self.address,
            "dob": self.dob,
            "doj": self.doj,
            "role": self.role.value,
        }


@dataclass(frozen=True)
class WorkerRemoval:
    """What a worker deletion touched, step by step."""

    worker_id: str
    credential_id: Optional[str]
    projects_updated: List[str] = field(default_factory=list)
