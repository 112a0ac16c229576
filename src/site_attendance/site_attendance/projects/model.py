from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


def _as_list(value: Any) -> list:
    # The store hands back sparse arrays as maps keyed by index.
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value or [])


@dataclass(frozen=True)
class Project:
    project_id: str
    project_name: str
    project_overview: str
    workers: Tuple[str, ...] = ()

    @classmethod
    def from_record(cls, key: str, record: Mapping[str, Any]) -> "Project":
        return cls(
            project_id=key,
            project_name=record.get("projectName", ""),
            project_overview=record.get("projectOverview", ""),
            workers=tuple(_as_list(record.get("workers"))),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "projectName": self.project_name,
            "projectOverview": self.project_overview,
            "workers": list(self.workers),
        }

    def has_worker(self, username: str) -> bool:
        return username in self.workers
