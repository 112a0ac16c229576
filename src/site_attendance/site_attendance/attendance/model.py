from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class AttendanceEntry:
    """One day's work by a worker on a project, unique per (worker, project, date)."""

    date: str
    work_description: str
    image_path: str

    def to_record(self) -> Dict[str, str]:
        return {
            "Date": self.date,
            "workDescription": self.work_description,
            "imagePath": self.image_path,
        }


@dataclass(frozen=True)
class AttendanceMark:
    worker_id: str
    project_name: str
    entry_id: str
    created: bool
