from __future__ import annotations

import logging
from typing import Dict

from ..common.validators import require_fields, require_strings
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from .model import AttendanceEntry, AttendanceMark
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, projects: ProjectRepository):
        self._attendance = attendance
        self._projects = projects

    def mark(
        self,
        *,
        worker_id: str,
        project_name: str,
        date: str,
        work_description: str,
        image_path: str,
    ) -> AttendanceMark:
        """Record a worker's day on a project.

        Submitting the same worker/project/date again overwrites the stored
        description and image instead of adding a second entry.
        """
        values = {
            "workerID": worker_id,
            "projectName": project_name,
            "Date": date,
            "workDescription": work_description,
            "imagePath": image_path,
        }
        try:
            require_fields(values)
        except ValidationError as e:
            raise ValidationError(
                "worker Id, Project name, date, and work description and image path are required",
                fields=e.fields,
            )
        require_strings(values, ["workerID", "projectName", "Date"])

        if not self._projects.find_by_name(project_name):
            raise NotFoundError("Project not found")

        entry_id, created = self._attendance.upsert(
            worker_id=worker_id,
            project_name=project_name,
            entry=AttendanceEntry(date=date, work_description=work_description, image_path=image_path),
        )
        logger.info(
            "%s attendance %s for %r on %r (%s)",
            "Added" if created else "Updated",
            entry_id,
            worker_id,
            project_name,
            date,
        )
        return AttendanceMark(worker_id=worker_id, project_name=project_name, entry_id=entry_id, created=created)

    def list_for_worker(self, *, worker_id: str) -> Dict[str, dict]:
        require_fields({"workerID": worker_id})
        require_strings({"workerID": worker_id})
        return self._attendance.list_for_worker(worker_id)
