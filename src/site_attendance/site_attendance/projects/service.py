from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from ..common.validators import is_blank, require_fields, require_list
from ..core.constants import DEFAULT_FANOUT_WORKERS
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..workers.repository import WorkerRepository
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


def _require_name(project_name: Optional[str]) -> str:
    if is_blank(project_name) or not isinstance(project_name, str):
        raise ValidationError("Project name is required", fields=["projectName"])
    return project_name


class ProjectService:
    """Use case: manage projects and their worker assignments."""

    def __init__(self, projects: ProjectRepository, workers: WorkerRepository, *, fanout_workers: int = DEFAULT_FANOUT_WORKERS):
        self._projects = projects
        self._workers = workers
        self._fanout_workers = max(1, int(fanout_workers))

    def list_projects(self) -> Dict[str, dict]:
        return self._projects.list_all()

    def create_project(self, *, project_name: str, project_overview: str, workers: Sequence[str]) -> str:
        require_fields({"projectName": project_name, "projectOverview": project_overview, "workers": workers})
        _require_name(project_name)
        require_list(workers, "workers", item_type=str)

        project_id = self._projects.create(
            Project(
                project_id="",
                project_name=project_name,
                project_overview=project_overview,
                workers=tuple(workers),
            )
        )
        logger.info("Created project %r as %s", project_name, project_id)
        return project_id

    def replace_workers(self, *, project_name: str, worker_usernames: Sequence[str]) -> str:
        """Replace a project's worker list with the usernames that exist.

        Unknown usernames are dropped silently; the call fails only when none
        of them match a worker (exact, case-sensitive match).
        """
        _require_name(project_name)
        if not worker_usernames:
            raise ValidationError("No workers provided", fields=["workerUsernames"])
        require_list(worker_usernames, "workerUsernames", allow_empty=False, item_type=str)

        if not self._projects.find_by_name(project_name):
            raise NotFoundError("Project not found")

        known = {record.get("username") for record in self._workers.list_all().values() if isinstance(record, dict)}
        valid = [username for username in worker_usernames if username in known]
        if not valid:
            raise NotFoundError("No valid workers found with provided usernames")

        return self._projects.update_by_name(project_name, {"workers": valid})

    def update_details(
        self,
        *,
        project_name: str,
        new_project_name: Optional[str] = None,
        project_overview: Optional[str] = None,
    ) -> str:
        _require_name(project_name)

        changes: Dict[str, str] = {}
        if not is_blank(new_project_name):
            changes["projectName"] = _require_name(new_project_name)
        if not is_blank(project_overview):
            changes["projectOverview"] = project_overview
        if not changes:
            raise ValidationError(
                "Specify newProjectName or projectOverview to change",
                fields=["newProjectName", "projectOverview"],
            )

        project = self._projects.find_by_name(project_name)
        if not project:
            raise NotFoundError("Project not found")

        if "projectName" in changes:
            clash = self._projects.find_by_name(changes["projectName"])
            if clash and clash.project_id != project.project_id:
                raise ConflictError("project name already exists")

        return self._projects.update_by_name(project_name, changes)

    def projects_for_worker(self, *, username: str) -> List[dict]:
        """Projects listing ``username`` with the details of all their workers.

        Worker details are looked up in parallel, one lookup per username.
        Usernames that no longer resolve to a worker are left out.
        """
        if is_blank(username):
            raise ValidationError("Worker username is required", fields=["username"])

        projects = self._projects.list_projects()
        if not projects:
            raise NotFoundError("No projects found")

        out: List[dict] = []
        with ThreadPoolExecutor(max_workers=self._fanout_workers) as pool:
            for project in projects:
                if not project.has_worker(username):
                    continue
                details = []
                for member, worker in zip(project.workers, pool.map(self._workers.find_by_username, project.workers)):
                    if worker is None:
                        logger.warning("Project %r lists unknown worker %r", project.project_name, member)
                        continue
                    details.append(worker.to_details())
                out.append(
                    {
                        "project_name": project.project_name,
                        "description": project.project_overview,
                        "workers": details,
                    }
                )

        if not out:
            raise NotFoundError("No projects found for the given worker")
        return out

    def delete_project(self, *, project_name: str) -> str:
        """Delete a project by name. Attendance filed under it is kept."""
        _require_name(project_name)
        project_id = self._projects.delete_by_name(project_name)
        logger.info("Deleted project %r (%s)", project_name, project_id)
        return project_id
