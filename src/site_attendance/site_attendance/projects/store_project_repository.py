from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core import constants
from ..database.locks import KeyedLocks
from ..database.store import DocumentStore
from ..database.workflows import create_if_absent, find_entry, find_then_remove, find_then_update, scrub_from_lists
from .model import Project
from .repository import ProjectRepository

NOT_FOUND = "Project not found"


class StoreProjectRepository(ProjectRepository):
    def __init__(self, store: DocumentStore, locks: Optional[KeyedLocks] = None):
        self._store = store
        self._locks = locks

    def list_all(self) -> Dict[str, dict]:
        return self._store.get(constants.PROJECTS) or {}

    def list_projects(self) -> Sequence[Project]:
        return [Project.from_record(key, record) for key, record in self.list_all().items()]

    def create(self, project: Project) -> str:
        return create_if_absent(
            self._store,
            constants.PROJECTS,
            project.to_record(),
            unique_field="projectName",
            conflict_message="project name already exists",
            locks=self._locks,
        )

    def find_by_name(self, project_name: str) -> Optional[Project]:
        entry = find_entry(self._store, constants.PROJECTS, "projectName", project_name)
        if not entry:
            return None
        return Project.from_record(*entry)

    def update_by_name(self, project_name: str, changes: Mapping[str, Any]) -> str:
        return find_then_update(
            self._store,
            constants.PROJECTS,
            "projectName",
            project_name,
            changes,
            not_found_message=NOT_FOUND,
        )

    def delete_by_name(self, project_name: str) -> str:
        return find_then_remove(self._store, constants.PROJECTS, "projectName", project_name, not_found_message=NOT_FOUND)

    def remove_worker_everywhere(self, username: str) -> List[str]:
        return scrub_from_lists(self._store, constants.PROJECTS, "workers", username)
