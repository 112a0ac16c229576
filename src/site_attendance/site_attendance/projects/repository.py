from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    """Repository interface for projects.

    Projects are addressed by name, compared case-insensitively.
    """

    def list_all(self) -> Dict[str, dict]:
        raise NotImplementedError

    def list_projects(self) -> Sequence[Project]:
        raise NotImplementedError

    def create(self, project: Project) -> str:
        raise NotImplementedError

    def find_by_name(self, project_name: str) -> Optional[Project]:
        raise NotImplementedError

    def update_by_name(self, project_name: str, changes: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def delete_by_name(self, project_name: str) -> str:
        raise NotImplementedError

    def remove_worker_everywhere(self, username: str) -> List[str]:
        """Drop ``username`` from every project's worker list; returns changed project ids."""

        raise NotImplementedError
