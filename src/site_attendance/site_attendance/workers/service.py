from __future__ import annotations

import logging
from typing import Dict

from ..auth.repository import CredentialRepository
from ..common.validators import require_fields, require_role, require_strings
from ..projects.repository import ProjectRepository
from .model import Worker, WorkerRemoval
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Use case: manage the worker roster (admin)."""

    def __init__(self, workers: WorkerRepository, credentials: CredentialRepository, projects: ProjectRepository):
        self._workers = workers
        self._credentials = credentials
        self._projects = projects

    def list_workers(self) -> Dict[str, dict]:
        return self._workers.list_all()

    def create_worker(
        self,
        *,
        username: str,
        password: str,
        role: str,
        full_name: str,
        contact_number: str,
        dob: str,
        doj: str,
        address: str,
    ) -> str:
        """Create the roster entry, then its login credential.

        The two writes are not atomic: when the credential write fails the
        worker stays in the roster without login access.
        """
        require_fields(
            {
                "username": username,
                "password": password,
                "role": role,
                "fullName": full_name,
                "contactNumber": contact_number,
                "dob": dob,
                "doj": doj,
                "address": address,
            }
        )
        require_strings({"username": username})
        role_value = require_role(role)

        worker_id = self._workers.create(
            Worker(
                worker_id="",
                username=username,
                role=role_value,
                full_name=full_name,
                contact_number=contact_number,
                dob=dob,
                doj=doj,
                address=address,
            )
        )
        try:
            self._credentials.add(username=username, password=password, role=role_value)
        except Exception:
            logger.error("Worker %s (%r) was created without login credentials", worker_id, username)
            raise

        logger.info("Added worker %r as %s", username, worker_id)
        return worker_id

    def delete_worker(self, *, username: str) -> WorkerRemoval:
        """Remove a worker, its credential and its project memberships.

        Runs as three separate steps; a failure part-way leaves the earlier
        steps applied (e.g. the worker gone but still listed in a project).
        """
        require_fields({"username": username})
        require_strings({"username": username})

        worker_id = self._workers.remove_by_username(username)
        credential_id = self._credentials.remove_by_username(username)
        if credential_id is None:
            logger.warning("Worker %r had no login credentials to remove", username)
        projects_updated = self._projects.remove_worker_everywhere(username)

        removal = WorkerRemoval(worker_id=worker_id, credential_id=credential_id, projects_updated=projects_updated)
        logger.info("Deleted worker %r: %s", username, removal)
        return removal
