from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .auth.service import AuthService
from .auth.store_credential_repository import StoreCredentialRepository
from .backup.service import BackupService
from .core.constants import DEFAULT_FANOUT_WORKERS
from .database.locks import KeyedLocks
from .database.store import DocumentStore
from .projects.service import ProjectService
from .projects.store_project_repository import StoreProjectRepository
from .workers.service import WorkerService
from .workers.store_worker_repository import StoreWorkerRepository


@dataclass(frozen=True)
class Container:
    store: DocumentStore
    locks: KeyedLocks

    credentials_repo: StoreCredentialRepository
    workers_repo: StoreWorkerRepository
    projects_repo: StoreProjectRepository
    attendance_repo: StoreAttendanceRepository

    auth_service: AuthService
    worker_service: WorkerService
    project_service: ProjectService
    attendance_service: AttendanceService
    backup_service: BackupService


def build_container(*, store: DocumentStore, fanout_workers: int = DEFAULT_FANOUT_WORKERS) -> Container:
    locks = KeyedLocks()

    credentials_repo = StoreCredentialRepository(store)
    workers_repo = StoreWorkerRepository(store, locks)
    projects_repo = StoreProjectRepository(store, locks)
    attendance_repo = StoreAttendanceRepository(store, locks)

    auth_service = AuthService(credentials_repo)
    worker_service = WorkerService(workers_repo, credentials_repo, projects_repo)
    project_service = ProjectService(projects_repo, workers_repo, fanout_workers=fanout_workers)
    attendance_service = AttendanceService(attendance_repo, projects_repo)
    backup_service = BackupService(store)

    return Container(
        store=store,
        locks=locks,
        credentials_repo=credentials_repo,
        workers_repo=workers_repo,
        projects_repo=projects_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        worker_service=worker_service,
        project_service=project_service,
        attendance_service=attendance_service,
        backup_service=backup_service,
    )
