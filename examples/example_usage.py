"""Example: use the service layer without Flask.

Controllers are thin; every rule lives in the services, so the same calls
work from a script against an in-memory store.
"""

from src.site_attendance.site_attendance.container import build_container
from src.site_attendance.site_attendance.database.bootstrap import ensure_default_admin
from src.site_attendance.site_attendance.database.memory_store import InMemoryDocumentStore


def main():
    store = InMemoryDocumentStore()
    ensure_default_admin(store, password="admin")
    container = build_container(store=store)

    container.auth_service.login(username="admin", password="admin", role="ADMIN")
    container.worker_service.create_worker(
        username="w1",
        password="p",
        role="WORKER",
        full_name="Worker One",
        contact_number="+1234567890",
        dob="1990-01-01",
        doj="2020-01-01",
        address="Site A",
    )
    container.project_service.create_project(project_name="P1", project_overview="Foundations", workers=["w1"])
    container.attendance_service.mark(
        worker_id="w1",
        project_name="P1",
        date="2024-01-01",
        work_description="Poured concrete",
        image_path="img/w1-2024-01-01.jpg",
    )
    print(container.project_service.projects_for_worker(username="w1"))
    print(container.attendance_service.list_for_worker(worker_id="w1"))


if __name__ == "__main__":
    main()
