from __future__ import annotations

import pytest

from src.site_attendance.site_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def projects(container):
    return container.project_service


def test_create_project_and_reject_duplicate_name(projects, store):
    project_id = projects.create_project(project_name="P1", project_overview="o", workers=[])
    assert store.get(f"projects/{project_id}") == {"projectName": "P1", "projectOverview": "o"}

    with pytest.raises(ConflictError, match="project name already exists"):
        projects.create_project(project_name="p1", project_overview="other", workers=[])
    assert len(store.get("projects")) == 1


def test_create_project_requires_worker_list(projects):
    with pytest.raises(ValidationError) as exc:
        projects.create_project(project_name="P1", project_overview="o", workers=None)
    assert exc.value.fields == ("workers",)

    with pytest.raises(ValidationError):
        projects.create_project(project_name="P1", project_overview="o", workers="w1")


def test_replace_workers_keeps_only_known_usernames(projects, store, add_worker):
    add_worker("w1")
    add_worker("w2")
    project_id = projects.create_project(project_name="P1", project_overview="o", workers=["old"])

    assert projects.replace_workers(project_name="p1", worker_usernames=["w2", "ghost", "W1", "w1"]) == project_id
    assert store.get(f"projects/{project_id}/workers") == ["w2", "w1"]


def test_replace_workers_failures(projects, add_worker):
    add_worker("w1")
    projects.create_project(project_name="P1", project_overview="o", workers=[])

    with pytest.raises(ValidationError, match="No workers provided"):
        projects.replace_workers(project_name="P1", worker_usernames=[])
    with pytest.raises(ValidationError, match="Project name is required"):
        projects.replace_workers(project_name="", worker_usernames=["w1"])
    with pytest.raises(NotFoundError, match="Project not found"):
        projects.replace_workers(project_name="P9", worker_usernames=["w1"])
    with pytest.raises(NotFoundError, match="No valid workers"):
        projects.replace_workers(project_name="P1", worker_usernames=["ghost"])


def test_update_overview_leaves_other_fields(projects, store):
    project_id = projects.create_project(project_name="P1", project_overview="o", workers=["w1"])

    assert projects.update_details(project_name="P1", project_overview="new") == project_id
    assert store.get(f"projects/{project_id}") == {"projectName": "P1", "projectOverview": "new", "workers": ["w1"]}


def test_rename_project(projects, store):
    project_id = projects.create_project(project_name="P1", project_overview="o", workers=[])
    projects.update_details(project_name="p1", new_project_name="Tower")
    assert store.get(f"projects/{project_id}/projectName") == "Tower"

    projects.update_details(project_name="tower", new_project_name="TOWER")
    assert store.get(f"projects/{project_id}/projectName") == "TOWER"


def test_rename_onto_other_project_conflicts(projects, store):
    project_id = projects.create_project(project_name="P1", project_overview="o", workers=[])
    projects.create_project(project_name="P2", project_overview="o", workers=[])

    with pytest.raises(ConflictError):
        projects.update_details(project_name="P1", new_project_name="p2")
    assert store.get(f"projects/{project_id}/projectName") == "P1"


def test_update_needs_something_to_change(projects):
    projects.create_project(project_name="P1", project_overview="o", workers=[])
    with pytest.raises(ValidationError):
        projects.update_details(project_name="P1")
    with pytest.raises(NotFoundError):
        projects.update_details(project_name="P9", project_overview="x")


def test_projects_for_worker_lists_member_details(projects, add_worker):
    add_worker("w1", fullName="Worker One", contactNumber="+1111111111")
    add_worker("w2", fullName="Worker Two")
    projects.create_project(project_name="P1", project_overview="first", workers=["w1", "w2", "ghost"])
    projects.create_project(project_name="P2", project_overview="second", workers=["w2"])

    result = projects.projects_for_worker(username="w1")

    assert result == [
        {
            "project_name": "P1",
            "description": "first",
            "workers": [
                {
                    "username": "w1",
                    "name": "Worker One",
                    "contact_number": "+1111111111",
                    "address": "X",
                    "dob": "1990-01-01",
                    "doj": "2020-01-01",
                    "role": "WORKER",
                },
                {
                    "username": "w2",
                    "name": "Worker Two",
                    "contact_number": "+1234567890",
                    "address": "X",
                    "dob": "1990-01-01",
                    "doj": "2020-01-01",
                    "role": "WORKER",
                },
            ],
        }
    ]
    assert [p["project_name"] for p in projects.projects_for_worker(username="w2")] == ["P1", "P2"]


def test_projects_for_worker_not_found_cases(projects):
    with pytest.raises(ValidationError):
        projects.projects_for_worker(username=None)
    with pytest.raises(NotFoundError, match="No projects found"):
        projects.projects_for_worker(username="w1")

    projects.create_project(project_name="P1", project_overview="o", workers=[])
    with pytest.raises(NotFoundError, match="for the given worker"):
        projects.projects_for_worker(username="w1")


def test_delete_project_keeps_attendance(projects, container, store):
    project_id = projects.create_project(project_name="P1", project_overview="o", workers=[])
    container.attendance_service.mark(
        worker_id="w1", project_name="P1", date="2024-01-01", work_description="d", image_path="img"
    )

    assert projects.delete_project(project_name="p1") == project_id
    assert store.get("projects") is None
    assert list(store.get("attendance/w1")) == ["P1"]

    with pytest.raises(NotFoundError):
        projects.delete_project(project_name="P1")


def test_worker_lists_must_hold_usernames(projects, add_worker):
    add_worker("w1")
    projects.create_project(project_name="P1", project_overview="o", workers=[])

    with pytest.raises(ValidationError) as exc:
        projects.replace_workers(project_name="P1", worker_usernames=["w1", {"u": 1}])
    assert exc.value.fields == ("workerUsernames",)

    with pytest.raises(ValidationError):
        projects.create_project(project_name="P2", project_overview="o", workers=[7])
