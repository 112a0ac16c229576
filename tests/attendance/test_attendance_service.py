from __future__ import annotations

import pytest

from src.site_attendance.site_attendance.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def attendance(container):
    container.project_service.create_project(project_name="P1", project_overview="o", workers=["w1"])
    return container.attendance_service


def _mark(service, **overrides):
    values = {
        "worker_id": "w1",
        "project_name": "P1",
        "date": "2024-01-01",
        "work_description": "d",
        "image_path": "img",
    }
    values.update(overrides)
    return service.mark(**values)


def test_same_day_twice_updates_single_entry(attendance, store):
    first = _mark(attendance)
    second = _mark(attendance, work_description="d2")

    assert first.created is True
    assert second.created is False
    assert second.entry_id == first.entry_id
    assert store.get("attendance/w1/P1") == {
        first.entry_id: {"Date": "2024-01-01", "workDescription": "d2", "imagePath": "img"}
    }


def test_each_date_gets_its_own_entry(attendance):
    _mark(attendance, date="2024-01-01")
    _mark(attendance, date="2024-01-02")

    entries = attendance.list_for_worker(worker_id="w1")["P1"]
    assert sorted(e["Date"] for e in entries.values()) == ["2024-01-01", "2024-01-02"]


def test_project_lookup_ignores_case_but_path_keeps_given_name(attendance, store):
    _mark(attendance, project_name="p1")
    assert list(store.get("attendance/w1")) == ["p1"]


def test_unknown_project_is_not_found(attendance, store):
    with pytest.raises(NotFoundError, match="Project not found"):
        _mark(attendance, project_name="P9")
    assert store.get("attendance") is None


def test_all_fields_required(attendance):
    with pytest.raises(ValidationError) as exc:
        _mark(attendance, image_path="", date=None)
    assert exc.value.fields == ("Date", "imagePath")


def test_project_name_must_be_a_valid_key(container, store):
    container.project_service.create_project(project_name="Phase 1.5", project_overview="o", workers=[])
    with pytest.raises(ValidationError):
        _mark(container.attendance_service, project_name="Phase 1.5")
    assert store.get("attendance") is None


def test_list_for_worker_without_entries(attendance):
    assert attendance.list_for_worker(worker_id="nobody") == {}
    with pytest.raises(ValidationError):
        attendance.list_for_worker(worker_id=None)


def test_key_fields_must_be_strings(attendance, store):
    with pytest.raises(ValidationError) as exc:
        _mark(attendance, project_name=7, date=20240101)
    assert exc.value.fields == ("projectName", "Date")
    assert store.get("attendance") is None
