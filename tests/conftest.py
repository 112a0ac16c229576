from __future__ import annotations

import pytest

from src.site_attendance.site_attendance.container import build_container
from src.site_attendance.site_attendance.database.memory_store import InMemoryDocumentStore


def _worker_payload(**overrides) -> dict:
    payload = {
        "username": "w1",
        "password": "p",
        "role": "WORKER",
        "fullName": "A",
        "contactNumber": "+1234567890",
        "dob": "1990-01-01",
        "doj": "2020-01-01",
        "address": "X",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def worker_payload():
    return _worker_payload


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def container(store):
    return build_container(store=store, fanout_workers=4)


@pytest.fixture
def add_worker(container):
    def _add(username: str = "w1", **overrides) -> str:
        payload = _worker_payload(username=username, **overrides)
        return container.worker_service.create_worker(
            username=payload["username"],
            password=payload["password"],
            role=payload["role"],
            full_name=payload["fullName"],
            contact_number=payload["contactNumber"],
            dob=payload["dob"],
            doj=payload["doj"],
            address=payload["address"],
        )

    return _add


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.site_attendance.site_attendance.main import create_app

    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()
