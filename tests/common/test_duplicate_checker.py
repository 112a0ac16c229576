from __future__ import annotations

import pytest

from src.site_attendance.site_attendance.common.duplicate_checker import value_exists
from src.site_attendance.site_attendance.core.exceptions import MalformedRecordError, ValidationError


def test_empty_collection_has_no_duplicates(store):
    assert value_exists(store, "workers", "username", "admin") is False


@pytest.mark.parametrize("candidate", ["admin", "Admin", "ADMIN"])
def test_match_ignores_case(store, candidate):
    store.push("workers", {"username": "aDmIn"})
    assert value_exists(store, "workers", "username", candidate) is True


def test_no_match(store):
    store.push("workers", {"username": "w1"})
    store.push("workers", {"username": "w2"})
    assert value_exists(store, "workers", "username", "w3") is False


def test_record_without_field_is_a_fault(store):
    store.push("workers", {"fullName": "No Username"})
    with pytest.raises(MalformedRecordError):
        value_exists(store, "workers", "username", "w1")


def test_scan_stops_at_first_match(store):
    store.push("workers", {"username": "w1"})
    store.push("workers", {"fullName": "No Username"})
    assert value_exists(store, "workers", "username", "W1") is True


def test_non_string_candidate_is_invalid_input(store):
    store.push("workers", {"username": "w1"})
    with pytest.raises(ValidationError) as exc:
        value_exists(store, "workers", "username", 123)
    assert exc.value.fields == ("username",)
