from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import MalformedRecordError, ValidationError
from ..database.store import DocumentStore


def field_equals_ignoring_case(key: str, record: Mapping[str, Any], field: str, value: str) -> bool:
    """Compare ``record[field]`` with ``value`` case-insensitively.

    A record without the field, or holding something other than a string
    there, is a fault rather than a mismatch. A non-string ``value`` comes
    from the caller and is rejected as invalid input.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", fields=[field])
    if not isinstance(record, Mapping) or field not in record:
        raise MalformedRecordError(f"Record {key!r} has no {field!r} field")
    current = record[field]
    if not isinstance(current, str):
        raise MalformedRecordError(f"Record {key!r} has a non-string {field!r} field")
    return current.lower() == value.lower()


def value_exists(store: DocumentStore, collection: str, field: str, value: str) -> bool:
    """Checks whether ``value`` is already used as ``field`` in ``collection``.

    Reads the whole collection and scans it; an absent or empty collection
    holds no duplicates.
    """
    records = store.get(collection)
    if not records:
        return False
    return any(field_equals_ignoring_case(key, record, field, value) for key, record in records.items())
