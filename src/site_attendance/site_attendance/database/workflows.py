"""Generic record workflows over a DocumentStore.

Every entity manager follows the same few shapes: create a record unless a
unique field is taken, look a record up by a secondary field and then
update or remove it, upsert by a natural key, and scrub a value out of list
fields. None of these run in a store transaction; each step is a separate
store call and completed steps stay in place when a later one fails.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..common.duplicate_checker import field_equals_ignoring_case, value_exists
from ..common.validators import require_fields
from ..core.enums import MatchPolicy
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .locks import KeyedLocks
from .store import DocumentStore, child_path

logger = logging.getLogger(__name__)

Entry = Tuple[str, dict]


def _guard(locks: Optional[KeyedLocks], key: str):
    return locks.hold(key) if locks is not None else nullcontext()


def create_if_absent(
    store: DocumentStore,
    collection: str,
    record: Mapping[str, Any],
    *,
    unique_field: str,
    required: Iterable[str] = (),
    conflict_message: Optional[str] = None,
    locks: Optional[KeyedLocks] = None,
) -> str:
    require_fields(record, required)
    require_fields(record, [unique_field])
    if not isinstance(record[unique_field], str):
        raise ValidationError(f"{unique_field} must be a string", fields=[unique_field])

    with _guard(locks, collection):
        if value_exists(store, collection, unique_field, record[unique_field]):
            raise ConflictError(conflict_message or f"{unique_field} already exists")
        key = store.push(collection, dict(record))

    logger.debug("Created %s/%s", collection, key)
    return key


def find_entry(
    store: DocumentStore,
    collection: str,
    field: str,
    value: Any,
    *,
    policy: MatchPolicy = MatchPolicy.CASE_INSENSITIVE,
) -> Optional[Entry]:
    """Return the first ``(key, record)`` whose ``field`` matches ``value``.

    EXACT lookups are answered by the store's child query, so records without
    the field simply do not match. CASE_INSENSITIVE lookups scan the whole
    collection and fault on records that lack the field.
    """
    if policy is MatchPolicy.EXACT:
        for key, record in store.query_by_child(collection, field, value).items():
            return key, record
        return None

    records = store.get(collection) or {}
    for key, record in records.items():
        if field_equals_ignoring_case(key, record, field, value):
            return key, record
    return None


def require_entry(
    store: DocumentStore,
    collection: str,
    field: str,
    value: Any,
    *,
    policy: MatchPolicy = MatchPolicy.CASE_INSENSITIVE,
    not_found_message: str = "Record not found",
) -> Entry:
    entry = find_entry(store, collection, field, value, policy=policy)
    if entry is None:
        raise NotFoundError(not_found_message)
    return entry


def find_then_update(
    store: DocumentStore,
    collection: str,
    field: str,
    value: Any,
    changes: Mapping[str, Any],
    *,
    policy: MatchPolicy = MatchPolicy.CASE_INSENSITIVE,
    not_found_message: str = "Record not found",
) -> str:
    key, _ = require_entry(store, collection, field, value, policy=policy, not_found_message=not_found_message)
    store.update(child_path(collection, key), dict(changes))
    return key


def find_then_remove(
    store: DocumentStore,
    collection: str,
    field: str,
    value: Any,
    *,
    policy: MatchPolicy = MatchPolicy.CASE_INSENSITIVE,
    not_found_message: str = "Record not found",
) -> str:
    key, _ = require_entry(store, collection, field, value, policy=policy, not_found_message=not_found_message)
    store.remove(child_path(collection, key))
    return key


def upsert_by_child(
    store: DocumentStore,
    path: str,
    field: str,
    value: Any,
    record: Mapping[str, Any],
    *,
    locks: Optional[KeyedLocks] = None,
) -> Tuple[str, bool]:
    """Update the entry under ``path`` whose ``field`` equals ``value`` or push a new one.

    Returns ``(key, created)``.
    """
    with _guard(locks, path):
        existing = store.query_by_child(path, field, value)
        if existing:
            key = next(iter(existing))
            store.update(f"{path}/{key}", dict(record))
            return key, False
        return store.push(path, dict(record)), True


def scrub_from_lists(store: DocumentStore, collection: str, list_field: str, value: Any) -> List[str]:
    """Remove ``value`` from ``list_field`` of every record in ``collection``.

    Records are rewritten one at a time; returns the keys that changed.
    """
    records = store.get(collection) or {}
    changed: List[str] = []
    for key, record in records.items():
        items = record.get(list_field) if isinstance(record, dict) else None
        if isinstance(items, Mapping):
            items = list(items.values())
        if not items or value not in items:
            continue
        store.update(child_path(collection, key), {list_field: [item for item in items if item != value]})
        changed.append(key)
    return changed
