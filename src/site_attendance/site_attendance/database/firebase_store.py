from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping

import firebase_admin
from firebase_admin import credentials, db
from firebase_admin.exceptions import FirebaseError

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)

# Error text the Realtime Database returns for an ordered query on a path
# whose rules declare no .indexOn for the child.
INDEX_NOT_DEFINED = "Index not defined"


@contextmanager
def _store_call(operation: str, path: str) -> Iterator[None]:
    try:
        yield
    except FirebaseError as e:
        raise StoreError(f"Store {operation} failed at {path or '/'!r}: {e}") from e


def _children_matching(node: Any, field: str, value: Any) -> Dict[str, Any]:
    if not isinstance(node, Mapping):
        return {}
    return {
        key: record
        for key, record in node.items()
        if isinstance(record, Mapping) and field in record and record[field] == value
    }


class FirebaseDocumentStore:
    """DocumentStore backed by the Firebase Realtime Database."""

    def __init__(self, app: firebase_admin.App):
        self._app = app

    @classmethod
    def connect(cls, *, credentials_path: str, database_url: str, app_name: str = "site-attendance") -> "FirebaseDocumentStore":
        try:
            app = firebase_admin.get_app(app_name)
        except ValueError:
            app = firebase_admin.initialize_app(
                credentials.Certificate(credentials_path),
                {"databaseURL": database_url},
                name=app_name,
            )
            logger.info("Initialized firebase app %r for %s", app_name, database_url)
        return cls(app)

    def _ref(self, path: str) -> db.Reference:
        return db.reference(path or "/", app=self._app)

    def get(self, path: str = "") -> Any:
        with _store_call("read", path):
            return self._ref(path).get()

    def query_by_child(self, path: str, field: str, value: Any) -> Dict[str, Any]:
        """Server-side equality query, filtered locally when the index is missing.

        Deploy ``database.rules.json`` to keep these queries on the server.
        """
        ref = self._ref(path)
        try:
            result = ref.order_by_child(field).equal_to(value).get()
        except FirebaseError as e:
            if INDEX_NOT_DEFINED not in str(e):
                raise StoreError(f"Store query failed at {path or '/'!r}: {e}") from e
            logger.warning("No index on %r under %r, filtering locally", field, path or "/")
            with _store_call("read", path):
                result = _children_matching(ref.get(), field, value)
        return dict(result or {})

    def push(self, path: str, value: Any) -> str:
        with _store_call("push", path):
            return self._ref(path).push(value).key

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        if not values:
            return
        with _store_call("update", path):
            self._ref(path).update(dict(values))

    def remove(self, path: str) -> None:
        with _store_call("remove", path):
            self._ref(path).delete()
