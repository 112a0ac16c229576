from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .memory_store import InMemoryDocumentStore
from .store import DocumentStore

logger = logging.getLogger(__name__)

BACKENDS = ("firebase", "memory")


@dataclass(frozen=True)
class StoreConfig:
    backend: str
    credentials_path: str = ""
    database_url: str = ""
    app_name: str = "site-attendance"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "StoreConfig":
        backend = str(values.get("backend", "firebase")).lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unknown store backend {backend!r}, expected one of {BACKENDS}")
        return cls(
            backend=backend,
            credentials_path=str(values.get("credentials_path") or ""),
            database_url=str(values.get("database_url") or ""),
            app_name=str(values.get("app_name") or "site-attendance"),
        )


def connect_store(config: StoreConfig) -> DocumentStore:
    if config.backend == "memory":
        logger.warning("Using the in-memory store; data is lost on restart")
        return InMemoryDocumentStore()

    if not config.credentials_path or not config.database_url:
        raise ValueError("firebase backend needs credentials_path and database_url")

    # firebase_admin is only loaded for the firebase backend.
    from .firebase_store import FirebaseDocumentStore

    return FirebaseDocumentStore.connect(
        credentials_path=config.credentials_path,
        database_url=config.database_url,
        app_name=config.app_name,
    )
