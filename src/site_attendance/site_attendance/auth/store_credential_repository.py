from __future__ import annotations

from typing import Optional

from ..core import constants
from ..core.enums import MatchPolicy, Role
from ..database.store import DocumentStore, child_path
from ..database.workflows import find_entry
from .model import Credential
from .repository import CredentialRepository


class StoreCredentialRepository(CredentialRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def find_by_username(self, username: str, *, policy: MatchPolicy = MatchPolicy.CASE_INSENSITIVE) -> Optional[Credential]:
        entry = find_entry(self._store, constants.CREDENTIALS, "username", username, policy=policy)
        if not entry:
            return None
        return Credential.from_record(*entry)

    def add(self, *, username: str, password: str, role: Role) -> str:
        return self._store.push(
            constants.CREDENTIALS,
            {"username": username, "password": password, "role": Role(role).value},
        )

    def remove_by_username(self, username: str) -> Optional[str]:
        entry = find_entry(self._store, constants.CREDENTIALS, "username", username, policy=MatchPolicy.EXACT)
        if not entry:
            return None
        key, _ = entry
        self._store.remove(child_path(constants.CREDENTIALS, key))
        return key
