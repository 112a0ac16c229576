from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import MatchPolicy, Role
from .model import Credential


class CredentialRepository(Protocol):
    def find_by_username(self, username: str, *, policy: MatchPolicy = MatchPolicy.CASE_INSENSITIVE) -> Optional[Credential]:
        raise NotImplementedError

    def add(self, *, username: str, password: str, role: Role) -> str:
        raise NotImplementedError

    def remove_by_username(self, username: str) -> Optional[str]:
        """Remove the credential with exactly this username; None when absent."""

        raise NotImplementedError
