from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or violates domain rules."""

    def __init__(self, message: str, *, fields: Sequence[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)


class ConflictError(DomainError):
    """Raised when a value that must be unique is already taken."""


class NotFoundError(DomainError):
    """Raised when the addressed entity does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class StoreError(Exception):
    """Raised when the underlying document store fails."""


class MalformedRecordError(StoreError):
    """Raised when a stored record lacks a field it is compared on."""
