from __future__ import annotations

import logging

from ..common.validators import require_fields, require_strings
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .repository import CredentialRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: check a login against the stored credentials.

    Stateless: nothing is issued on success, the caller only learns whether
    the username/password/role triple matches.
    """

    def __init__(self, credentials: CredentialRepository):
        self._credentials = credentials

    def login(self, *, username: str, password: str, role: str) -> None:
        try:
            require_fields({"username": username, "password": password, "role": role})
        except ValidationError as e:
            raise ValidationError("Username, password, and role are required", fields=e.fields)
        require_strings({"username": username, "password": password, "role": role})

        credential = self._credentials.find_by_username(username)
        if not credential or credential.password != password:
            logger.info("Rejected login for %r", username)
            raise AuthenticationError("Invalid username or password.")

        if credential.role != role:
            logger.info("Rejected login for %r: role %s does not match", username, role)
            raise AuthorizationError("You do not have admin access")
