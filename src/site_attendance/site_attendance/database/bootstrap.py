from __future__ import annotations

import logging
from dataclasses import dataclass

from ..common.duplicate_checker import value_exists
from ..core import constants
from ..core.enums import Role
from .store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    admin_worker_created: bool
    admin_credential_created: bool


def ensure_default_admin(store: DocumentStore, *, password: str) -> SeedResult:
    """Make sure an administrator can log in on a fresh store.

    The admin roster entry is only added when the workers collection does not
    exist at all; the credential is added whenever no ``admin`` credential is
    found. Running it again changes nothing.
    """
    worker_created = False
    if not store.get(constants.WORKERS):
        store.push(
            constants.WORKERS,
            {
                "username": constants.DEFAULT_ADMIN_USERNAME,
                "role": Role.ADMIN.value,
                **constants.DEFAULT_ADMIN_PROFILE,
            },
        )
        worker_created = True
        logger.info("Created default admin worker")

    credential_created = False
    if not value_exists(store, constants.CREDENTIALS, "username", constants.DEFAULT_ADMIN_USERNAME):
        store.push(
            constants.CREDENTIALS,
            {
                "username": constants.DEFAULT_ADMIN_USERNAME,
                "password": password,
                "role": Role.ADMIN.value,
            },
        )
        credential_created = True
        logger.info("Created default admin login credentials")

    return SeedResult(admin_worker_created=worker_created, admin_credential_created=credential_created)
