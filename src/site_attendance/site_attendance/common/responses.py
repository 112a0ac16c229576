from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict

from flask import Request, jsonify

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (ConflictError, 400),
    (NotFoundError, 404),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
)


def status_for(error: DomainError) -> int:
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def json_body(request: Request) -> Dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def json_endpoint(failure_message: str, *, message_key: str = "error"):
    """Convert exceptions raised by a view into JSON error responses.

    Domain errors keep their message and map to 4xx; anything else is logged
    and answered with ``failure_message`` and a 500.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify({message_key: str(e)}), status_for(e)
            except Exception:
                logger.exception("%s: unexpected failure", view.__name__)
                return jsonify({message_key: failure_message}), 500

        return wrapper

    return decorator
