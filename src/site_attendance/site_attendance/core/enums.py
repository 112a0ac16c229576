from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for the login role check."""

    WORKER = "WORKER"
    ADMIN = "ADMIN"


class MatchPolicy(str, Enum):
    """How a lookup compares a stored field against the requested value."""

    CASE_INSENSITIVE = "case_insensitive"
    EXACT = "exact"
