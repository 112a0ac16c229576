from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol

from ..core.exceptions import ValidationError

FORBIDDEN_KEY_CHARS = frozenset(".#$[]/")


class DocumentStore(Protocol):
    """Interface of the hierarchical key/value tree behind every repository.

    Paths are slash-delimited; ``""`` addresses the root. Collections are maps
    from store-generated keys to records.
    """

    def get(self, path: str = "") -> Any:
        """Return the subtree at ``path`` or None when nothing is stored there."""
        raise NotImplementedError

    def query_by_child(self, path: str, field: str, value: Any) -> Dict[str, Any]:
        """Return the children of ``path`` whose ``field`` equals ``value`` exactly."""
        raise NotImplementedError

    def push(self, path: str, value: Any) -> str:
        """Append ``value`` under a newly generated key and return that key."""
        raise NotImplementedError

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        """Merge ``values`` into the node at ``path``."""
        raise NotImplementedError

    def remove(self, path: str) -> None:
        raise NotImplementedError


def split_path(path: Optional[str]) -> list[str]:
    return [segment for segment in (path or "").split("/") if segment]


def child_path(*segments: str) -> str:
    """Join key segments into a store path.

    Segments that come from user input (project names, worker ids) must be
    valid keys on their own: they cannot be empty or contain ``. # $ [ ] /``.
    """
    out: list[str] = []
    for segment in segments:
        segment = str(segment)
        if not segment or FORBIDDEN_KEY_CHARS.intersection(segment):
            raise ValidationError(f"Invalid key segment: {segment!r}")
        out.append(segment)
    return "/".join(out)
