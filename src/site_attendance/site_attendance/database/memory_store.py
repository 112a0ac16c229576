from __future__ import annotations

import copy
import random
import threading
import time
from typing import Any, Callable, Dict, Mapping, Optional

from .store import split_path

PUSH_CHARS = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"


class PushKeyGenerator:
    """Generate chronologically ordered 20-char keys like the Realtime Database.

    The first 8 chars encode the millisecond timestamp, the remaining 12 are
    random; keys generated within the same millisecond increment the random
    part so they still sort in creation order.
    """

    def __init__(self, *, clock: Callable[[], float] = time.time, rng: Optional[random.Random] = None):
        self._clock = clock
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._last_ms = -1
        self._last_rand = [0] * 12

    def __call__(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            if now_ms == self._last_ms:
                i = 11
                while i >= 0 and self._last_rand[i] == 63:
                    self._last_rand[i] = 0
                    i -= 1
                if i >= 0:
                    self._last_rand[i] += 1
            else:
                self._last_rand = [self._rng.randrange(64) for _ in range(12)]
            self._last_ms = now_ms

            stamp = []
            for _ in range(8):
                stamp.append(PUSH_CHARS[now_ms % 64])
                now_ms //= 64
            return "".join(reversed(stamp)) + "".join(PUSH_CHARS[n] for n in self._last_rand)


def _prune(value: Any) -> Any:
    """Drop None and empty containers, as the Realtime Database never stores them."""
    if isinstance(value, Mapping):
        out = {}
        for key, child in value.items():
            child = _prune(child)
            if child is not None:
                out[str(key)] = child
        return out or None
    if isinstance(value, (list, tuple)):
        items = [_prune(child) for child in value]
        items = [child for child in items if child is not None]
        return items or None
    return value


class InMemoryDocumentStore:
    """Thread-safe nested-dict tree implementing the DocumentStore interface."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None, *, key_factory: Optional[Callable[[], str]] = None):
        self._root: Dict[str, Any] = _prune(copy.deepcopy(dict(initial or {}))) or {}
        self._keys = key_factory or PushKeyGenerator()
        self._lock = threading.RLock()

    def _node(self, path: str) -> Any:
        node: Any = self._root
        for segment in split_path(path):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    def _parent_for_write(self, segments: list[str]) -> Dict[str, Any]:
        node = self._root
        for segment in segments:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        return node

    def _set(self, path: str, value: Any) -> None:
        segments = split_path(path)
        value = _prune(copy.deepcopy(value))
        if not segments:
            self._root = value if isinstance(value, dict) else {}
            return
        if value is None:
            self._delete(segments)
            return
        parent = self._parent_for_write(segments[:-1])
        parent[segments[-1]] = value

    def _delete(self, segments: list[str]) -> None:
        trail = []
        node: Any = self._root
        for segment in segments[:-1]:
            if not isinstance(node, dict) or segment not in node:
                return
            trail.append((node, segment))
            node = node[segment]
        if isinstance(node, dict):
            node.pop(segments[-1], None)
        # Empty parents disappear with their last child.
        for parent, segment in reversed(trail):
            if parent[segment]:
                break
            del parent[segment]

    def get(self, path: str = "") -> Any:
        with self._lock:
            node = self._node(path)
            if node == {}:
                return None
            return copy.deepcopy(node)

    def query_by_child(self, path: str, field: str, value: Any) -> Dict[str, Any]:
        with self._lock:
            node = self._node(path)
            if not isinstance(node, dict):
                return {}
            return {
                key: copy.deepcopy(record)
                for key, record in node.items()
                if isinstance(record, dict) and field in record and record[field] == value
            }

    def push(self, path: str, value: Any) -> str:
        with self._lock:
            key = self._keys()
            self._set("/".join(split_path(path) + [key]), value)
            return key

    def update(self, path: str, values: Mapping[str, Any]) -> None:
        with self._lock:
            base = split_path(path)
            for key, value in values.items():
                self._set("/".join(base + split_path(key)), value)

    def remove(self, path: str) -> None:
        with self._lock:
            segments = split_path(path)
            if not segments:
                self._root = {}
                return
            self._delete(segments)
