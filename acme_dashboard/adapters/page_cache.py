"""
Page cache and revalidation adapters.

Rendered route bodies are cached per path; mutations call
``revalidate_path`` so the next read of that path goes back to the store.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol


class MonotonicClock(Protocol):
    def monotonic_seconds(self) -> float: ...


# ═══════════════════════════════════════════════════════════════════════════
# REVALIDATION ADAPTER (base)
# ═══════════════════════════════════════════════════════════════════════════


class RevalidationAdapter(ABC):
    """
    Abstract base class for revalidation adapters.

    Concrete implementations handle the cache they front.
    """

    @abstractmethod
    def revalidate_path(self, path: str) -> bool:
        """Revalidate by path."""
        pass


# ═══════════════════════════════════════════════════════════════════════════
# IN-MEMORY PAGE CACHE
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class _Entry:
    body: Any
    stored_at: float


class InMemoryPageCache(RevalidationAdapter):
    """
    Process-local cache of rendered bodies keyed by route path.

    Entries expire after ``ttl_seconds``; a ttl of 0 keeps entries until
    they are revalidated.
    """

    def __init__(self, clock: MonotonicClock, ttl_seconds: int = 0) -> None:
        self._clock = clock
        self._ttl_seconds = ttl_seconds
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(path)
            if entry is None:
                return None
            age = self._clock.monotonic_seconds() - entry.stored_at
            if self._ttl_seconds and age >= self._ttl_seconds:
                del self._entries[path]
                return None
            return entry.body

    def put(self, path: str, body: Any) -> None:
        with self._lock:
            self._entries[path] = _Entry(body=body, stored_at=self._clock.monotonic_seconds())

    def revalidate_path(self, path: str) -> bool:
        """Drop the cached body for ``path``. Always triggers."""
        with self._lock:
            self._entries.pop(path, None)
        return True


# ═══════════════════════════════════════════════════════════════════════════
# STUB ADAPTER (for testing and development)
# ═══════════════════════════════════════════════════════════════════════════


class StubRevalidationAdapter(RevalidationAdapter):
    """
    Stub adapter for testing.

    Records all revalidation calls without performing actual revalidation.
    """

    def __init__(self) -> None:
        self.revalidated_paths: list[str] = []

    def revalidate_path(self, path: str) -> bool:
        """Record path revalidation."""
        self.revalidated_paths.append(path)
        return True

    def reset(self) -> None:
        """Reset recorded calls."""
        self.revalidated_paths = []


__all__ = [
    "InMemoryPageCache",
    "RevalidationAdapter",
    "StubRevalidationAdapter",
]
