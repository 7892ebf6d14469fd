"""Template cache with an injectable expiry policy.

Entries are inserted whole under a lock, so concurrent readers never see a
half-written entry. Two callers that miss on the same id may both parse and
insert; the last write wins, which is safe because parsing is deterministic.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Protocol, runtime_checkable

from .models import Template


@runtime_checkable
class TemplateCache(Protocol):
    """Key/value store for parsed templates, keyed by template id."""

    def get(self, template_id: str) -> Template | None: ...

    def set(self, template_id: str, template: Template) -> None: ...

    def delete(self, template_id: str) -> bool: ...

    def clear(self) -> None: ...

    def __contains__(self, template_id: object) -> bool: ...

    def __len__(self) -> int: ...


@dataclass(frozen=True)
class _Entry:
    template: Template
    stored_at: float


class InMemoryTemplateCache:
    """Process-local template cache.

    Args:
        ttl_seconds: Entry lifetime. ``None`` keeps entries until cleared.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(self, ttl_seconds: float | None = None, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def _expired(self, entry: _Entry) -> bool:
        return self.ttl_seconds is not None and self._clock() - entry.stored_at >= self.ttl_seconds

    def get(self, template_id: str) -> Template | None:
        with self._lock:
            entry = self._entries.get(template_id)
            if entry is None:
                return None
            if self._expired(entry):
                del self._entries[template_id]
                return None
            return entry.template

    def set(self, template_id: str, template: Template) -> None:
        with self._lock:
            self._entries[template_id] = _Entry(template, self._clock())

    def delete(self, template_id: str) -> bool:
        with self._lock:
            return self._entries.pop(template_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, template_id: object) -> bool:
        return isinstance(template_id, str) and self.get(template_id) is not None

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for e in self._entries.values() if not self._expired(e))

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            keys = [k for k, e in self._entries.items() if not self._expired(e)]
        return iter(keys)
