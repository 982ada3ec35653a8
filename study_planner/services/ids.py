from __future__ import annotations

import itertools
import threading
import uuid
from typing import Protocol


class IdentifierAllocator(Protocol):
    """Hands out identifiers for newly created records."""

    def allocate(self) -> str: ...


class UuidAllocator:
    def allocate(self) -> str:
        return str(uuid.uuid4())


class SequentialAllocator:
    """Deterministic `prefix-1`, `prefix-2`, ... identifiers."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def allocate(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}-{value}"


__all__ = ["IdentifierAllocator", "SequentialAllocator", "UuidAllocator"]
