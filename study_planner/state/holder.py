from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request

from study_planner.services.ids import IdentifierAllocator
from study_planner.state.store import AppState


class StateHolder:
    """Owns the current AppState of a running application.

    Reads see whatever state was last committed. Writers wrap their
    read-modify-commit sequence in ``begin()`` so concurrent commands do not
    overwrite each other.
    """

    def __init__(self, state: AppState | None = None) -> None:
        self._state = state or AppState()
        self._lock = threading.RLock()

    @property
    def state(self) -> AppState:
        return self._state

    @contextmanager
    def begin(self) -> Iterator[AppState]:
        with self._lock:
            yield self._state

    def commit(self, state: AppState) -> None:
        with self._lock:
            self._state = state


def get_holder(request: Request) -> StateHolder:
    """FastAPI dependency returning the application's state holder."""

    return request.app.state.holder


def get_allocator(request: Request) -> IdentifierAllocator:
    return request.app.state.allocator
