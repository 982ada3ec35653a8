"""Application state: entities, command functions and the live holder."""

from . import models, store
from .holder import StateHolder
from .store import AppState

__all__ = [
    "AppState",
    "StateHolder",
    "models",
    "store",
]
