from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel

from .session import StudySessionRead


class ScheduleRunRequest(BaseModel):
    mode: Literal["append", "replace"] | None = None
    today: date | None = None
    dry_run: bool = False


class ScheduleRunResponse(BaseModel):
    mode: str
    dry_run: bool
    sessions: list[StudySessionRead]
    metrics: dict
    runtime_ms: float | None = None
