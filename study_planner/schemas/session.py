from __future__ import annotations

import datetime as dt
from typing import ClassVar

from pydantic import BaseModel, field_serializer, model_validator

from .patch import PatchModel


class StudySessionBase(BaseModel):
    assignment_id: str
    date: dt.date
    start_time: dt.time
    end_time: dt.time


class StudySessionCreate(StudySessionBase):
    @model_validator(mode="after")
    def check_window(self) -> StudySessionCreate:
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class StudySessionUpdate(PatchModel):
    required_fields: ClassVar[tuple[str, ...]] = ("date", "start_time", "end_time", "completed")

    date: dt.date | None = None
    start_time: dt.time | None = None
    end_time: dt.time | None = None
    completed: bool | None = None


class StudySessionRead(StudySessionBase):
    id: str
    completed: bool

    class Config:
        from_attributes = True

    @field_serializer("start_time", "end_time")
    def format_clock(self, value: dt.time) -> str:
        return value.strftime("%H:%M")


class StudySessionCollection(BaseModel):
    items: list[StudySessionRead]
