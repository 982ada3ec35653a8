from __future__ import annotations

from datetime import date
from typing import ClassVar

from pydantic import BaseModel, Field

from study_planner.state.models import Priority

from .patch import PatchModel


class AssignmentBase(BaseModel):
    course_id: str
    title: str = Field(min_length=1)
    description: str | None = None
    due_date: date
    priority: Priority = Priority.MEDIUM
    estimated_hours: float = Field(ge=0.5, le=100)


class AssignmentCreate(AssignmentBase):
    completed: bool = False


class AssignmentUpdate(PatchModel):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "due_date", "priority", "estimated_hours", "completed")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    due_date: date | None = None
    priority: Priority | None = None
    estimated_hours: float | None = Field(default=None, ge=0.5, le=100)
    completed: bool | None = None


class AssignmentRead(AssignmentBase):
    id: str
    completed: bool

    class Config:
        from_attributes = True


class AssignmentCollection(BaseModel):
    items: list[AssignmentRead]
