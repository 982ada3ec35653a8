from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from .patch import PatchModel

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class CourseBase(BaseModel):
    name: str = Field(min_length=1)
    color: str = Field(default="#3b82f6", pattern=HEX_COLOR)
    credits: int = Field(ge=1, le=10)
    professor: str | None = None


class CourseCreate(CourseBase):
    pass


class CourseUpdate(PatchModel):
    required_fields: ClassVar[tuple[str, ...]] = ("name", "color", "credits")

    name: str | None = Field(default=None, min_length=1)
    color: str | None = Field(default=None, pattern=HEX_COLOR)
    credits: int | None = Field(default=None, ge=1, le=10)
    professor: str | None = None


class CourseRead(CourseBase):
    id: str

    class Config:
        from_attributes = True


class CourseCollection(BaseModel):
    items: list[CourseRead]


class CourseSummaryRead(BaseModel):
    course_id: str
    total: int
    completed: int
    upcoming: int

    class Config:
        from_attributes = True
