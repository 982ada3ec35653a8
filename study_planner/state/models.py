from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def weight(self) -> int:
        return PRIORITY_WEIGHTS[self]


PRIORITY_WEIGHTS: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


@dataclass(frozen=True, slots=True)
class User:
    """Signed-in identity; there is no real authentication behind it."""

    id: str
    email: str
    name: str


@dataclass(frozen=True, slots=True)
class Course:
    """Course the user is enrolled in."""

    id: str
    name: str
    color: str
    credits: int
    professor: str | None = None


@dataclass(frozen=True, slots=True)
class Assignment:
    """Gradable piece of work belonging to a course."""

    id: str
    course_id: str
    title: str
    due_date: date
    priority: Priority
    estimated_hours: float
    completed: bool = False
    description: str | None = None


@dataclass(frozen=True, slots=True)
class StudySession:
    """Block of time reserved for working on one assignment."""

    id: str
    assignment_id: str
    date: date
    start_time: time
    end_time: time
    completed: bool = False
