from __future__ import annotations

from pydantic import BaseModel

from .assignment import AssignmentRead
from .session import StudySessionRead


class DashboardStatsRead(BaseModel):
    total_courses: int
    total_assignments: int
    completed_assignments: int
    completion_rate: int
    upcoming_deadlines: int
    today_sessions: int

    class Config:
        from_attributes = True


class DayProgressRead(BaseModel):
    completed: int
    total: int
    percent: int

    class Config:
        from_attributes = True


class UpcomingAssignmentRead(AssignmentRead):
    days_left: int


class DashboardRead(BaseModel):
    stats: DashboardStatsRead
    upcoming_assignments: list[UpcomingAssignmentRead]
    today_sessions: list[StudySessionRead]
    today_progress: DayProgressRead
