from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta

from study_planner.state.models import Assignment, StudySession
from study_planner.state.store import AppState, course_assignments


@dataclass(slots=True)
class DashboardStats:
    total_courses: int
    total_assignments: int
    completed_assignments: int
    completion_rate: int
    upcoming_deadlines: int
    today_sessions: int


@dataclass(slots=True)
class DayProgress:
    completed: int
    total: int
    percent: int


@dataclass(slots=True)
class CourseSummary:
    course_id: str
    total: int
    completed: int
    upcoming: int


def _percent(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    # Half-up rounding, not banker's rounding.
    return math.floor(part / whole * 100 + 0.5)


def dashboard_stats(state: AppState, today: date, *, window_days: int = 7) -> DashboardStats:
    """Headline counters; upcoming deadlines include overdue work."""

    horizon = today + timedelta(days=window_days)
    completed = sum(1 for assignment in state.assignments if assignment.completed)
    upcoming = sum(
        1 for assignment in state.assignments if not assignment.completed and assignment.due_date <= horizon
    )
    return DashboardStats(
        total_courses=len(state.courses),
        total_assignments=len(state.assignments),
        completed_assignments=completed,
        completion_rate=_percent(completed, len(state.assignments)),
        upcoming_deadlines=upcoming,
        today_sessions=len(sessions_on(state, today)),
    )


def upcoming_assignments(state: AppState, *, limit: int = 5) -> list[Assignment]:
    pending = [assignment for assignment in state.assignments if not assignment.completed]
    pending.sort(key=lambda assignment: assignment.due_date)
    return pending[:limit]


def sessions_on(state: AppState, day: date) -> list[StudySession]:
    sessions = [session for session in state.study_sessions if session.date == day]
    sessions.sort(key=lambda session: session.start_time)
    return sessions


def day_progress(state: AppState, day: date) -> DayProgress:
    sessions = sessions_on(state, day)
    completed = sum(1 for session in sessions if session.completed)
    return DayProgress(completed=completed, total=len(sessions), percent=_percent(completed, len(sessions)))


def days_left(assignment: Assignment, today: date) -> int:
    return (assignment.due_date - today).days


def course_summary(state: AppState, course_id: str, today: date) -> CourseSummary:
    assignments = course_assignments(state, course_id)
    return CourseSummary(
        course_id=course_id,
        total=len(assignments),
        completed=sum(1 for assignment in assignments if assignment.completed),
        upcoming=sum(1 for assignment in assignments if not assignment.completed and assignment.due_date >= today),
    )
