from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, time
from typing import Any, Literal

from study_planner.services.ids import IdentifierAllocator
from study_planner.state.models import Assignment, Course, Priority, StudySession, User

logger = logging.getLogger(__name__)

ApplyMode = Literal["append", "replace"]


@dataclass(frozen=True, slots=True)
class AppState:
    """Snapshot of everything the planner knows about the signed-in user."""

    user: User | None = None
    courses: tuple[Course, ...] = ()
    assignments: tuple[Assignment, ...] = ()
    study_sessions: tuple[StudySession, ...] = ()

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


def login(state: AppState, user: User) -> AppState:
    return replace(state, user=user)


def logout(state: AppState) -> AppState:
    return AppState()


def get_course(state: AppState, course_id: str) -> Course | None:
    return next((course for course in state.courses if course.id == course_id), None)


def get_assignment(state: AppState, assignment_id: str) -> Assignment | None:
    return next((assignment for assignment in state.assignments if assignment.id == assignment_id), None)


def get_study_session(state: AppState, session_id: str) -> StudySession | None:
    return next((session for session in state.study_sessions if session.id == session_id), None)


def course_assignments(state: AppState, course_id: str) -> list[Assignment]:
    return [assignment for assignment in state.assignments if assignment.course_id == course_id]


def add_course(
    state: AppState,
    *,
    allocator: IdentifierAllocator,
    name: str,
    color: str,
    credits: int,
    professor: str | None = None,
) -> tuple[AppState, Course]:
    course = Course(id=allocator.allocate(), name=name, color=color, credits=credits, professor=professor)
    return replace(state, courses=state.courses + (course,)), course


def update_course(state: AppState, course_id: str, **changes: Any) -> AppState:
    courses = tuple(replace(course, **changes) if course.id == course_id else course for course in state.courses)
    return replace(state, courses=courses)


def delete_course(state: AppState, course_id: str) -> AppState:
    """Remove a course together with its assignments and their sessions."""

    removed = {assignment.id for assignment in state.assignments if assignment.course_id == course_id}
    return replace(
        state,
        courses=tuple(course for course in state.courses if course.id != course_id),
        assignments=tuple(assignment for assignment in state.assignments if assignment.id not in removed),
        study_sessions=tuple(session for session in state.study_sessions if session.assignment_id not in removed),
    )


def add_assignment(
    state: AppState,
    *,
    allocator: IdentifierAllocator,
    course_id: str,
    title: str,
    due_date: date,
    priority: Priority | str,
    estimated_hours: float,
    description: str | None = None,
    completed: bool = False,
) -> tuple[AppState, Assignment]:
    assignment = Assignment(
        id=allocator.allocate(),
        course_id=course_id,
        title=title,
        due_date=due_date,
        priority=Priority(priority),
        estimated_hours=estimated_hours,
        completed=completed,
        description=description,
    )
    return replace(state, assignments=state.assignments + (assignment,)), assignment


def update_assignment(state: AppState, assignment_id: str, **changes: Any) -> AppState:
    if "priority" in changes:
        changes["priority"] = Priority(changes["priority"])
    assignments = tuple(
        replace(assignment, **changes) if assignment.id == assignment_id else assignment
        for assignment in state.assignments
    )
    return replace(state, assignments=assignments)


def delete_assignment(state: AppState, assignment_id: str) -> AppState:
    return replace(
        state,
        assignments=tuple(assignment for assignment in state.assignments if assignment.id != assignment_id),
        study_sessions=tuple(session for session in state.study_sessions if session.assignment_id != assignment_id),
    )


def add_study_session(
    state: AppState,
    *,
    allocator: IdentifierAllocator,
    assignment_id: str,
    date: date,
    start_time: time,
    end_time: time,
    completed: bool = False,
) -> tuple[AppState, StudySession]:
    session = StudySession(
        id=allocator.allocate(),
        assignment_id=assignment_id,
        date=date,
        start_time=start_time,
        end_time=end_time,
        completed=completed,
    )
    return replace(state, study_sessions=state.study_sessions + (session,)), session


def update_study_session(state: AppState, session_id: str, **changes: Any) -> AppState:
    sessions = tuple(
        replace(session, **changes) if session.id == session_id else session for session in state.study_sessions
    )
    return replace(state, study_sessions=sessions)


def delete_study_session(state: AppState, session_id: str) -> AppState:
    return replace(
        state,
        study_sessions=tuple(session for session in state.study_sessions if session.id != session_id),
    )


def apply_sessions(state: AppState, sessions: Iterable[StudySession], mode: ApplyMode = "append") -> AppState:
    """Insert generated sessions, either on top of the existing ones or in their place."""

    new_sessions = tuple(sessions)
    if mode == "append":
        return replace(state, study_sessions=state.study_sessions + new_sessions)
    if mode == "replace":
        logger.debug("Discarding %d existing study sessions", len(state.study_sessions))
        return replace(state, study_sessions=new_sessions)
    raise ValueError(f"unknown apply mode: {mode!r}")


__all__ = [
    "AppState",
    "ApplyMode",
    "add_assignment",
    "add_course",
    "add_study_session",
    "apply_sessions",
    "course_assignments",
    "delete_assignment",
    "delete_course",
    "delete_study_session",
    "get_assignment",
    "get_course",
    "get_study_session",
    "login",
    "logout",
    "update_assignment",
    "update_course",
    "update_study_session",
]
