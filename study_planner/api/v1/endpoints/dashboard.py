from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends

from study_planner.core.config import get_settings
from study_planner.schemas import (
    AssignmentRead,
    DashboardRead,
    DashboardStatsRead,
    DayProgressRead,
    StudySessionRead,
    UpcomingAssignmentRead,
)
from study_planner.services import dashboard as dashboard_service
from study_planner.state.holder import StateHolder, get_holder

router = APIRouter()


@router.get("/", response_model=DashboardRead)
def get_dashboard(today: date | None = None, holder: StateHolder = Depends(get_holder)) -> DashboardRead:
    settings = get_settings()
    state = holder.state
    today = today or date.today()

    stats = dashboard_service.dashboard_stats(state, today, window_days=settings.upcoming_window_days)
    upcoming = [
        UpcomingAssignmentRead(
            **AssignmentRead.model_validate(assignment, from_attributes=True).model_dump(),
            days_left=dashboard_service.days_left(assignment, today),
        )
        for assignment in dashboard_service.upcoming_assignments(state, limit=settings.upcoming_limit)
    ]
    return DashboardRead(
        stats=DashboardStatsRead.model_validate(stats, from_attributes=True),
        upcoming_assignments=upcoming,
        today_sessions=[
            StudySessionRead.model_validate(session, from_attributes=True)
            for session in dashboard_service.sessions_on(state, today)
        ],
        today_progress=DayProgressRead.model_validate(dashboard_service.day_progress(state, today), from_attributes=True),
    )
