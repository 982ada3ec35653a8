from __future__ import annotations

from fastapi import APIRouter

from study_planner.api.v1.endpoints import assignments, auth, courses, dashboard, health, scheduler, sessions

api_router = APIRouter()
api_router.include_router(health.router, tags=["system"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(scheduler.router, prefix="/scheduler", tags=["scheduler"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
