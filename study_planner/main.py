from __future__ import annotations

import logging

from fastapi import FastAPI

from study_planner.api.v1.router import api_router
from study_planner.core.config import get_settings
from study_planner.services.ids import IdentifierAllocator, UuidAllocator
from study_planner.state.holder import StateHolder


logger = logging.getLogger(__name__)

settings = get_settings()


def create_app(holder: StateHolder | None = None, allocator: IdentifierAllocator | None = None) -> FastAPI:
    """Construct the FastAPI application and configure routes."""

    app = FastAPI(title="Study Planner", version="0.1.0")
    app.state.holder = holder or StateHolder()
    app.state.allocator = allocator or UuidAllocator()
    app.include_router(api_router, prefix="/api/v1")

    logger.info("Study planner ready (env=%s, apply mode=%s)", settings.app_env, settings.schedule_apply_mode)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level)

    uvicorn.run(app, host="0.0.0.0", port=settings.app_port, log_level=settings.log_level.lower())
