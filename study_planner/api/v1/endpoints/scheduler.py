from __future__ import annotations

import time

from fastapi import APIRouter, Depends, status

from study_planner.core.config import get_settings
from study_planner.scheduler import GreedyStudyScheduler
from study_planner.schemas import ScheduleRunRequest, ScheduleRunResponse, StudySessionRead
from study_planner.services.ids import IdentifierAllocator
from study_planner.services.scheduling import SchedulingService
from study_planner.state.holder import StateHolder, get_allocator, get_holder

router = APIRouter()

_scheduler = GreedyStudyScheduler()


def get_scheduling_service(allocator: IdentifierAllocator = Depends(get_allocator)) -> SchedulingService:
    return SchedulingService(scheduler=_scheduler, allocator=allocator)


@router.post("/run", response_model=ScheduleRunResponse, status_code=status.HTTP_202_ACCEPTED)
def run_schedule(
    payload: ScheduleRunRequest,
    holder: StateHolder = Depends(get_holder),
    service: SchedulingService = Depends(get_scheduling_service),
) -> ScheduleRunResponse:
    mode = payload.mode or get_settings().schedule_apply_mode

    start_time = time.perf_counter()
    with holder.begin() as state:
        new_state, sessions, metrics = service.run(state, today=payload.today, mode=mode)
        if not payload.dry_run:
            holder.commit(new_state)
    runtime_ms = (time.perf_counter() - start_time) * 1000

    return ScheduleRunResponse(
        mode=mode,
        dry_run=payload.dry_run,
        sessions=[StudySessionRead.model_validate(session, from_attributes=True) for session in sessions],
        metrics=metrics.to_dict(),
        runtime_ms=runtime_ms,
    )
