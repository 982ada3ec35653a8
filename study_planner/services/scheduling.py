from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from study_planner.scheduler.greedy import (
    GreedyStudyScheduler,
    ScheduleRequest,
    ScheduleResult,
    SessionProposal,
)
from study_planner.services.ids import IdentifierAllocator
from study_planner.state.models import Assignment, StudySession
from study_planner.state.store import AppState, ApplyMode, apply_sessions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SchedulingMetrics:
    considered_count: int
    skipped_completed_count: int
    session_count: int
    planned_hours: float
    first_session_date: date | None
    last_session_date: date | None

    def to_dict(self) -> dict[str, int | float | str | None]:
        return {
            "considered_count": self.considered_count,
            "skipped_completed_count": self.skipped_completed_count,
            "session_count": self.session_count,
            "planned_hours": self.planned_hours,
            "first_session_date": self.first_session_date.isoformat() if self.first_session_date else None,
            "last_session_date": self.last_session_date.isoformat() if self.last_session_date else None,
        }


class SchedulingService:
    """Runs the scheduler and turns its proposals into study sessions."""

    def __init__(self, scheduler: GreedyStudyScheduler, allocator: IdentifierAllocator) -> None:
        self.scheduler = scheduler
        self.allocator = allocator

    def generate(
        self,
        assignments: Sequence[Assignment],
        *,
        today: date | None = None,
    ) -> tuple[list[StudySession], SchedulingMetrics]:
        today = today or date.today()
        result = self.scheduler.schedule(ScheduleRequest(assignments=assignments, today=today))
        sessions = [self._materialize(proposal) for proposal in result.proposals]
        metrics = _build_metrics(result, considered=len(assignments))
        logger.info(
            "Generated %d study sessions for %d pending assignments",
            metrics.session_count,
            metrics.considered_count - metrics.skipped_completed_count,
        )
        return sessions, metrics

    def run(
        self,
        state: AppState,
        *,
        today: date | None = None,
        mode: ApplyMode = "append",
    ) -> tuple[AppState, list[StudySession], SchedulingMetrics]:
        sessions, metrics = self.generate(state.assignments, today=today)
        return apply_sessions(state, sessions, mode), sessions, metrics

    def _materialize(self, proposal: SessionProposal) -> StudySession:
        return StudySession(
            id=self.allocator.allocate(),
            assignment_id=proposal.assignment_id,
            date=proposal.date,
            start_time=proposal.start_time,
            end_time=proposal.end_time,
            completed=False,
        )


def _build_metrics(result: ScheduleResult, *, considered: int) -> SchedulingMetrics:
    dates = [proposal.date for proposal in result.proposals]
    return SchedulingMetrics(
        considered_count=considered,
        skipped_completed_count=len(result.skipped_assignments),
        session_count=len(result.proposals),
        planned_hours=sum(_block_hours(proposal) for proposal in result.proposals),
        first_session_date=min(dates, default=None),
        last_session_date=max(dates, default=None),
    )


def _block_hours(proposal: SessionProposal) -> float:
    start = datetime.combine(proposal.date, proposal.start_time)
    end = datetime.combine(proposal.date, proposal.end_time)
    return (end - start).total_seconds() / 3600
