from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, time, timedelta

from study_planner.state.models import Assignment, Priority

SESSION_BLOCK_HOURS = 2.0
SESSION_START = time(14, 0)
SESSION_END = time(16, 0)


@dataclass(slots=True, frozen=True)
class SessionProposal:
    assignment_id: str
    date: date
    start_time: time
    end_time: time


@dataclass(slots=True)
class ScheduleRequest:
    assignments: Sequence[Assignment]
    today: date


@dataclass(slots=True)
class ScheduleResult:
    proposals: list[SessionProposal] = field(default_factory=list)
    skipped_assignments: list[str] = field(default_factory=list)


def priority_weight(priority: Priority | str) -> int:
    return Priority(priority).weight


def sessions_needed(estimated_hours: float) -> int:
    """Number of fixed two-hour blocks covering the estimate, rounded up.

    Non-positive estimates give zero or fewer blocks; callers validate effort
    before it gets here.
    """

    return math.ceil(estimated_hours / SESSION_BLOCK_HOURS)


def order_pending(assignments: Iterable[Assignment]) -> list[Assignment]:
    """Incomplete assignments, highest priority first, then earliest due date."""

    pending = [assignment for assignment in assignments if not assignment.completed]
    pending.sort(key=lambda a: (-priority_weight(a.priority), a.due_date))
    return pending


class GreedyStudyScheduler:
    """Staggered greedy placement of fixed afternoon study blocks.

    The assignment at sorted position ``i`` gets its sessions on consecutive days
    starting at ``today + i``. Sessions of different assignments may share a day;
    no daily load cap is applied.
    """

    def schedule(self, request: ScheduleRequest) -> ScheduleResult:
        skipped = [assignment.id for assignment in request.assignments if assignment.completed]
        proposals: list[SessionProposal] = []

        for index, assignment in enumerate(order_pending(request.assignments)):
            for offset in range(sessions_needed(assignment.estimated_hours)):
                proposals.append(
                    SessionProposal(
                        assignment_id=assignment.id,
                        date=request.today + timedelta(days=index + offset),
                        start_time=SESSION_START,
                        end_time=SESSION_END,
                    )
                )

        return ScheduleResult(proposals=proposals, skipped_assignments=skipped)


__all__ = [
    "GreedyStudyScheduler",
    "SESSION_BLOCK_HOURS",
    "SESSION_END",
    "SESSION_START",
    "ScheduleRequest",
    "ScheduleResult",
    "SessionProposal",
    "order_pending",
    "priority_weight",
    "sessions_needed",
]
