from __future__ import annotations

from datetime import date, timedelta

from study_planner.scheduler import GreedyStudyScheduler
from study_planner.services.ids import SequentialAllocator, UuidAllocator
from study_planner.services.scheduling import SchedulingService
from study_planner.state import store

TODAY = date(2025, 3, 3)


def _state() -> store.AppState:
    allocator = SequentialAllocator("seed")
    state, course = store.add_course(store.AppState(), allocator=allocator, name="Chemistry", color="#f59e0b", credits=4)
    plan = [("Report", "high", 5, 10, False), ("Worksheet", "medium", 2, 2, False), ("Lab", "high", 1, 1, True)]
    for title, priority, hours, due_in, completed in plan:
        state, _ = store.add_assignment(
            state,
            allocator=allocator,
            course_id=course.id,
            title=title,
            due_date=TODAY + timedelta(days=due_in),
            priority=priority,
            estimated_hours=hours,
            completed=completed,
        )
    return state


def test_generate_attaches_fresh_identifiers_and_metrics() -> None:
    state = _state()
    service = SchedulingService(GreedyStudyScheduler(), SequentialAllocator("s"))

    sessions, metrics = service.generate(state.assignments, today=TODAY)

    assert [session.id for session in sessions] == ["s-1", "s-2", "s-3", "s-4"]
    assert all(session.completed is False for session in sessions)
    assert metrics.to_dict() == {
        "considered_count": 3,
        "skipped_completed_count": 1,
        "session_count": 4,
        "planned_hours": 8.0,
        "first_session_date": "2025-03-03",
        "last_session_date": "2025-03-05",
    }


def test_repeated_generation_differs_only_in_identifiers() -> None:
    state = _state()
    service = SchedulingService(GreedyStudyScheduler(), UuidAllocator())

    first, _ = service.generate(state.assignments, today=TODAY)
    second, _ = service.generate(state.assignments, today=TODAY)

    def shape(sessions):
        return [(s.assignment_id, s.date, s.start_time, s.end_time) for s in sessions]

    assert shape(first) == shape(second)
    assert not {s.id for s in first} & {s.id for s in second}


def test_run_appends_by_default_and_accumulates() -> None:
    service = SchedulingService(GreedyStudyScheduler(), SequentialAllocator("s"))
    state = _state()

    state, sessions, _ = service.run(state, today=TODAY)
    assert state.study_sessions == tuple(sessions)

    state, _, _ = service.run(state, today=TODAY)
    assert len(state.study_sessions) == 8


def test_run_replace_discards_previous_sessions() -> None:
    service = SchedulingService(GreedyStudyScheduler(), SequentialAllocator("s"))
    state, _, _ = service.run(_state(), today=TODAY)

    state, sessions, _ = service.run(state, today=TODAY, mode="replace")

    assert state.study_sessions == tuple(sessions)
    assert [session.id for session in state.study_sessions] == ["s-5", "s-6", "s-7", "s-8"]


def test_generate_on_empty_input() -> None:
    service = SchedulingService(GreedyStudyScheduler(), SequentialAllocator("s"))

    sessions, metrics = service.generate([], today=TODAY)

    assert sessions == []
    assert metrics.first_session_date is None
    assert metrics.planned_hours == 0
