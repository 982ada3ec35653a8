from __future__ import annotations

import random
from datetime import date, timedelta

from study_planner.scheduler import GreedyStudyScheduler
from study_planner.services.ids import SequentialAllocator
from study_planner.services.scheduling import SchedulingService
from study_planner.state import store
from study_planner.state.models import Priority

COURSES = [
    ("Linear Algebra", "#3b82f6", 6),
    ("Operating Systems", "#ef4444", 8),
    ("Technical Writing", "#10b981", 3),
]


def seed_demo_state(count: int = 6, today: date | None = None) -> store.AppState:
    today = today or date.today()
    allocator = SequentialAllocator("demo")
    state = store.AppState()

    course_ids: list[str] = []
    for name, color, credits in COURSES:
        state, course = store.add_course(state, allocator=allocator, name=name, color=color, credits=credits)
        course_ids.append(course.id)

    for index in range(1, count + 1):
        state, _ = store.add_assignment(
            state,
            allocator=allocator,
            course_id=random.choice(course_ids),
            title=f"Assignment {index}",
            due_date=today + timedelta(days=random.randint(1, 21)),
            priority=random.choice(list(Priority)),
            estimated_hours=random.choice([0.5, 1, 2, 3, 4.5, 6, 8]),
            description=f"Automatically seeded assignment {index}",
        )
    return state


def print_plan(state: store.AppState, today: date | None = None) -> None:
    service = SchedulingService(GreedyStudyScheduler(), SequentialAllocator("session"))
    sessions, metrics = service.generate(state.assignments, today=today)
    titles = {assignment.id: assignment.title for assignment in state.assignments}
    for session in sessions:
        print(
            f"{session.date.isoformat()}  {session.start_time:%H:%M}-{session.end_time:%H:%M}  "
            f"{titles[session.assignment_id]}"
        )
    print(f"{metrics.session_count} sessions, {metrics.planned_hours:g} hours planned.")


if __name__ == "__main__":
    demo_state = seed_demo_state()
    print_plan(demo_state)
