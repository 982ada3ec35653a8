from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date, time

import pytest

from study_planner.services.ids import SequentialAllocator
from study_planner.state import StateHolder, store
from study_planner.state.models import Priority, User


@pytest.fixture()
def allocator() -> SequentialAllocator:
    return SequentialAllocator("t")


@pytest.fixture()
def populated(allocator: SequentialAllocator) -> store.AppState:
    state, math_course = store.add_course(store.AppState(), allocator=allocator, name="Math", color="#3b82f6", credits=5)
    state, art_course = store.add_course(state, allocator=allocator, name="Art", color="#ef4444", credits=2)
    state, proof = store.add_assignment(
        state,
        allocator=allocator,
        course_id=math_course.id,
        title="Proofs",
        due_date=date(2025, 3, 10),
        priority="high",
        estimated_hours=3,
    )
    state, sketch = store.add_assignment(
        state,
        allocator=allocator,
        course_id=art_course.id,
        title="Sketch",
        due_date=date(2025, 3, 12),
        priority=Priority.LOW,
        estimated_hours=1,
    )
    for assignment in (proof, sketch):
        state, _ = store.add_study_session(
            state,
            allocator=allocator,
            assignment_id=assignment.id,
            date=date(2025, 3, 4),
            start_time=time(14, 0),
            end_time=time(16, 0),
        )
    return state


def test_commands_return_new_state_without_mutating_old(allocator: SequentialAllocator) -> None:
    empty = store.AppState()

    state, course = store.add_course(empty, allocator=allocator, name="Physics", color="#10b981", credits=4)

    assert empty.courses == ()
    assert state.courses == (course,)
    assert course.id == "t-1"


def test_login_and_logout() -> None:
    state = store.login(store.AppState(), User(id="u-1", email="ada@example.com", name="Ada"))
    assert state.is_authenticated

    state = store.logout(state)
    assert not state.is_authenticated
    assert state == store.AppState()


def test_logout_clears_records(populated: store.AppState) -> None:
    state = store.logout(populated)

    assert state.courses == ()
    assert state.assignments == ()
    assert state.study_sessions == ()


def test_update_course_changes_only_target(populated: store.AppState) -> None:
    math_course, art_course = populated.courses

    state = store.update_course(populated, math_course.id, credits=6, professor="Noether")

    assert store.get_course(state, math_course.id).credits == 6
    assert store.get_course(state, math_course.id).professor == "Noether"
    assert store.get_course(state, art_course.id) == art_course


def test_delete_course_cascades_to_assignments_and_sessions(populated: store.AppState) -> None:
    math_course = populated.courses[0]

    state = store.delete_course(populated, math_course.id)

    assert [course.name for course in state.courses] == ["Art"]
    assert [assignment.title for assignment in state.assignments] == ["Sketch"]
    assert {session.assignment_id for session in state.study_sessions} == {state.assignments[0].id}


def test_delete_assignment_removes_its_sessions(populated: store.AppState) -> None:
    proof = populated.assignments[0]

    state = store.delete_assignment(populated, proof.id)

    assert store.get_assignment(state, proof.id) is None
    assert all(session.assignment_id != proof.id for session in state.study_sessions)
    assert len(state.study_sessions) == 1


def test_update_assignment_coerces_priority(populated: store.AppState) -> None:
    sketch = populated.assignments[1]

    state = store.update_assignment(populated, sketch.id, priority="medium", completed=True)

    updated = store.get_assignment(state, sketch.id)
    assert updated.priority is Priority.MEDIUM
    assert updated.completed is True


def test_unknown_ids_leave_state_unchanged(populated: store.AppState) -> None:
    assert store.update_course(populated, "missing", name="x") == populated
    assert store.delete_assignment(populated, "missing") == populated
    assert store.update_study_session(populated, "missing", completed=True) == populated


def test_toggle_and_delete_study_session(populated: store.AppState) -> None:
    session = populated.study_sessions[0]

    state = store.update_study_session(populated, session.id, completed=True)
    assert store.get_study_session(state, session.id).completed is True

    state = store.delete_study_session(state, session.id)
    assert store.get_study_session(state, session.id) is None


def test_apply_sessions_append_and_replace(populated: store.AppState) -> None:
    extra = populated.study_sessions[:1]

    appended = store.apply_sessions(populated, extra, "append")
    assert len(appended.study_sessions) == 3

    replaced = store.apply_sessions(populated, extra, "replace")
    assert replaced.study_sessions == extra


def test_apply_sessions_rejects_unknown_mode(populated: store.AppState) -> None:
    with pytest.raises(ValueError):
        store.apply_sessions(populated, (), "merge")  # type: ignore[arg-type]


def test_course_assignments_filters_by_course(populated: store.AppState) -> None:
    art_course = populated.courses[1]

    assert [assignment.title for assignment in store.course_assignments(populated, art_course.id)] == ["Sketch"]


def test_holder_serializes_concurrent_commits() -> None:
    holder = StateHolder()
    allocator = SequentialAllocator("c")

    def add_courses(worker: int) -> None:
        for index in range(25):
            with holder.begin() as state:
                state, _ = store.add_course(
                    state, allocator=allocator, name=f"Course {worker}-{index}", color="#14b8a6", credits=3
                )
                holder.commit(state)

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(add_courses, range(4)))

    assert len(holder.state.courses) == 100
    assert len({course.id for course in holder.state.courses}) == 100
