from __future__ import annotations

from datetime import date

from study_planner.cli import COURSES, print_plan, seed_demo_state

TODAY = date(2025, 3, 3)


def test_seed_demo_state_links_assignments_to_courses() -> None:
    state = seed_demo_state(count=4, today=TODAY)

    course_ids = {course.id for course in state.courses}
    assert len(state.courses) == len(COURSES)
    assert len(state.assignments) == 4
    assert all(assignment.course_id in course_ids for assignment in state.assignments)
    assert all(assignment.due_date > TODAY for assignment in state.assignments)


def test_print_plan_lists_every_session(capsys) -> None:
    state = seed_demo_state(count=3, today=TODAY)

    print_plan(state, today=TODAY)

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-1].endswith("hours planned.")
    assert all("14:00-16:00" in line for line in lines[:-1])
    assert len(lines) > 1
