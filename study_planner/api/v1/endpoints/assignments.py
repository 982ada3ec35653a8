from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from study_planner.schemas import AssignmentCollection, AssignmentCreate, AssignmentRead, AssignmentUpdate
from study_planner.services.ids import IdentifierAllocator
from study_planner.state import store
from study_planner.state.holder import StateHolder, get_allocator, get_holder

router = APIRouter()


@router.get("/", response_model=AssignmentCollection)
def list_assignments(course_id: str | None = None, holder: StateHolder = Depends(get_holder)) -> AssignmentCollection:
    state = holder.state
    assignments = store.course_assignments(state, course_id) if course_id else state.assignments
    items = [AssignmentRead.model_validate(assignment, from_attributes=True) for assignment in assignments]
    return AssignmentCollection(items=items)


@router.post("/", response_model=AssignmentRead, status_code=status.HTTP_201_CREATED)
def create_assignment(
    payload: AssignmentCreate,
    holder: StateHolder = Depends(get_holder),
    allocator: IdentifierAllocator = Depends(get_allocator),
) -> AssignmentRead:
    with holder.begin() as state:
        if store.get_course(state, payload.course_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        state, assignment = store.add_assignment(
            state,
            allocator=allocator,
            course_id=payload.course_id,
            title=payload.title,
            due_date=payload.due_date,
            priority=payload.priority,
            estimated_hours=payload.estimated_hours,
            description=payload.description,
            completed=payload.completed,
        )
        holder.commit(state)
    return AssignmentRead.model_validate(assignment, from_attributes=True)


@router.get("/{assignment_id}", response_model=AssignmentRead)
def get_assignment(assignment_id: str, holder: StateHolder = Depends(get_holder)) -> AssignmentRead:
    assignment = store.get_assignment(holder.state, assignment_id)
    if assignment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return AssignmentRead.model_validate(assignment, from_attributes=True)


@router.patch("/{assignment_id}", response_model=AssignmentRead)
def update_assignment(
    assignment_id: str,
    payload: AssignmentUpdate,
    holder: StateHolder = Depends(get_holder),
) -> AssignmentRead:
    with holder.begin() as state:
        if store.get_assignment(state, assignment_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
        state = store.update_assignment(state, assignment_id, **payload.changes())
        holder.commit(state)
    return AssignmentRead.model_validate(store.get_assignment(state, assignment_id), from_attributes=True)


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_assignment(assignment_id: str, holder: StateHolder = Depends(get_holder)) -> Response:
    with holder.begin() as state:
        if store.get_assignment(state, assignment_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
        holder.commit(store.delete_assignment(state, assignment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
