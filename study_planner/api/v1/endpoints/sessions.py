from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status

from study_planner.schemas import StudySessionCollection, StudySessionCreate, StudySessionRead, StudySessionUpdate
from study_planner.services.dashboard import sessions_on
from study_planner.services.ids import IdentifierAllocator
from study_planner.state import store
from study_planner.state.holder import StateHolder, get_allocator, get_holder

router = APIRouter()


@router.get("/", response_model=StudySessionCollection)
def list_sessions(on: date | None = None, holder: StateHolder = Depends(get_holder)) -> StudySessionCollection:
    state = holder.state
    sessions = sessions_on(state, on) if on else state.study_sessions
    items = [StudySessionRead.model_validate(session, from_attributes=True) for session in sessions]
    return StudySessionCollection(items=items)


@router.post("/", response_model=StudySessionRead, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: StudySessionCreate,
    holder: StateHolder = Depends(get_holder),
    allocator: IdentifierAllocator = Depends(get_allocator),
) -> StudySessionRead:
    with holder.begin() as state:
        if store.get_assignment(state, payload.assignment_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
        state, session = store.add_study_session(
            state,
            allocator=allocator,
            assignment_id=payload.assignment_id,
            date=payload.date,
            start_time=payload.start_time,
            end_time=payload.end_time,
        )
        holder.commit(state)
    return StudySessionRead.model_validate(session, from_attributes=True)


@router.patch("/{session_id}", response_model=StudySessionRead)
def update_session(
    session_id: str,
    payload: StudySessionUpdate,
    holder: StateHolder = Depends(get_holder),
) -> StudySessionRead:
    with holder.begin() as state:
        if store.get_study_session(state, session_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Study session not found")
        state = store.update_study_session(state, session_id, **payload.changes())
        session = store.get_study_session(state, session_id)
        if session.end_time <= session.start_time:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="end_time must be after start_time",
            )
        holder.commit(state)
    return StudySessionRead.model_validate(session, from_attributes=True)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_session(session_id: str, holder: StateHolder = Depends(get_holder)) -> Response:
    with holder.begin() as state:
        if store.get_study_session(state, session_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Study session not found")
        holder.commit(store.delete_study_session(state, session_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
