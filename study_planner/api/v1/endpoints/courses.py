from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status

from study_planner.schemas import CourseCollection, CourseCreate, CourseRead, CourseSummaryRead, CourseUpdate
from study_planner.services.dashboard import course_summary
from study_planner.services.ids import IdentifierAllocator
from study_planner.state import store
from study_planner.state.holder import StateHolder, get_allocator, get_holder

router = APIRouter()


@router.get("/", response_model=CourseCollection)
def list_courses(holder: StateHolder = Depends(get_holder)) -> CourseCollection:
    items = [CourseRead.model_validate(course, from_attributes=True) for course in holder.state.courses]
    return CourseCollection(items=items)


@router.post("/", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
def create_course(
    payload: CourseCreate,
    holder: StateHolder = Depends(get_holder),
    allocator: IdentifierAllocator = Depends(get_allocator),
) -> CourseRead:
    with holder.begin() as state:
        state, course = store.add_course(
            state,
            allocator=allocator,
            name=payload.name,
            color=payload.color,
            credits=payload.credits,
            professor=payload.professor,
        )
        holder.commit(state)
    return CourseRead.model_validate(course, from_attributes=True)


@router.get("/{course_id}", response_model=CourseRead)
def get_course(course_id: str, holder: StateHolder = Depends(get_holder)) -> CourseRead:
    course = store.get_course(holder.state, course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return CourseRead.model_validate(course, from_attributes=True)


@router.patch("/{course_id}", response_model=CourseRead)
def update_course(course_id: str, payload: CourseUpdate, holder: StateHolder = Depends(get_holder)) -> CourseRead:
    with holder.begin() as state:
        if store.get_course(state, course_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        state = store.update_course(state, course_id, **payload.changes())
        holder.commit(state)
    return CourseRead.model_validate(store.get_course(state, course_id), from_attributes=True)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_course(course_id: str, holder: StateHolder = Depends(get_holder)) -> Response:
    with holder.begin() as state:
        if store.get_course(state, course_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
        holder.commit(store.delete_course(state, course_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{course_id}/summary", response_model=CourseSummaryRead)
def get_course_summary(
    course_id: str,
    today: date | None = None,
    holder: StateHolder = Depends(get_holder),
) -> CourseSummaryRead:
    state = holder.state
    if store.get_course(state, course_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    summary = course_summary(state, course_id, today or date.today())
    return CourseSummaryRead.model_validate(summary, from_attributes=True)
