from __future__ import annotations

from fastapi import APIRouter, Depends

from study_planner.schemas import AuthStatus, LoginRequest, UserRead
from study_planner.services.ids import IdentifierAllocator
from study_planner.state import store
from study_planner.state.holder import StateHolder, get_allocator, get_holder
from study_planner.state.models import User

router = APIRouter()


def _status(state: store.AppState) -> AuthStatus:
    user = UserRead.model_validate(state.user, from_attributes=True) if state.user else None
    return AuthStatus(is_authenticated=state.is_authenticated, user=user)


@router.post("/login", response_model=AuthStatus)
def login(
    payload: LoginRequest,
    holder: StateHolder = Depends(get_holder),
    allocator: IdentifierAllocator = Depends(get_allocator),
) -> AuthStatus:
    user = User(id=payload.id or allocator.allocate(), email=payload.email, name=payload.name)
    with holder.begin() as state:
        holder.commit(store.login(state, user))
    return _status(holder.state)


@router.post("/logout", response_model=AuthStatus)
def logout(holder: StateHolder = Depends(get_holder)) -> AuthStatus:
    with holder.begin() as state:
        holder.commit(store.logout(state))
    return _status(holder.state)


@router.get("/me", response_model=AuthStatus)
def current_user(holder: StateHolder = Depends(get_holder)) -> AuthStatus:
    return _status(holder.state)
