# app/routers/users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.core.exceptions import AlreadyExists
from app.core.validation import UserId
from app.database import get_session
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

# Every route is admin only; the gate runs before body/path validation.
router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(require_admin)],
)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)


def _not_found(user_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User with id {user_id} not found",
    )


@router.get("", response_model=list[UserRead])
def list_users(service: UserService = Depends(get_user_service)):
    """List users that were not soft-deleted."""
    return service.get_all()


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
):
    """Get an active user by id."""
    user = service.get_by_id(user_id)
    if user is None:
        raise _not_found(user_id)
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """
    Create an account.

    - 400 if the email is already registered.
    - The password hash is never returned.
    """
    try:
        return service.create(payload)
    except AlreadyExists as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        )


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: UserId,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """Partial update of name/email."""
    user = service.update(user_id, payload)
    if user is None:
        raise _not_found(user_id)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
):
    """Soft-delete a user."""
    if not service.delete(user_id):
        raise _not_found(user_id)
    return None
