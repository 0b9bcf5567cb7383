# app/services/user_service.py
from sqlmodel import Session

from app.core.exceptions import AlreadyExists
from app.core.security import hash_password
from app.models.user import User, UserRole
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserCreate, UserRead, UserUpdate


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - email uniqueness on create (check-then-create)
      - password hashing; the hash never leaves this layer
      - soft delete
    """

    def __init__(self, session: Session):
        self.repo = UserRepository(session)

    def create(self, payload: UserCreate) -> UserRead:
        """
        Create an account.

        Raises:
            AlreadyExists: if any user (deleted or not) has the email.
        """
        if self.repo.get_by_email(payload.email) is not None:
            raise AlreadyExists("user", "User already exists")

        roles = payload.roles or [UserRole.USER]
        user = User(
            name=payload.name,
            email=payload.email,
            password=hash_password(payload.password),
            roles=[UserRole(role).value for role in roles],
        )
        user = self.repo.create(user)
        return UserRead.model_validate(user, from_attributes=True)

    def get_by_email(self, email: str) -> User | None:
        """Exact-match lookup, password hash included. Internal use only."""
        return self.repo.get_by_email(email)

    def update(self, user_id: str, payload: UserUpdate) -> User | None:
        """Apply a partial patch; None if no user has that id."""
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        return self.repo.update(user_id, changes)

    def get_all(self) -> list[User]:
        return self.repo.list_active()

    def get_by_id(self, user_id: str) -> User | None:
        return self.repo.get_active_by_id(user_id)

    def delete(self, user_id: str) -> bool:
        return self.repo.soft_delete(user_id)
