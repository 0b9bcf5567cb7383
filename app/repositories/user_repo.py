# app/repositories/user_repo.py
from typing import Any

from sqlmodel import Session, select

from app.models.base import utcnow
from app.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    def __init__(self, session: Session):
        self.session = session

    # ----- Queries -----

    def get_by_id(self, user_id: str) -> User | None:
        """Return a User by primary key (deleted or not), or None."""
        return self.session.get(User, user_id)

    def get_active_by_id(self, user_id: str) -> User | None:
        """Return a User by primary key unless it was soft-deleted."""
        stmt = select(User).where(User.id == user_id, User.deleted_at == None)  # noqa: E711
        return self.session.exec(stmt).first()

    def get_by_email(self, email: str) -> User | None:
        """Return a User by exact email, or None if not found."""
        stmt = select(User).where(User.email == email)
        return self.session.exec(stmt).first()

    def list_active(self) -> list[User]:
        """All users that were not soft-deleted, in insertion order."""
        stmt = select(User).where(User.deleted_at == None)  # noqa: E711
        return list(self.session.exec(stmt).all())

    # ----- Writes -----

    def create(self, user: User) -> User:
        """Insert a new User and return the persisted row."""
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        """
        Apply `changes` to the user with `user_id`.

        Returns:
            The updated User, or None if no row has that id.
        """
        user = self.get_by_id(user_id)
        if user is None:
            return None
        for key, value in changes.items():
            setattr(user, key, value)
        user.updated_at = utcnow()
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def soft_delete(self, user_id: str) -> bool:
        """Set deleted_at on the user. False if no row has that id."""
        return self.update(user_id, {"deleted_at": utcnow()}) is not None
