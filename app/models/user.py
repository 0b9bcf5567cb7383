# app/models/user.py
from enum import Enum

from sqlalchemy import JSON, Column
from sqlmodel import Field

from app.models.base import DocumentBase


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(DocumentBase, table=True):
    """
    Account that can log in and own reservations.

    Role:
      - roles is a non-empty list drawn from "admin" | "user"
      - default ["user"]

    `password` holds the bcrypt hash and is never part of a read schema.
    Deleting a user only sets `deleted_at`.
    """

    __tablename__ = "users"

    name: str = Field(
        max_length=50,
        description="Display name",
    )

    # Case-sensitive as stored
    email: str = Field(
        unique=True,
        index=True,
        description="Login email (unique)",
    )

    password: str = Field(
        description="bcrypt hash",
    )

    roles: list[str] = Field(
        default_factory=lambda: [UserRole.USER.value],
        sa_column=Column(JSON, nullable=False),
        description="Application roles: admin | user",
    )
