# app/schemas/user.py
import re
from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.core.validation import check_length
from app.models.user import UserRole

NAME_RE = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ\s]+$")
PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


def _validate_name(v: str) -> str:
    v = check_length(v, 2, 50, "Name must be between 2 and 50 characters")
    if not NAME_RE.match(v):
        raise ValueError("Name can only contain letters and spaces")
    return v


def _validate_email(v: str) -> str:
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Please provide a valid email address")
    return v


class UserCreate(SQLModel):
    """
    Payload for creating an account (admin only).

    Validation rules:
      - name: 2..50 chars, letters and spaces only (trimmed)
      - email: valid address, stored as given
      - password: >= 6 chars with a lowercase, an uppercase and a digit
      - roles: optional non-empty list, defaults to ["user"]
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    password: str
    roles: list[UserRole] | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return _validate_name(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _validate_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        if not PASSWORD_RE.match(v):
            raise ValueError(
                "Password must contain at least one lowercase letter, "
                "one uppercase letter, and one number"
            )
        return v

    @field_validator("roles")
    @classmethod
    def check_roles(cls, v: list[UserRole] | None) -> list[UserRole] | None:
        if v is not None and not v:
            raise ValueError("Roles must contain at least one role")
        return v


class UserUpdate(SQLModel):
    """
    Partial update (admin only).

    Only `name` and `email` are editable. Any other key (roles, password)
    is dropped, so they cannot be changed through this path.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _validate_name(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _validate_email(v).lower()


class UserRead(SQLModel):
    """Response schema returned to clients. Never includes the password."""

    id: str
    name: str
    email: str
    roles: list[str]
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
