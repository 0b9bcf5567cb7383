# app/schemas/auth.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="ignore")

    email: str
    password: str


class LoginToken(SQLModel):
    """Identity plus the signed access token."""

    id: str
    roles: list[str]
    token: str


class LoginResponse(SQLModel):
    """
    Body of a successful login.

    The token object is nested under "token" on purpose:
        {"token": {"id": ..., "roles": [...], "token": "<jwt>"}}
    """

    token: LoginToken
