# app/schemas/reservation.py
import re
from datetime import date as date_type, datetime
from typing import Any

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.core.validation import check_length, object_id
from app.schemas.restaurant import RestaurantSummary

# 12-hour clock, e.g. "07:30PM"
HOUR_RE = re.compile(r"^(0[1-9]|1[0-2]):[0-5][0-9](AM|PM)$")

_check_user_id = object_id("Invalid user ID format")
_check_restaurant_id = object_id("Invalid restaurant ID format")


def _parse_date(v: Any) -> datetime:
    """Accept an ISO-8601 date or datetime."""
    if isinstance(v, datetime):
        return v
    if isinstance(v, date_type):
        return datetime(v.year, v.month, v.day)
    if isinstance(v, str):
        try:
            return datetime.fromisoformat(v.strip())
        except ValueError:
            pass
    raise ValueError("Date must be a valid date")


def _check_hour(v: str) -> str:
    v = check_length(v, 1, 20, "Hour must be between 1 and 20 characters")
    if not HOUR_RE.match(v):
        raise ValueError("Please provide a valid hour")
    return v


def _parse_quantity(v: Any) -> int:
    """Integer (or integer string) strictly greater than 1."""
    if isinstance(v, bool):
        raise ValueError("User quantity must be greater than 1")
    if isinstance(v, str) and re.fullmatch(r"\s*[+-]?\d+\s*", v):
        v = int(v)
    if not isinstance(v, int) or v <= 1:
        raise ValueError("User quantity must be greater than 1")
    return v


def _check_status(v: str) -> str:
    return check_length(v, 1, 15, "Status must be between 1 and 15 characters")


class ReservationCreate(SQLModel):
    """
    Payload for booking a table.

    - date: ISO-8601 date or datetime
    - hour: "hh:mmAM" / "hh:mmPM"
    - user_quantity: party size, > 1
    - status: 1..15 chars
    - restaurant_id / user_id: must reference existing records
      (checked by the service, user first)
    """

    model_config = ConfigDict(extra="ignore")

    date: datetime
    hour: str
    restaurant_id: str
    user_id: str
    user_quantity: int
    status: str

    @field_validator("date", mode="before")
    @classmethod
    def check_date(cls, v: Any) -> datetime:
        return _parse_date(v)

    @field_validator("hour")
    @classmethod
    def check_hour(cls, v: str) -> str:
        return _check_hour(v)

    @field_validator("user_quantity", mode="before")
    @classmethod
    def check_quantity(cls, v: Any) -> int:
        return _parse_quantity(v)

    @field_validator("status")
    @classmethod
    def check_status(cls, v: str) -> str:
        return _check_status(v)

    @field_validator("restaurant_id")
    @classmethod
    def check_restaurant_id(cls, v: str) -> str:
        return _check_restaurant_id(v)

    @field_validator("user_id")
    @classmethod
    def check_user_id(cls, v: str) -> str:
        return _check_user_id(v)


class ReservationUpdate(SQLModel):
    """
    Partial update. References (restaurant_id, user_id) cannot be
    moved and are ignored if sent.
    """

    model_config = ConfigDict(extra="ignore")

    date: datetime | None = None
    hour: str | None = None
    user_quantity: int | None = None
    status: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def check_date(cls, v: Any) -> datetime | None:
        if v is None:
            return v
        return _parse_date(v)

    @field_validator("hour")
    @classmethod
    def check_hour(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_hour(v)

    @field_validator("user_quantity", mode="before")
    @classmethod
    def check_quantity(cls, v: Any) -> int | None:
        if v is None:
            return v
        return _parse_quantity(v)

    @field_validator("status")
    @classmethod
    def check_status(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_status(v)


class UserSummary(SQLModel):
    """User fields joined into reservation reads."""

    id: str
    name: str


class ReservationRead(SQLModel):
    """
    Reservation as returned to clients.

    `restaurant` / `user` carry the joined display fields on reads;
    they are None on create/update responses or when the referenced
    record no longer exists.
    """

    id: str
    date: datetime
    hour: str
    restaurant_id: str
    user_id: str
    user_quantity: int
    status: str
    restaurant: RestaurantSummary | None = None
    user: UserSummary | None = None
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
