# app/schemas/restaurant.py
from datetime import datetime

from pydantic import ConfigDict, ValidationInfo, field_validator
from sqlmodel import SQLModel

from app.core.validation import check_length

# field -> (label, max length); every field needs at least 1 char
TEXT_LIMITS: dict[str, tuple[str, int]] = {
    "name": ("Name", 30),
    "address": ("Address", 30),
    "city": ("City", 30),
    "nit": ("Nit", 30),
    "phone": ("Phone", 12),
}


def _check_text(v: str, field_name: str) -> str:
    label, max_len = TEXT_LIMITS[field_name]
    return check_length(
        v, 1, max_len, f"{label} must be between 1 and {max_len} characters"
    )


class RestaurantCreate(SQLModel):
    """
    Payload for creating a restaurant (admin only).

    All fields are trimmed; name/address/city/nit are 1..30 chars and
    phone is 1..12 chars.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    address: str
    city: str
    nit: str
    phone: str

    @field_validator("name", "address", "city", "nit", "phone")
    @classmethod
    def check_text(cls, v: str, info: ValidationInfo) -> str:
        return _check_text(v, info.field_name)


class RestaurantUpdate(SQLModel):
    """
    Partial update (admin only). `nit` is not editable and is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    address: str | None = None
    city: str | None = None
    phone: str | None = None

    @field_validator("name", "address", "city", "phone")
    @classmethod
    def check_text(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is None:
            return v
        return _check_text(v, info.field_name)


class RestaurantRead(SQLModel):
    id: str
    name: str
    address: str
    city: str
    nit: str
    phone: str
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class RestaurantSummary(SQLModel):
    """Restaurant fields joined into reservation reads."""

    id: str
    name: str
    address: str
