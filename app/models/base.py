# app/models/base.py
import secrets
import time
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_object_id() -> str:
    """
    24 hex-char identifier: 4 bytes of epoch seconds + 8 random bytes.

    Same shape as a Mongo ObjectId, so ids sort roughly by creation time.
    """
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


class DocumentBase(SQLModel):
    """
    Fields shared by every stored record.

    - id: ObjectId-shaped string primary key
    - deleted_at: soft-delete marker (None = active)
    """

    id: str = Field(
        default_factory=new_object_id,
        primary_key=True,
        index=True,
        max_length=24,
    )

    deleted_at: datetime | None = Field(
        default=None,
        index=True,
        description="Soft-delete timestamp (UTC); None while active",
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last update timestamp (UTC)",
    )
