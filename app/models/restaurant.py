# app/models/restaurant.py
from sqlmodel import Field

from app.models.base import DocumentBase


class Restaurant(DocumentBase, table=True):
    """
    Restaurant that accepts reservations.

    `nit` is the tax identifier; at most one restaurant per nit.
    """

    __tablename__ = "restaurants"

    name: str = Field(max_length=30, index=True)
    address: str = Field(max_length=30)
    city: str = Field(max_length=30)

    nit: str = Field(
        max_length=30,
        unique=True,
        index=True,
        description="Tax identifier (unique)",
    )

    phone: str = Field(max_length=12)
