# app/models/reservation.py
from datetime import datetime

from sqlmodel import Field

from app.models.base import DocumentBase


class Reservation(DocumentBase, table=True):
    """
    A user's booking at a restaurant.

    - hour is kept as entered, e.g. "07:30PM"
    - status is free text (e.g. "pending", "confirmed")
    - user_quantity is the party size (> 1)
    """

    __tablename__ = "reservations"

    date: datetime = Field(description="Reservation date")

    hour: str = Field(max_length=20)

    restaurant_id: str = Field(
        foreign_key="restaurants.id",
        index=True,
        max_length=24,
    )

    user_id: str = Field(
        foreign_key="users.id",
        index=True,
        max_length=24,
    )

    user_quantity: int = Field(description="Party size")

    status: str = Field(max_length=15)
