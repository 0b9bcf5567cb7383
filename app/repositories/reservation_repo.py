# app/repositories/reservation_repo.py
from typing import Any

from sqlmodel import Session, select

from app.models.base import utcnow
from app.models.reservation import Reservation
from app.models.restaurant import Restaurant
from app.models.user import User

# (reservation, referenced restaurant, referenced user); a reference is
# None when its row is gone
ReservationRow = tuple[Reservation, Restaurant | None, User | None]


class ReservationRepository:
    """
    Data access layer for Reservation.

    Read queries outer-join the referenced restaurant and user so the
    service can attach their display fields.
    """

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _with_refs():
        return (
            select(Reservation, Restaurant, User)
            .join(Restaurant, Reservation.restaurant_id == Restaurant.id, isouter=True)
            .join(User, Reservation.user_id == User.id, isouter=True)
        )

    def get_by_id(self, reservation_id: str) -> Reservation | None:
        return self.session.get(Reservation, reservation_id)

    def get_row(self, reservation_id: str) -> ReservationRow | None:
        """Reservation by id with its references, deleted or not."""
        stmt = self._with_refs().where(Reservation.id == reservation_id)
        return self.session.exec(stmt).first()

    def list_active(self) -> list[ReservationRow]:
        stmt = self._with_refs().where(Reservation.deleted_at == None)  # noqa: E711
        return list(self.session.exec(stmt).all())

    def list_by_user(self, user_id: str) -> list[ReservationRow]:
        stmt = self._with_refs().where(Reservation.user_id == user_id)
        return list(self.session.exec(stmt).all())

    def list_by_restaurant(self, restaurant_id: str) -> list[ReservationRow]:
        stmt = self._with_refs().where(Reservation.restaurant_id == restaurant_id)
        return list(self.session.exec(stmt).all())

    def create(self, reservation: Reservation) -> Reservation:
        self.session.add(reservation)
        self.session.commit()
        self.session.refresh(reservation)
        return reservation

    def update(self, reservation_id: str, changes: dict[str, Any]) -> Reservation | None:
        reservation = self.get_by_id(reservation_id)
        if reservation is None:
            return None
        for key, value in changes.items():
            setattr(reservation, key, value)
        reservation.updated_at = utcnow()
        self.session.add(reservation)
        self.session.commit()
        self.session.refresh(reservation)
        return reservation

    def soft_delete(self, reservation_id: str) -> bool:
        return self.update(reservation_id, {"deleted_at": utcnow()}) is not None
