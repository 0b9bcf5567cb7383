# app/services/reservation_service.py
from sqlmodel import Session

from app.core.exceptions import NotFound
from app.models.reservation import Reservation
from app.repositories.reservation_repo import ReservationRepository, ReservationRow
from app.repositories.restaurant_repo import RestaurantRepository
from app.repositories.user_repo import UserRepository
from app.schemas.reservation import (
    ReservationCreate,
    ReservationRead,
    ReservationUpdate,
    UserSummary,
)
from app.schemas.restaurant import RestaurantSummary


class ReservationService:
    """
    Business logic for Reservation.

    Responsibilities:
      - referential checks on create (user first, then restaurant)
      - joining restaurant name/address and user name into reads
      - soft delete

    Only get_all hides soft-deleted reservations; get_by_id and the
    per-user / per-restaurant listings return them too.
    """

    def __init__(self, session: Session):
        self.repo = ReservationRepository(session)
        self.users = UserRepository(session)
        self.restaurants = RestaurantRepository(session)

    # ----- Helpers -----

    @staticmethod
    def _to_read(row: ReservationRow) -> ReservationRead:
        reservation, restaurant, user = row
        read = ReservationRead.model_validate(reservation, from_attributes=True)
        if restaurant is not None:
            read.restaurant = RestaurantSummary(
                id=restaurant.id,
                name=restaurant.name,
                address=restaurant.address,
            )
        if user is not None:
            read.user = UserSummary(id=user.id, name=user.name)
        return read

    # ----- CRUD -----

    def create(self, payload: ReservationCreate) -> Reservation:
        """
        Book a reservation.

        Raises:
            NotFound("user"): the user reference does not exist
                (the restaurant is not checked in that case).
            NotFound("restaurant"): the restaurant reference does not exist.
        """
        if self.users.get_by_id(payload.user_id) is None:
            raise NotFound("user", "User not found")

        if self.restaurants.get_by_id(payload.restaurant_id) is None:
            raise NotFound("restaurant", "Restaurant not found")

        return self.repo.create(Reservation(**payload.model_dump()))

    def update(self, reservation_id: str, payload: ReservationUpdate) -> Reservation | None:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        return self.repo.update(reservation_id, changes)

    def get_all(self) -> list[ReservationRead]:
        return [self._to_read(row) for row in self.repo.list_active()]

    def get_by_id(self, reservation_id: str) -> ReservationRead | None:
        row = self.repo.get_row(reservation_id)
        if row is None:
            return None
        return self._to_read(row)

    def delete(self, reservation_id: str) -> bool:
        return self.repo.soft_delete(reservation_id)

    def get_by_user_id(self, user_id: str) -> list[ReservationRead]:
        return [self._to_read(row) for row in self.repo.list_by_user(user_id)]

    def get_by_restaurant_id(self, restaurant_id: str) -> list[ReservationRead]:
        return [
            self._to_read(row) for row in self.repo.list_by_restaurant(restaurant_id)
        ]
