# app/repositories/restaurant_repo.py
from typing import Any

from sqlmodel import Session, select

from app.models.base import utcnow
from app.models.restaurant import Restaurant


class RestaurantRepository:
    """
    Data access layer for Restaurant.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, restaurant_id: str) -> Restaurant | None:
        return self.session.get(Restaurant, restaurant_id)

    def get_active_by_id(self, restaurant_id: str) -> Restaurant | None:
        stmt = select(Restaurant).where(
            Restaurant.id == restaurant_id,
            Restaurant.deleted_at == None,  # noqa: E711
        )
        return self.session.exec(stmt).first()

    def exists_with_nit(self, nit: str) -> bool:
        stmt = select(Restaurant.id).where(Restaurant.nit == nit)
        return self.session.exec(stmt).first() is not None

    def list_active(self) -> list[Restaurant]:
        stmt = select(Restaurant).where(Restaurant.deleted_at == None)  # noqa: E711
        return list(self.session.exec(stmt).all())

    def create(self, restaurant: Restaurant) -> Restaurant:
        self.session.add(restaurant)
        self.session.commit()
        self.session.refresh(restaurant)
        return restaurant

    def update(self, restaurant_id: str, changes: dict[str, Any]) -> Restaurant | None:
        restaurant = self.get_by_id(restaurant_id)
        if restaurant is None:
            return None
        for key, value in changes.items():
            setattr(restaurant, key, value)
        restaurant.updated_at = utcnow()
        self.session.add(restaurant)
        self.session.commit()
        self.session.refresh(restaurant)
        return restaurant

    def soft_delete(self, restaurant_id: str) -> bool:
        return self.update(restaurant_id, {"deleted_at": utcnow()}) is not None
