# app/services/restaurant_service.py
from sqlmodel import Session

from app.core.exceptions import AlreadyExists
from app.models.restaurant import Restaurant
from app.repositories.restaurant_repo import RestaurantRepository
from app.schemas.restaurant import RestaurantCreate, RestaurantUpdate


class RestaurantService:
    """
    Business logic for Restaurant.

    - nit uniqueness on create (update never re-checks it)
    - soft delete; get_all / get_by_id only see active rows
    """

    def __init__(self, session: Session):
        self.repo = RestaurantRepository(session)

    def create(self, payload: RestaurantCreate) -> Restaurant:
        if self.repo.exists_with_nit(payload.nit):
            raise AlreadyExists("restaurant", "Restaurant already exist")
        return self.repo.create(Restaurant(**payload.model_dump()))

    def update(self, restaurant_id: str, payload: RestaurantUpdate) -> Restaurant | None:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        return self.repo.update(restaurant_id, changes)

    def get_all(self) -> list[Restaurant]:
        return self.repo.list_active()

    def get_by_id(self, restaurant_id: str) -> Restaurant | None:
        return self.repo.get_active_by_id(restaurant_id)

    def delete(self, restaurant_id: str) -> bool:
        return self.repo.soft_delete(restaurant_id)
