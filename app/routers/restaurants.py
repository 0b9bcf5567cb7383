# app/routers/restaurants.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.auth import require_admin, require_authentication
from app.core.exceptions import AlreadyExists
from app.core.validation import RestaurantId
from app.database import get_session
from app.schemas.restaurant import RestaurantCreate, RestaurantRead, RestaurantUpdate
from app.services.restaurant_service import RestaurantService

router = APIRouter(prefix="/restaurants", tags=["Restaurants"])


def get_restaurant_service(
    session: Session = Depends(get_session),
) -> RestaurantService:
    return RestaurantService(session)


def _not_found(restaurant_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Restaurant with id {restaurant_id} not found",
    )


# -------- Authenticated endpoints --------


@router.get(
    "",
    response_model=list[RestaurantRead],
    dependencies=[Depends(require_authentication)],
)
def list_restaurants(service: RestaurantService = Depends(get_restaurant_service)):
    """List restaurants that were not soft-deleted."""
    return service.get_all()


@router.get(
    "/{restaurant_id}",
    response_model=RestaurantRead,
    dependencies=[Depends(require_authentication)],
)
def get_restaurant(
    restaurant_id: RestaurantId,
    service: RestaurantService = Depends(get_restaurant_service),
):
    restaurant = service.get_by_id(restaurant_id)
    if restaurant is None:
        raise _not_found(restaurant_id)
    return restaurant


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=RestaurantRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_restaurant(
    payload: RestaurantCreate,
    service: RestaurantService = Depends(get_restaurant_service),
):
    """
    Create a restaurant (admin only).

    - 400 if another restaurant already uses the nit.
    """
    try:
        return service.create(payload)
    except AlreadyExists:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Restaurant already exist",
        )


@router.put(
    "/{restaurant_id}",
    response_model=RestaurantRead,
    dependencies=[Depends(require_admin)],
)
def update_restaurant(
    restaurant_id: RestaurantId,
    payload: RestaurantUpdate,
    service: RestaurantService = Depends(get_restaurant_service),
):
    restaurant = service.update(restaurant_id, payload)
    if restaurant is None:
        raise _not_found(restaurant_id)
    return restaurant


@router.delete(
    "/{restaurant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_restaurant(
    restaurant_id: RestaurantId,
    service: RestaurantService = Depends(get_restaurant_service),
):
    """Soft-delete a restaurant (admin only)."""
    if not service.delete(restaurant_id):
        raise _not_found(restaurant_id)
    return None
