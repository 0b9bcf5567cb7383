# app/routers/reservations.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.auth import require_admin, require_authentication, require_user
from app.core.exceptions import NotFound
from app.core.validation import ReservationId, RestaurantId, UserId
from app.database import get_session
from app.schemas.reservation import ReservationCreate, ReservationRead, ReservationUpdate
from app.services.reservation_service import ReservationService

router = APIRouter(prefix="/reservations", tags=["Reservations"])


def get_reservation_service(
    session: Session = Depends(get_session),
) -> ReservationService:
    return ReservationService(session)


def _not_found(reservation_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Reservation with id {reservation_id} not found",
    )


# -------- Scoped listings --------


@router.get(
    "/user/{user_id}",
    response_model=list[ReservationRead],
    dependencies=[Depends(require_user)],
)
def list_user_reservations(
    user_id: UserId,
    service: ReservationService = Depends(get_reservation_service),
):
    """All reservations of a user, including soft-deleted ones."""
    return service.get_by_user_id(user_id)


@router.get(
    "/restaurant/{restaurant_id}",
    response_model=list[ReservationRead],
    dependencies=[Depends(require_admin)],
)
def list_restaurant_reservations(
    restaurant_id: RestaurantId,
    service: ReservationService = Depends(get_reservation_service),
):
    """All reservations at a restaurant, including soft-deleted ones (admin only)."""
    return service.get_by_restaurant_id(restaurant_id)


# -------- CRUD --------


@router.get(
    "",
    response_model=list[ReservationRead],
    dependencies=[Depends(require_admin)],
)
def list_reservations(service: ReservationService = Depends(get_reservation_service)):
    """Active reservations with restaurant and user display fields (admin only)."""
    return service.get_all()


@router.get(
    "/{reservation_id}",
    response_model=ReservationRead,
    dependencies=[Depends(require_authentication)],
)
def get_reservation(
    reservation_id: ReservationId,
    service: ReservationService = Depends(get_reservation_service),
):
    """
    Get a reservation by id.

    Soft-deleted reservations are still returned here.
    """
    reservation = service.get_by_id(reservation_id)
    if reservation is None:
        raise _not_found(reservation_id)
    return reservation


@router.post(
    "",
    response_model=ReservationRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_user)],
)
def create_reservation(
    payload: ReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
):
    """
    Book a reservation.

    - 400 if the referenced user or restaurant does not exist.
    """
    try:
        return service.create(payload)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Restaurant or User not found",
        )


@router.put(
    "/{reservation_id}",
    response_model=ReservationRead,
    dependencies=[Depends(require_user)],
)
def update_reservation(
    reservation_id: ReservationId,
    payload: ReservationUpdate,
    service: ReservationService = Depends(get_reservation_service),
):
    reservation = service.update(reservation_id, payload)
    if reservation is None:
        raise _not_found(reservation_id)
    return reservation


@router.delete(
    "/{reservation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_user)],
)
def delete_reservation(
    reservation_id: ReservationId,
    service: ReservationService = Depends(get_reservation_service),
):
    """Soft-delete a reservation."""
    if not service.delete(reservation_id):
        raise _not_found(reservation_id)
    return None
