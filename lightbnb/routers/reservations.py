"""
Reservation endpoints: the current user's past stays, and booking.
"""

from fastapi import APIRouter, Depends, Query, status

from lightbnb.config import settings
from lightbnb.repositories.gateway import QueryGateway
from lightbnb.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationListResponse,
    ReservationRequest
)
from lightbnb.schemas.user import User
from lightbnb.utils.dependencies import get_current_user, get_gateway
from lightbnb.utils.exceptions import PropertyNotFoundError, ServiceUnavailableError


router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.get(
    "",
    response_model=ReservationListResponse,
    summary="Completed reservations of the current user"
)
async def list_reservations(
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    current_user: User = Depends(get_current_user),
    gateway: QueryGateway = Depends(get_gateway)
) -> ReservationListResponse:
    reservations = await gateway.fetch_completed_reservations_for_guest(current_user.id, limit)
    return ReservationListResponse(reservations=reservations)


@router.post(
    "",
    response_model=Reservation,
    status_code=status.HTTP_201_CREATED,
    summary="Book a property for the current user"
)
async def create_reservation(
    reservation_data: ReservationRequest,
    current_user: User = Depends(get_current_user),
    gateway: QueryGateway = Depends(get_gateway)
) -> Reservation:
    if await gateway.fetch_property_by_id(reservation_data.property_id) is None:
        raise PropertyNotFoundError(str(reservation_data.property_id))

    created = await gateway.create_reservation(
        ReservationCreate(owner_id=current_user.id, **reservation_data.model_dump())
    )
    if created is None:
        raise ServiceUnavailableError("Reservation could not be created")
    return created
