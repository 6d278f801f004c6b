"""
Reservation repository: a guest's completed stays, and bookings.
"""

from typing import Any, List, Mapping, Optional, Union
import logging

from lightbnb.config import settings
from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.executor import QueryExecutor
from lightbnb.repositories import query_builder
from lightbnb.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationListing
)

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservation rows."""

    def __init__(self, executor: QueryExecutor):
        super().__init__(Reservation, executor)

    async def get_completed_for_guest(
        self,
        guest_id: int,
        limit: Optional[int] = None
    ) -> List[ReservationListing]:
        """
        Get a guest's reservations that ended before today.

        Args:
            guest_id: The guest's user id
            limit: Maximum number of reservations, defaults to the configured limit

        Returns:
            Reservations joined with property and average rating, earliest first
        """
        if limit is None:
            limit = settings.default_result_limit
        statement = query_builder.completed_reservations(guest_id, limit)
        return await self.fetch_all("get_completed_reservations", statement, ReservationListing)

    async def create_reservation(
        self,
        reservation: Union[ReservationCreate, Mapping[str, Any]]
    ) -> Optional[Reservation]:
        """
        Book a property.

        Args:
            reservation: owner_id (the booking guest), property_id,
                         reservation_start_date and reservation_end_date

        Returns:
            The inserted reservation, or None if the store returned no row
        """
        if not isinstance(reservation, ReservationCreate):
            reservation = ReservationCreate.model_validate(dict(reservation))

        created = await self.fetch_one("create_reservation", query_builder.insert_reservation(reservation))
        if created:
            logger.info(
                f"Created reservation {created.id} for guest {created.guest_id} "
                f"at property {created.property_id}"
            )
        return created
