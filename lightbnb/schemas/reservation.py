"""
Pydantic schemas for reservation records and booking requests.
"""

from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import date

from lightbnb.schemas.property import PropertyFields


class ReservationRequest(BaseModel):
    """Schema for the booking endpoint; the guest is the caller."""

    property_id: int = Field(..., gt=0)
    reservation_start_date: date
    reservation_end_date: date

    @model_validator(mode="after")
    def validate_date_range(self):
        if self.reservation_start_date >= self.reservation_end_date:
            raise ValueError("reservation_start_date must be before reservation_end_date")
        return self


class ReservationCreate(ReservationRequest):
    """
    Row values for inserting a reservation.

    ``owner_id`` is the user making the booking and is stored as the guest.
    """

    owner_id: int


class Reservation(BaseModel):
    """A reservation row as returned by the store."""

    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date

    model_config = {"from_attributes": True}


class ReservationListing(PropertyFields):
    """
    A completed reservation joined with its property and average rating.
    ``id`` is the property id; the reservation's own id is ``reservation_id``.
    """

    id: int
    owner_id: int
    reservation_id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    average_rating: Optional[float] = None

    model_config = {"from_attributes": True}


class ReservationListResponse(BaseModel):
    reservations: List[ReservationListing]
