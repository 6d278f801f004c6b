"""
Pydantic schemas for records, request bodies and filters.
"""

from .user import (
    UserCreate,
    User,
    UserRegister,
    UserResponse,
    LoginRequest,
    TokenResponse
)

from .property import (
    PropertyFields,
    PropertyCreateRequest,
    PropertyCreate,
    Property,
    PropertyListing,
    PropertySearchFilters,
    PropertySearchResponse
)

from .reservation import (
    ReservationRequest,
    ReservationCreate,
    Reservation,
    ReservationListing,
    ReservationListResponse
)

__all__ = [
    # User
    "UserCreate",
    "User",
    "UserRegister",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",

    # Property
    "PropertyFields",
    "PropertyCreateRequest",
    "PropertyCreate",
    "Property",
    "PropertyListing",
    "PropertySearchFilters",
    "PropertySearchResponse",

    # Reservation
    "ReservationRequest",
    "ReservationCreate",
    "Reservation",
    "ReservationListing",
    "ReservationListResponse"
]
