"""
Property endpoints: filtered search and listing a new property.
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from typing import Optional

from lightbnb.config import settings
from lightbnb.repositories.gateway import QueryGateway
from lightbnb.schemas.property import (
    Property,
    PropertyCreate,
    PropertyCreateRequest,
    PropertySearchFilters,
    PropertySearchResponse
)
from lightbnb.schemas.user import User
from lightbnb.utils.dependencies import get_current_user, get_gateway
from lightbnb.utils.exceptions import ServiceUnavailableError


router = APIRouter(prefix="/properties", tags=["Properties"])


async def get_search_filters(
    city: Optional[str] = Query(None, description="Substring of the city name"),
    owner_id: Optional[str] = Query(None, description="Only properties owned by this user"),
    minimum_price_per_night: Optional[str] = Query(None, description="Lower nightly price in dollars"),
    maximum_price_per_night: Optional[str] = Query(None, description="Upper nightly price in dollars"),
    minimum_rating: Optional[str] = Query(None, description="Lowest average rating, 0 to 5")
) -> PropertySearchFilters:
    """
    Build search filters from the raw query strings.
    Blank values from an unfilled search form leave that filter off.
    """
    try:
        return PropertySearchFilters(
            city=city,
            owner_id=owner_id,
            minimum_price_per_night=minimum_price_per_night,
            maximum_price_per_night=maximum_price_per_night,
            minimum_rating=minimum_rating
        )
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("query", *error["loc"])} for error in e.errors(include_url=False)]
        )


@router.get(
    "",
    response_model=PropertySearchResponse,
    summary="Search properties",
    description="Price bounds are in dollars and only apply when both are given."
)
async def search_properties(
    filters: PropertySearchFilters = Depends(get_search_filters),
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    gateway: QueryGateway = Depends(get_gateway)
) -> PropertySearchResponse:
    properties = await gateway.search_properties(filters, limit)
    return PropertySearchResponse(properties=properties)


@router.post(
    "",
    response_model=Property,
    status_code=status.HTTP_201_CREATED,
    summary="List a new property owned by the current user"
)
async def create_property(
    property_data: PropertyCreateRequest,
    current_user: User = Depends(get_current_user),
    gateway: QueryGateway = Depends(get_gateway)
) -> Property:
    created = await gateway.create_property(
        PropertyCreate(owner_id=current_user.id, **property_data.model_dump())
    )
    if created is None:
        raise ServiceUnavailableError("Property could not be created")
    return created
