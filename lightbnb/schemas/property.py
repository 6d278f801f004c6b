"""
Pydantic schemas for property records, creation and search filters.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from decimal import Decimal


class PropertyFields(BaseModel):
    """Descriptive, structural and address fields shared by input and output."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)
    cost_per_night: int = Field(..., ge=0, description="Nightly cost in minor currency units")
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)
    country: str
    street: str
    city: str
    province: str
    post_code: str


class PropertyCreateRequest(PropertyFields):
    """Schema for the property creation endpoint; the owner is the caller."""

    @field_validator("title", "city")
    @classmethod
    def strip_required_text(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be blank")
        return v.strip()


class PropertyCreate(PropertyFields):
    """Row values for inserting a property."""

    owner_id: int


class Property(PropertyFields):
    """A property row as returned by the store."""

    id: int
    owner_id: int
    active: Optional[bool] = True

    model_config = {"from_attributes": True}


class PropertyListing(Property):
    """A property together with the average rating of its reviews."""

    average_rating: Optional[float] = None


class PropertySearchFilters(BaseModel):
    """
    Optional filters for property search.

    Prices are in major currency units; they are converted to minor units
    when the query is built. The price range applies only when both bounds
    are given.
    """

    city: Optional[str] = Field(None, max_length=255, description="Substring of the city name")
    owner_id: Optional[int] = Field(None, description="Only properties owned by this user")
    minimum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    maximum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    minimum_rating: Optional[float] = Field(None, ge=0, le=5)

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # Empty form fields mean the filter is not applied
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_price_range(self) -> bool:
        return (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
        )


class PropertySearchResponse(BaseModel):
    properties: List[PropertyListing]
