"""
Table models for the LightBnB store.
Declared so the schema can be created; queries themselves are written as SQL.
"""

from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview

__all__ = [
    "User",
    "Property",
    "Reservation",
    "PropertyReview",
]
