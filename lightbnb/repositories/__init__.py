"""
Data access layer: SQL assembly, execution and row shaping.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.executor import QueryExecutor, SQLAlchemyQueryExecutor
from lightbnb.repositories.gateway import QueryGateway
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "QueryExecutor",
    "SQLAlchemyQueryExecutor",
    "QueryGateway",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository"
]
