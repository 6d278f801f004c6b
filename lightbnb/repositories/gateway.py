"""
Query gateway: the public data-access surface of LightBnB.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List, Mapping, Optional, Union

from lightbnb.repositories.executor import QueryExecutor, SQLAlchemyQueryExecutor
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.property import Property, PropertyCreate, PropertyListing, PropertySearchFilters
from lightbnb.schemas.reservation import Reservation, ReservationCreate, ReservationListing
from lightbnb.schemas.user import User, UserCreate


class QueryGateway:
    """
    Translates data requests into parameterized SQL and records.

    Every operation issues one statement. Missing rows come back as None or
    an empty list; store failures raise QueryExecutionError.
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor
        self.users = UserRepository(executor)
        self.properties = PropertyRepository(executor)
        self.reservations = ReservationRepository(executor)

    @classmethod
    def from_session(cls, session: AsyncSession) -> "QueryGateway":
        return cls(SQLAlchemyQueryExecutor(session))

    # Users

    async def fetch_user_by_email(self, email: str) -> Optional[User]:
        return await self.users.get_by_email(email)

    async def fetch_user_by_id(self, user_id: int) -> Optional[User]:
        return await self.users.get_by_id(user_id)

    async def create_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Optional[User]:
        return await self.users.create_user(user)

    # Reservations

    async def fetch_completed_reservations_for_guest(
        self,
        guest_id: int,
        limit: Optional[int] = None
    ) -> List[ReservationListing]:
        return await self.reservations.get_completed_for_guest(guest_id, limit)

    async def create_reservation(
        self,
        reservation: Union[ReservationCreate, Mapping[str, Any]]
    ) -> Optional[Reservation]:
        return await self.reservations.create_reservation(reservation)

    # Properties

    async def search_properties(
        self,
        filters: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyListing]:
        return await self.properties.search_properties(filters, limit)

    async def fetch_property_by_id(self, property_id: int) -> Optional[Property]:
        return await self.properties.get_by_id(property_id)

    async def create_property(
        self,
        prop: Union[PropertyCreate, Mapping[str, Any]]
    ) -> Optional[Property]:
        return await self.properties.create_property(prop)
