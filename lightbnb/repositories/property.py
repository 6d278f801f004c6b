"""
Property repository: filtered search with average ratings, lookup and insert.
"""

from typing import Any, List, Mapping, Optional, Union
import logging

from lightbnb.config import settings
from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.executor import QueryExecutor
from lightbnb.repositories import query_builder
from lightbnb.schemas.property import (
    Property,
    PropertyCreate,
    PropertyListing,
    PropertySearchFilters
)

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """Repository for property rows and the property search."""

    def __init__(self, executor: QueryExecutor):
        super().__init__(Property, executor)

    async def search_properties(
        self,
        filters: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyListing]:
        """
        Search properties with their average review rating.

        Args:
            filters: city, owner_id, minimum/maximum_price_per_night and
                     minimum_rating, all optional
            limit: Maximum number of properties, defaults to the configured limit

        Returns:
            Matching properties, cheapest first
        """
        if limit is None:
            limit = settings.default_result_limit
        statement = query_builder.property_search(filters, limit)
        return await self.fetch_all("search_properties", statement, PropertyListing)

    async def get_by_id(self, property_id: int) -> Optional[Property]:
        return await self.fetch_one("get_property_by_id", query_builder.property_by_id(property_id))

    async def create_property(
        self,
        prop: Union[PropertyCreate, Mapping[str, Any]]
    ) -> Optional[Property]:
        """
        Add a property.

        Args:
            prop: All fourteen property fields including owner_id

        Returns:
            The inserted property, or None if the store returned no row
        """
        if not isinstance(prop, PropertyCreate):
            prop = PropertyCreate.model_validate(dict(prop))

        created = await self.fetch_one("create_property", query_builder.insert_property(prop))
        if created:
            logger.info(f"Created property {created.id}: {created.title}")
        return created
