"""
User repository: lookups by email or id, and inserts.
"""

from typing import Any, Mapping, Optional, Union
import logging

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.executor import QueryExecutor
from lightbnb.repositories import query_builder
from lightbnb.schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user rows.
    Email uniqueness and format are the store's and caller's concern.
    """

    def __init__(self, executor: QueryExecutor):
        super().__init__(User, executor)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a single user given their email.

        Args:
            email: Exact email to match

        Returns:
            User if found, None otherwise
        """
        return await self.fetch_one("get_user_by_email", query_builder.user_by_email(email))

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get a single user given their id.

        Args:
            user_id: Primary key of the user

        Returns:
            User if found, None otherwise
        """
        return await self.fetch_one("get_user_by_id", query_builder.user_by_id(user_id))

    async def create_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Optional[User]:
        """
        Add a new user.

        Args:
            user: name, email and password to store

        Returns:
            The inserted user with its generated id, or None if the store
            returned no row
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(dict(user))

        created = await self.fetch_one("create_user", query_builder.insert_user(user))
        if created:
            logger.info(f"Created user {created.id} ({created.email})")
        return created
