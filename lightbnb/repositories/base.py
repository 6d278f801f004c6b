"""
Base repository: runs a statement through the executor and shapes the rows.
Store failures surface as QueryExecutionError, never as returned data.
"""

from sqlalchemy.exc import SQLAlchemyError
from pydantic import BaseModel
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type
import logging

from lightbnb.repositories.executor import QueryExecutor
from lightbnb.repositories.query_builder import Statement
from lightbnb.utils.exceptions import QueryExecutionError

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=BaseModel)


class BaseRepository(Generic[RecordType]):
    """
    Base repository class providing the execute-and-shape step shared by
    every query.
    """

    def __init__(self, record_type: Type[RecordType], executor: QueryExecutor):
        """
        Initialize repository with record class and query executor.

        Args:
            record_type: Pydantic model each row is validated into
            executor: Query executor for the store
        """
        self.record_type = record_type
        self.executor = executor

    async def execute(self, operation: str, statement: Statement) -> List[Dict[str, Any]]:
        """
        Run a statement and return its rows.

        Args:
            operation: Name used in logs and errors
            statement: SQL text and parameters

        Returns:
            List of row dictionaries, empty when the store reports none

        Raises:
            QueryExecutionError: If the store fails to execute the statement
        """
        try:
            rows = await self.executor.execute(statement.sql, statement.params)
        except SQLAlchemyError as e:
            logger.error(f"{operation} failed: {e}")
            raise QueryExecutionError(operation, e) from e

        rows = list(rows or [])
        logger.debug(f"{operation} returned {len(rows)} row(s)")
        return rows

    async def fetch_one(
        self,
        operation: str,
        statement: Statement,
        record_type: Optional[Type[BaseModel]] = None
    ) -> Optional[Any]:
        """First row as a record, or None when there is no row."""
        rows = await self.execute(operation, statement)
        if not rows:
            return None
        return (record_type or self.record_type).model_validate(rows[0])

    async def fetch_all(
        self,
        operation: str,
        statement: Statement,
        record_type: Optional[Type[BaseModel]] = None
    ) -> List[Any]:
        """Every row as a record."""
        rows = await self.execute(operation, statement)
        model = record_type or self.record_type
        return [model.model_validate(row) for row in rows]
