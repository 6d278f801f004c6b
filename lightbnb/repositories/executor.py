"""
Query executors: the single outbound dependency of the gateway.

An executor takes SQL text with $n placeholders and an ordered parameter
list, and returns the result rows as dictionaries.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from typing import Any, Dict, List, Protocol, Sequence, Tuple
import logging
import re

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")

_READ_ONLY_PREFIXES = ("SELECT", "WITH")


class QueryExecutor(Protocol):
    """Anything that can run a parameterized statement and report its rows."""

    async def execute(self, sql: str, params: Sequence[Any]) -> List[Dict[str, Any]]:
        ...


def bind_positional(sql: str, params: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $n placeholders into SQLAlchemy named binds.

    Returns the rewritten SQL and a mapping of ``p<n>`` to the n-th
    parameter (1-based).

    Raises:
        ValueError: If a placeholder refers past the end of ``params``
    """
    def replace(match: "re.Match") -> str:
        index = int(match.group(1))
        if index < 1 or index > len(params):
            raise ValueError(
                f"Placeholder ${index} has no parameter ({len(params)} given)"
            )
        return f":p{index}"

    rewritten = _PLACEHOLDER.sub(replace, sql)
    binds = {f"p{index}": value for index, value in enumerate(params, start=1)}
    return rewritten, binds


def is_read_only(sql: str) -> bool:
    return sql.lstrip().upper().startswith(_READ_ONLY_PREFIXES)


class SQLAlchemyQueryExecutor:
    """
    Executor backed by an async SQLAlchemy session.
    Write statements are committed; a failed statement is rolled back and re-raised.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute(self, sql: str, params: Sequence[Any]) -> List[Dict[str, Any]]:
        statement, binds = bind_positional(sql, params)
        try:
            result = await self.session.execute(text(statement), binds)

            rows: List[Dict[str, Any]] = []
            if result.returns_rows:
                # Duplicate column names keep the last value, like the joined row would
                keys = list(result.keys())
                rows = [dict(zip(keys, row)) for row in result.all()]

            if not is_read_only(sql):
                await self.session.commit()

            return rows
        except Exception:
            await self.session.rollback()
            raise
