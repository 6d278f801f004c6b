"""
Tests for the gateway's result shaping and error channel, using stand-in
executors, plus the SQLAlchemy executor's placeholder binding.
"""

import pytest
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.repositories.executor import SQLAlchemyQueryExecutor, bind_positional, is_read_only
from lightbnb.repositories.gateway import QueryGateway
from lightbnb.schemas.user import User
from lightbnb.utils.exceptions import QueryExecutionError


class RecordingExecutor:
    """Returns canned rows and remembers every statement it was given."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None):
        self.rows = rows
        self.calls = []

    async def execute(self, sql: str, params: Sequence[Any]):
        self.calls.append((sql, list(params)))
        return self.rows


class FailingExecutor:
    """Fails every statement the way a driver would."""

    def __init__(self, error: Exception):
        self.error = error

    async def execute(self, sql: str, params: Sequence[Any]):
        raise self.error


USER_ROW = {"id": 1, "name": "A", "email": "a@x.com", "password": "p"}

RESERVATION_ROW = {
    "id": 11,
    "guest_id": 2,
    "property_id": 5,
    "start_date": date(2030, 1, 1),
    "end_date": date(2030, 1, 3),
}


class TestResultShapes:
    """Single record, list, or None."""

    @pytest.mark.asyncio
    async def test_single_record_from_first_row(self):
        second = dict(USER_ROW, id=2, email="b@x.com")
        gateway = QueryGateway(RecordingExecutor([USER_ROW, second]))

        user = await gateway.fetch_user_by_email("a@x.com")

        assert user == User(**USER_ROW)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rows", [[], None])
    async def test_no_rows_is_none(self, rows):
        gateway = QueryGateway(RecordingExecutor(rows))

        assert await gateway.fetch_user_by_email("a@x.com") is None
        assert await gateway.fetch_user_by_id(1) is None
        assert await gateway.create_user({"name": "A", "email": "a@x.com", "password": "p"}) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rows", [[], None])
    async def test_no_rows_is_empty_list(self, rows):
        gateway = QueryGateway(RecordingExecutor(rows))

        assert await gateway.search_properties({}) == []
        assert await gateway.fetch_completed_reservations_for_guest(1) == []

    @pytest.mark.asyncio
    async def test_create_reservation_returns_one_record(self):
        executor = RecordingExecutor([RESERVATION_ROW])
        gateway = QueryGateway(executor)

        created = await gateway.create_reservation({
            "owner_id": 2,
            "property_id": 5,
            "reservation_start_date": "2030-01-01",
            "reservation_end_date": "2030-01-03",
        })

        assert created.id == 11
        assert created.guest_id == 2
        assert executor.calls[0][1] == [2, 5, date(2030, 1, 1), date(2030, 1, 3)]

    @pytest.mark.asyncio
    async def test_default_limit_comes_from_settings(self):
        executor = RecordingExecutor([])
        gateway = QueryGateway(executor)

        await gateway.search_properties()
        await gateway.fetch_completed_reservations_for_guest(4)

        assert executor.calls[0][1] == [10]
        assert executor.calls[1][1] == [4, 10]

    @pytest.mark.asyncio
    async def test_invalid_reservation_dates_rejected_before_query(self):
        executor = RecordingExecutor([RESERVATION_ROW])
        gateway = QueryGateway(executor)

        with pytest.raises(ValueError):
            await gateway.create_reservation({
                "owner_id": 2,
                "property_id": 5,
                "reservation_start_date": "2030-01-03",
                "reservation_end_date": "2030-01-01",
            })
        assert executor.calls == []


class TestErrorChannel:
    """Store failures raise instead of returning data."""

    @pytest.mark.asyncio
    async def test_failure_raises_query_execution_error(self):
        cause = OperationalError("SELECT 1", {}, Exception("connection refused"))
        gateway = QueryGateway(FailingExecutor(cause))

        with pytest.raises(QueryExecutionError) as exc_info:
            await gateway.fetch_user_by_email("a@x.com")

        assert exc_info.value.operation == "get_user_by_email"
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    @pytest.mark.parametrize("call", [
        lambda g: g.fetch_user_by_id(1),
        lambda g: g.create_user({"name": "A", "email": "a@x.com", "password": "p"}),
        lambda g: g.search_properties({"city": "V"}),
        lambda g: g.fetch_completed_reservations_for_guest(1, 2),
        lambda g: g.create_reservation({
            "owner_id": 1, "property_id": 1,
            "reservation_start_date": "2030-01-01", "reservation_end_date": "2030-01-02",
        }),
    ])
    async def test_every_operation_uses_the_error_channel(self, call):
        gateway = QueryGateway(FailingExecutor(SQLAlchemyError("boom")))

        with pytest.raises(QueryExecutionError):
            await call(gateway)

    @pytest.mark.asyncio
    async def test_non_store_errors_propagate_unchanged(self):
        gateway = QueryGateway(FailingExecutor(RuntimeError("bug")))

        with pytest.raises(RuntimeError):
            await gateway.fetch_user_by_id(1)


class TestBindPositional:

    def test_rewrites_placeholders(self):
        sql, binds = bind_positional("SELECT * FROM t WHERE a = $1 AND b = $2", ["x", 3])

        assert sql == "SELECT * FROM t WHERE a = :p1 AND b = :p2"
        assert binds == {"p1": "x", "p2": 3}

    def test_multi_digit_placeholders(self):
        params = list(range(1, 15))
        sql, binds = bind_positional(", ".join(f"${i}" for i in params), params)

        assert ":p14" in sql and ":p1," in sql
        assert binds["p14"] == 14

    def test_missing_parameter(self):
        with pytest.raises(ValueError):
            bind_positional("SELECT $1, $2", ["only one"])

    def test_casts_are_left_alone(self):
        sql, _ = bind_positional("SELECT now()::date, $1", [1])
        assert sql == "SELECT now()::date, :p1"

    def test_read_only_detection(self):
        assert is_read_only("  select 1")
        assert not is_read_only("INSERT INTO users (name) VALUES ($1) RETURNING *")


class TestSQLAlchemyQueryExecutor:

    @pytest.mark.asyncio
    async def test_returns_rows_as_dicts(self, db_session: AsyncSession):
        executor = SQLAlchemyQueryExecutor(db_session)

        rows = await executor.execute("SELECT $1 AS a, $2 AS b", [1, "two"])

        assert rows == [{"a": 1, "b": "two"}]

    @pytest.mark.asyncio
    async def test_duplicate_columns_keep_last_value(self, db_session: AsyncSession):
        executor = SQLAlchemyQueryExecutor(db_session)

        rows = await executor.execute("SELECT 1 AS id, 2 AS id", [])

        assert rows == [{"id": 2}]

    @pytest.mark.asyncio
    async def test_write_is_committed(self, db_session: AsyncSession):
        executor = SQLAlchemyQueryExecutor(db_session)
        await executor.execute(
            "INSERT INTO users (name, email, password) VALUES ($1, $2, $3)",
            ["A", "a@x.com", "p"]
        )
        await db_session.rollback()

        rows = await executor.execute("SELECT name FROM users", [])
        assert rows == [{"name": "A"}]

    @pytest.mark.asyncio
    async def test_failure_is_rolled_back_and_reraised(self, db_session: AsyncSession):
        executor = SQLAlchemyQueryExecutor(db_session)

        with pytest.raises(SQLAlchemyError):
            await executor.execute("SELECT * FROM no_such_table WHERE id = $1", [1])

        # Session is usable again after the rollback
        assert await executor.execute("SELECT $1 AS ok", [1]) == [{"ok": 1}]

    @pytest.mark.asyncio
    async def test_gateway_wraps_real_driver_error(self, db_session: AsyncSession):
        await db_session.execute(text("DROP TABLE reservations"))
        gateway = QueryGateway.from_session(db_session)

        with pytest.raises(QueryExecutionError) as exc_info:
            await gateway.fetch_completed_reservations_for_guest(1)

        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)
