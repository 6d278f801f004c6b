"""
Test configuration and fixtures for LightBnB.
Runs the real SQL against an in-memory SQLite database and provides data factories.
"""

import pytest
import uuid
from datetime import date
from typing import AsyncGenerator, List, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from lightbnb.database import create_tables, drop_tables
from lightbnb.models import PropertyReview, Reservation as ReservationRow
from lightbnb.repositories.gateway import QueryGateway
from lightbnb.schemas.property import Property
from lightbnb.schemas.user import User


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the full schema for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    await create_tables(test_engine)
    yield test_engine
    await drop_tables(test_engine)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def gateway(db_session: AsyncSession) -> QueryGateway:
    """Query gateway running against the test database."""
    return QueryGateway.from_session(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: Optional[str] = None,
        password: str = "password123"
    ) -> dict:
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password
        }

    @staticmethod
    async def create_user(gateway: QueryGateway, **kwargs) -> User:
        return await gateway.create_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Cozy Cabin",
        cost_per_night: int = 10000,
        city: str = "Vancouver",
        **overrides
    ) -> dict:
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "A quiet place to stay",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 2,
            "country": "Canada",
            "street": "123 Main St",
            "city": city,
            "province": "BC",
            "post_code": "V5K 0A1"
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(gateway: QueryGateway, owner_id: int, **kwargs) -> Property:
        return await gateway.create_property(PropertyFactory.create_property_data(owner_id, **kwargs))


async def add_stay(
    db_session: AsyncSession,
    guest_id: int,
    property_id: int,
    start_date: date,
    end_date: date,
    ratings: List[int] = ()
) -> ReservationRow:
    """Insert a reservation and one review per rating through the ORM."""
    reservation = ReservationRow(
        guest_id=guest_id,
        property_id=property_id,
        start_date=start_date,
        end_date=end_date
    )
    db_session.add(reservation)
    await db_session.flush()

    for rating in ratings:
        db_session.add(
            PropertyReview(
                guest_id=guest_id,
                property_id=property_id,
                reservation_id=reservation.id,
                rating=rating
            )
        )
    await db_session.commit()
    return reservation


# Common test fixtures
@pytest.fixture
async def test_owner(gateway: QueryGateway) -> User:
    return await UserFactory.create_user(gateway, name="Olivia Owner", email="owner@test.com")


@pytest.fixture
async def test_guest(gateway: QueryGateway) -> User:
    return await UserFactory.create_user(gateway, name="Gary Guest", email="guest@test.com")


@pytest.fixture
async def priced_properties(
    gateway: QueryGateway,
    db_session: AsyncSession,
    test_owner: User,
    test_guest: User
) -> List[Property]:
    """
    Five reviewed properties in two cities, inserted out of price order.
    Ratings average 5, 4, 3, 2 and 1 from cheapest to most expensive.
    """
    specs = [
        ("Loft", 7500, "Vancouver", [3]),
        ("Cabin", 4000, "Whistler", [5]),
        ("Villa", 12000, "Vancouver", [1]),
        ("Condo", 5000, "Vancouver", [4, 4]),
        ("Chalet", 10000, "Whistler", [2]),
    ]
    created = []
    for title, cost, city, ratings in specs:
        prop = await PropertyFactory.create_property(
            gateway, test_owner.id, title=title, cost_per_night=cost, city=city
        )
        await add_stay(
            db_session, test_guest.id, prop.id,
            date(2019, 1, 1), date(2019, 1, 5), ratings
        )
        created.append(prop)
    return created


def assert_user_equal(user1: User, user2: User):
    """Assert that two users are equal."""
    assert user1.id == user2.id
    assert user1.name == user2.name
    assert user1.email == user2.email
    assert user1.password == user2.password
