"""
SQL text and parameter assembly for every gateway operation.

Statements use PostgreSQL-style numbered placeholders ($1, $2, ...) with
an ordered parameter list. Nothing here touches the database.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Union
import logging

from lightbnb.schemas.property import PropertySearchFilters, PropertyCreate
from lightbnb.schemas.reservation import ReservationCreate
from lightbnb.schemas.user import UserCreate
from lightbnb.utils.currency import to_minor_units

logger = logging.getLogger(__name__)


@dataclass
class Statement:
    """A SQL text with its ordered bound parameters."""

    sql: str
    params: List[Any] = field(default_factory=list)


# Users

USER_BY_EMAIL_SQL = "SELECT * FROM users WHERE email = $1"

USER_BY_ID_SQL = "SELECT * FROM users WHERE id = $1"

INSERT_USER_SQL = (
    "INSERT INTO users (name, email, password) "
    "VALUES ($1, $2, $3) RETURNING *"
)

# Properties

PROPERTY_BY_ID_SQL = "SELECT * FROM properties WHERE id = $1"

PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)

INSERT_PROPERTY_SQL = (
    f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)}) "
    f"VALUES ({', '.join(f'${i}' for i in range(1, len(PROPERTY_COLUMNS) + 1))}) "
    "RETURNING *"
)

PROPERTY_SEARCH_BASE_SQL = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)

# Reservations

# reservations.* and properties.* both carry "id"; the property's comes
# last and wins, so the reservation id is also selected under its own name.
COMPLETED_RESERVATIONS_SQL = (
    "SELECT reservations.id AS reservation_id, reservations.*, properties.*,\n"
    "  avg(property_reviews.rating) AS average_rating\n"
    "FROM reservations\n"
    "JOIN properties ON reservations.property_id = properties.id\n"
    "JOIN property_reviews ON property_reviews.property_id = properties.id\n"
    "WHERE reservations.guest_id = $1\n"
    "AND reservations.end_date < CURRENT_DATE\n"
    "GROUP BY reservations.id, properties.id\n"
    "ORDER BY reservations.start_date\n"
    "LIMIT $2"
)

INSERT_RESERVATION_SQL = (
    "INSERT INTO reservations (guest_id, property_id, start_date, end_date) "
    "VALUES ($1, $2, $3, $4) RETURNING *"
)


def validate_limit(limit: int) -> int:
    """Reject limits the store would choke on."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"limit must be an integer, got {limit!r}")
    if limit < 0:
        raise ValueError(f"limit cannot be negative, got {limit}")
    return limit


def user_by_email(email: str) -> Statement:
    return Statement(USER_BY_EMAIL_SQL, [email])


def user_by_id(user_id: int) -> Statement:
    return Statement(USER_BY_ID_SQL, [user_id])


def insert_user(user: UserCreate) -> Statement:
    return Statement(INSERT_USER_SQL, [user.name, user.email, user.password])


def property_by_id(property_id: int) -> Statement:
    return Statement(PROPERTY_BY_ID_SQL, [property_id])


def insert_property(prop: PropertyCreate) -> Statement:
    return Statement(INSERT_PROPERTY_SQL, [getattr(prop, column) for column in PROPERTY_COLUMNS])


def completed_reservations(guest_id: int, limit: int) -> Statement:
    return Statement(COMPLETED_RESERVATIONS_SQL, [guest_id, validate_limit(limit)])


def insert_reservation(reservation: ReservationCreate) -> Statement:
    return Statement(
        INSERT_RESERVATION_SQL,
        [
            reservation.owner_id,
            reservation.property_id,
            reservation.reservation_start_date,
            reservation.reservation_end_date,
        ]
    )


class PropertySearchQuery:
    """
    Incremental builder for the filtered property search.

    Each filter appends its predicate through ``where``, which picks WHERE
    for the first predicate and AND afterwards from an explicit flag, so
    filters can be added or reordered without renumbering anything.
    """

    def __init__(self):
        self.params: List[Any] = []
        self._parts: List[str] = [PROPERTY_SEARCH_BASE_SQL]
        self._has_predicate = False

    def bind(self, value: Any) -> str:
        """Add a parameter and return its placeholder."""
        self.params.append(value)
        return f"${len(self.params)}"

    def where(self, clause: str) -> "PropertySearchQuery":
        keyword = "AND" if self._has_predicate else "WHERE"
        self._parts.append(f"{keyword} {clause}")
        self._has_predicate = True
        return self

    def append(self, clause: str) -> "PropertySearchQuery":
        self._parts.append(clause)
        return self

    def statement(self) -> Statement:
        return Statement("\n".join(self._parts), list(self.params))


def property_search(
    filters: Union[PropertySearchFilters, Mapping[str, Any], None],
    limit: int = 10
) -> Statement:
    """
    Build the property search statement.

    Filters before grouping: city substring, owner, and the nightly price
    range (only when both bounds are given). Minimum rating filters the
    aggregate after grouping. Results are cheapest first.
    """
    if filters is None:
        filters = PropertySearchFilters()
    elif not isinstance(filters, PropertySearchFilters):
        filters = PropertySearchFilters.model_validate(dict(filters))
    validate_limit(limit)

    query = PropertySearchQuery()

    if filters.city:
        query.where(f"properties.city LIKE {query.bind(f'%{filters.city}%')}")

    if filters.owner_id is not None:
        query.where(f"properties.owner_id = {query.bind(filters.owner_id)}")

    if filters.has_price_range:
        low = query.bind(to_minor_units(filters.minimum_price_per_night))
        high = query.bind(to_minor_units(filters.maximum_price_per_night))
        query.where(f"properties.cost_per_night >= {low} AND properties.cost_per_night <= {high}")
    elif filters.minimum_price_per_night is not None or filters.maximum_price_per_night is not None:
        logger.debug("Ignoring single-sided price bound; both minimum and maximum are required")

    query.append("GROUP BY properties.id")

    if filters.minimum_rating is not None:
        query.append(f"HAVING avg(property_reviews.rating) >= {query.bind(filters.minimum_rating)}")

    query.append("ORDER BY properties.cost_per_night")
    query.append(f"LIMIT {query.bind(limit)}")

    statement = query.statement()
    logger.debug(f"Property search SQL: {statement.sql} params={statement.params}")
    return statement
