"""
Utility modules for LightBnB.
"""

from .currency import to_minor_units, from_minor_units

from .exceptions import (
    QueryExecutionError,
    APIException,
    NotFoundError,
    UnauthorizedError,
    ConflictError,
    ServiceUnavailableError,
    InvalidCredentialsError,
    InvalidTokenError,
    PropertyNotFoundError,
    DuplicateResourceError
)

# auth and dependencies are imported directly where needed to avoid circular imports

__all__ = [
    # Currency
    "to_minor_units",
    "from_minor_units",

    # Exceptions
    "QueryExecutionError",
    "APIException",
    "NotFoundError",
    "UnauthorizedError",
    "ConflictError",
    "ServiceUnavailableError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PropertyNotFoundError",
    "DuplicateResourceError",
]
