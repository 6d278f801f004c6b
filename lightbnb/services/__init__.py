"""
Service layer for business logic on top of the query gateway.
"""

from .auth import AuthService
from .error_handler import ErrorHandlerService

__all__ = [
    "AuthService",
    "ErrorHandlerService"
]
