"""
FastAPI dependency injection utilities for the gateway and authentication.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.database import get_db
from lightbnb.repositories.gateway import QueryGateway
from lightbnb.schemas.user import User
from lightbnb.services.auth import AuthService
from lightbnb.utils.exceptions import UnauthorizedError


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_gateway(db: AsyncSession = Depends(get_db)) -> QueryGateway:
    """Query gateway bound to the request's database session."""
    return QueryGateway.from_session(db)


async def get_auth_service(gateway: QueryGateway = Depends(get_gateway)) -> AuthService:
    return AuthService(gateway)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    """
    Get current authenticated user from JWT token.

    Raises:
        UnauthorizedError: If no token is provided
        InvalidTokenError: If the token is invalid or its user is gone
    """
    if not credentials:
        raise UnauthorizedError("Authentication token required")

    return await auth_service.get_current_user(credentials.credentials)
