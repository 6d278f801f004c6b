"""
Authentication service: registration with hashed passwords, login and
token resolution.
"""

from typing import Tuple
from jose import JWTError
from sqlalchemy.exc import IntegrityError
import logging

from lightbnb.repositories.gateway import QueryGateway
from lightbnb.schemas.user import User, UserCreate, UserRegister
from lightbnb.utils.auth import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token
)
from lightbnb.utils.exceptions import (
    DuplicateResourceError,
    InvalidCredentialsError,
    InvalidTokenError,
    QueryExecutionError,
    ServiceUnavailableError
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication flows on top of the query gateway.
    """

    def __init__(self, gateway: QueryGateway):
        self.gateway = gateway

    async def register_user(self, user_data: UserRegister) -> User:
        """
        Create an account with a bcrypt-hashed password.

        Raises:
            DuplicateResourceError: If the email is already registered
            QueryExecutionError: If the store fails for any other reason
            ServiceUnavailableError: If the store reports no inserted row
        """
        existing = await self.gateway.fetch_user_by_email(user_data.email)
        if existing:
            raise DuplicateResourceError("User", user_data.email)

        try:
            user = await self.gateway.create_user(
                UserCreate(
                    name=user_data.name,
                    email=user_data.email,
                    password=hash_password(user_data.password)
                )
            )
        except QueryExecutionError as e:
            # A concurrent signup took the email between the check and the insert
            if isinstance(e.cause, IntegrityError):
                raise DuplicateResourceError("User", user_data.email) from e
            raise
        if user is None:
            raise ServiceUnavailableError("User could not be created")

        logger.info(f"Registered user {user.id}")
        return user

    async def authenticate_user(self, email: str, password: str) -> User:
        """
        Check an email and password pair.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.gateway.fetch_user_by_email(email.lower().strip())
        if not user or not verify_password(password, user.password):
            logger.warning(f"Failed authentication attempt for email: {email}")
            raise InvalidCredentialsError()

        logger.info(f"User authenticated successfully: {user.email}")
        return user

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """Authenticate and issue an access token."""
        user = await self.authenticate_user(email, password)
        return user, create_access_token(user.id, user.email)

    async def get_current_user(self, token: str) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            InvalidTokenError: If the token is invalid, expired or its user is gone
        """
        try:
            payload = verify_token(token)
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        user = await self.gateway.fetch_user_by_id(payload.user_id)
        if user is None:
            raise InvalidTokenError("User no longer exists")
        return user
