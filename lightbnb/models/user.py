"""
User table: guests and property owners share one account type.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """A LightBnB account."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name"
    )

    # Uniqueness is left to the store constraint; the gateway does not check it.
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Login email, used as a lookup key"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password hash"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
