"""
Property table for rental listings.
Nightly cost is stored in minor currency units (cents).
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, Index, true
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class Property(Base):
    """
    A rentable property owned by a user.
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="Nightly cost in minor currency units"
    )

    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    __table_args__ = (
        Index("idx_properties_cost_per_night", "cost_per_night"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title}, city={self.city})>"
