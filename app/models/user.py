"""User model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from app.models.payment_method import PaymentMethod
    from app.models.qr_code import QRCode
    from app.models.social_link import SocialLink


class User(Base, UUIDMixin, TimestampMixin):
    """User model - owner of every profile collection."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    social_links: Mapped[list["SocialLink"]] = relationship(
        "SocialLink",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    payment_methods: Mapped[list["PaymentMethod"]] = relationship(
        "PaymentMethod",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    qr_codes: Mapped[list["QRCode"]] = relationship(
        "QRCode",
        back_populates="user",
        cascade="all, delete-orphan",
    )
