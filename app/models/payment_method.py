"""Payment method model for the profile page."""

import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from app.models.user import User


class PaymentMethodType(str, Enum):
    """Supported payment providers."""

    CASHAPP = "cashapp"
    PAYPAL = "paypal"
    VENMO = "venmo"
    ZELLE = "zelle"
    CRYPTO = "crypto"
    STRIPE = "stripe"
    CUSTOM = "custom"


class PaymentMethod(Base, UUIDMixin, TimestampMixin):
    """Payment method model - a way for visitors to tip the creator."""

    __tablename__ = "payment_methods"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[PaymentMethodType] = mapped_column(
        SQLEnum(PaymentMethodType, name="payment_method_type_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    handle: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    preferred: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="payment_methods",
    )
