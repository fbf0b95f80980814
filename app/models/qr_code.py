"""QR code model."""

import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from app.models.user import User


class QRCodeType(str, Enum):
    """What a QR code points at."""

    PROFILE = "profile"
    PAYMENT = "payment"
    SOCIAL = "social"
    CUSTOM = "custom"


class QRCode(Base, UUIDMixin, TimestampMixin):
    """QR code model.

    A QR code may be linked to a social link or a payment method; when the
    linked collection is reordered the QR code takes the linked item's position.
    """

    __tablename__ = "qr_codes"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[QRCodeType] = mapped_column(
        SQLEnum(QRCodeType, name="qr_code_type_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    data_content: Mapped[str] = mapped_column(String(2000), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    linked_social_link_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("social_links.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    linked_payment_method_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("payment_methods.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    scan_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="qr_codes",
    )
