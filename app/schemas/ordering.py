"""Pydantic schemas for ordered profile items and reorder requests."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from app.models.payment_method import PaymentMethodType
from app.models.qr_code import QRCodeType
from app.models.social_link import SocialPlatform


class CollectionType(str, Enum):
    """Independently ordered collections owned by a user."""

    SOCIAL_LINKS = "social_links"
    PAYMENT_METHODS = "payment_methods"
    QR_CODES = "qr_codes"


class OrderedItem(BaseModel):
    """One row of a reorderable collection.

    Only ``id`` and ``position`` matter to the ordering functions; every other
    field is carried along untouched.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    position: int = Field(..., ge=0)


class SocialLinkItem(OrderedItem):
    """Social link as shown in the profile editor."""

    kind: Literal["social_link"] = "social_link"
    platform: SocialPlatform
    url: str
    label: str
    enabled: bool = True


class PaymentMethodItem(OrderedItem):
    """Payment method as shown in the profile editor."""

    kind: Literal["payment_method"] = "payment_method"
    type: PaymentMethodType
    name: str
    handle: str | None = None
    url: str
    preferred: bool = False
    enabled: bool = True


class QRCodeItem(OrderedItem):
    """QR code as shown in the profile editor."""

    kind: Literal["qr_code"] = "qr_code"
    type: QRCodeType
    name: str
    data_content: str
    linked_social_link_id: str | None = None
    linked_payment_method_id: str | None = None


AnyOrderedItem = Annotated[
    Union[SocialLinkItem, PaymentMethodItem, QRCodeItem],
    Field(discriminator="kind"),
]


class PositionUpdate(BaseModel):
    """Schema for a single item in reorder request."""

    id: str = Field(..., min_length=1)
    position: int = Field(..., ge=0)


class ReorderRequest(BaseModel):
    """Schema for reordering one collection."""

    type: CollectionType
    items: list[PositionUpdate]


class ReorderResponse(BaseModel):
    """Schema for reorder response."""

    success: bool = True
    message: str = "Display order updated successfully"
    updated_count: int
    cascaded_count: int = 0


class PersistResult(BaseModel):
    """Outcome of handing a position payload to the store."""

    ok: bool
    updated_count: int = 0
    error: str | None = None

    @classmethod
    def success(cls, updated_count: int = 0) -> "PersistResult":
        return cls(ok=True, updated_count=updated_count)

    @classmethod
    def failure(cls, error: str) -> "PersistResult":
        return cls(ok=False, error=error)
