"""Pydantic schemas for QR codes."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.qr_code import QRCodeType


class QRCodeCreate(BaseModel):
    """Schema for creating a QR code."""

    type: QRCodeType
    name: str = Field(..., min_length=1, max_length=100)
    data_content: str = Field(..., min_length=1, max_length=2000)
    description: str | None = None
    linked_social_link_id: UUID | None = None
    linked_payment_method_id: UUID | None = None

    @model_validator(mode='after')
    def single_link(self) -> 'QRCodeCreate':
        """A QR code follows at most one linked item."""
        if self.linked_social_link_id and self.linked_payment_method_id:
            raise ValueError('A QR code can be linked to a social link or a payment method, not both')
        return self


class QRCodeUpdate(BaseModel):
    """Schema for updating a QR code."""

    name: str | None = Field(None, min_length=1, max_length=100)
    data_content: str | None = Field(None, min_length=1, max_length=2000)
    description: str | None = None
    is_active: bool | None = None

    @field_validator('name', 'data_content', 'is_active')
    @classmethod
    def reject_null(cls, v):
        """Omit a field to leave it unchanged; null is not a value for these."""
        if v is None:
            raise ValueError('Field cannot be null')
        return v


class QRCodeResponse(BaseModel):
    """Schema for QR code response."""

    id: UUID
    user_id: UUID
    type: QRCodeType
    name: str
    data_content: str
    description: str | None
    linked_social_link_id: UUID | None
    linked_payment_method_id: UUID | None
    scan_count: int
    is_active: bool
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
