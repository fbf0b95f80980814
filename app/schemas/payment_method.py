"""Pydantic schemas for payment methods."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.payment_method import PaymentMethodType


class PaymentMethodCreate(BaseModel):
    """Schema for creating a payment method."""

    type: PaymentMethodType
    name: str = Field(..., min_length=1, max_length=100)
    handle: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=500)
    preferred: bool = False
    enabled: bool = True

    @model_validator(mode='after')
    def default_url(self) -> 'PaymentMethodCreate':
        """Fall back to a ``type:handle`` URL when none is given."""
        if not self.url:
            self.url = self.handle or f"{self.type.value}:{self.name}"
        return self


class PaymentMethodUpdate(BaseModel):
    """Schema for updating a payment method."""

    name: str | None = Field(None, min_length=1, max_length=100)
    handle: str | None = Field(None, max_length=255)
    url: str | None = Field(None, min_length=1, max_length=500)
    preferred: bool | None = None
    enabled: bool | None = None

    @field_validator('name', 'url', 'preferred', 'enabled')
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError('Field cannot be null')
        return v


class PaymentMethodResponse(BaseModel):
    """Schema for payment method response."""

    id: UUID
    user_id: UUID
    type: PaymentMethodType
    name: str
    handle: str | None
    url: str
    preferred: bool
    enabled: bool
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
