"""Payment method management routes."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from app.api.deps import CurrentUser, DBSession
from app.models.payment_method import PaymentMethod
from app.schemas.payment_method import (
    PaymentMethodCreate,
    PaymentMethodUpdate,
    PaymentMethodResponse,
)
from app.services.payment_method_service import PaymentMethodService

router = APIRouter(prefix="/payment-methods", tags=["payment-methods"])


@router.post("", response_model=PaymentMethodResponse, status_code=status.HTTP_201_CREATED)
async def create_payment_method(
    data: PaymentMethodCreate,
    current_user: CurrentUser,
    db: DBSession,
) -> PaymentMethod:
    """Create a new payment method."""
    service = PaymentMethodService(db)
    return await service.create(data, current_user.id)


@router.get("", response_model=list[PaymentMethodResponse])
async def list_payment_methods(
    current_user: CurrentUser,
    db: DBSession,
) -> list[PaymentMethod]:
    """List the user's payment methods in display order."""
    service = PaymentMethodService(db)
    return await service.list_for_user(current_user.id)


@router.put("/{payment_method_id}", response_model=PaymentMethodResponse)
async def update_payment_method(
    payment_method_id: UUID,
    data: PaymentMethodUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> PaymentMethod:
    """Update a payment method."""
    service = PaymentMethodService(db)
    payment_method = await service.update(payment_method_id, data, current_user.id)

    if not payment_method:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment method not found",
        )

    return payment_method


@router.delete("/{payment_method_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment_method(
    payment_method_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> None:
    """Delete a payment method."""
    service = PaymentMethodService(db)
    deleted = await service.delete(payment_method_id, current_user.id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment method not found",
        )
