"""Service for payment method operations."""

import logging
from uuid import UUID

from sqlalchemy import update

from app.models.payment_method import PaymentMethod
from app.schemas.payment_method import PaymentMethodCreate, PaymentMethodUpdate
from app.services.collection_service import OwnedCollectionService

logger = logging.getLogger(__name__)


class PaymentMethodService(OwnedCollectionService[PaymentMethod]):
    """Service for payment method CRUD operations."""

    model = PaymentMethod

    async def _clear_preferred(self, user_id: UUID) -> None:
        """Only one payment method per user is marked preferred."""
        await self.db.execute(
            update(PaymentMethod)
            .where(PaymentMethod.user_id == user_id, PaymentMethod.preferred.is_(True))
            .values(preferred=False)
        )

    async def create(self, data: PaymentMethodCreate, user_id: UUID) -> PaymentMethod:
        """Create a new payment method at the end of the user's list."""
        if data.preferred:
            await self._clear_preferred(user_id)

        position = await self._get_next_position(user_id)

        payment_method = PaymentMethod(
            user_id=user_id,
            type=data.type,
            name=data.name,
            handle=data.handle,
            url=data.url,
            preferred=data.preferred,
            enabled=data.enabled,
            position=position,
        )
        payment_method = await self._add(payment_method)
        logger.info(f"Created {data.type.value} payment method {payment_method.id}")
        return payment_method

    async def update(
        self, payment_method_id: UUID, data: PaymentMethodUpdate, user_id: UUID
    ) -> PaymentMethod | None:
        """Update a payment method."""
        if data.preferred:
            if not await self.get_by_id(payment_method_id, user_id):
                return None
            await self._clear_preferred(user_id)

        return await super().update(payment_method_id, data, user_id)
