"""Service for QR code records (image rendering happens client side)."""

from uuid import UUID

from app.models import PaymentMethod, QRCode, SocialLink
from app.schemas.qr_code import QRCodeCreate
from app.services.collection_service import OwnedCollectionService


class QRCodeService(OwnedCollectionService[QRCode]):
    """Service for QR code CRUD operations."""

    model = QRCode

    async def _owns(self, model, item_id: UUID, user_id: UUID) -> bool:
        row = await self.db.get(model, item_id)
        return row is not None and row.user_id == user_id

    async def create(self, data: QRCodeCreate, user_id: UUID) -> QRCode:
        """Create a QR code at the end of the user's list."""
        if data.linked_social_link_id and not await self._owns(
            SocialLink, data.linked_social_link_id, user_id
        ):
            raise ValueError("Linked social link not found")
        if data.linked_payment_method_id and not await self._owns(
            PaymentMethod, data.linked_payment_method_id, user_id
        ):
            raise ValueError("Linked payment method not found")

        position = await self._get_next_position(user_id)

        qr_code = QRCode(
            user_id=user_id,
            type=data.type,
            name=data.name,
            data_content=data.data_content,
            description=data.description,
            linked_social_link_id=data.linked_social_link_id,
            linked_payment_method_id=data.linked_payment_method_id,
            scan_count=0,
            is_active=True,
            position=position,
        )
        return await self._add(qr_code)
