"""Service behind the reorder endpoint."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import PaymentMethod, QRCode, SocialLink
from app.schemas.ordering import CollectionType, OrderedItem, ReorderRequest, ReorderResponse
from app.services.collection_service import OwnedCollectionService
from app.services.ordering import is_canonical
from app.services.payment_method_service import PaymentMethodService
from app.services.qr_code_service import QRCodeService
from app.services.social_link_service import SocialLinkService

logger = logging.getLogger(__name__)

COLLECTION_MODELS = {
    CollectionType.SOCIAL_LINKS: SocialLink,
    CollectionType.PAYMENT_METHODS: PaymentMethod,
    CollectionType.QR_CODES: QRCode,
}

COLLECTION_SERVICES: dict[CollectionType, type[OwnedCollectionService]] = {
    CollectionType.SOCIAL_LINKS: SocialLinkService,
    CollectionType.PAYMENT_METHODS: PaymentMethodService,
    CollectionType.QR_CODES: QRCodeService,
}

# QR codes linked to a reordered item take that item's position
QR_LINK_FIELDS = {
    CollectionType.SOCIAL_LINKS: "linked_social_link_id",
    CollectionType.PAYMENT_METHODS: "linked_payment_method_id",
}


class ReorderService:
    """Applies a batch of position updates for one collection."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _parse_positions(request: ReorderRequest) -> dict[UUID, int]:
        positions: dict[UUID, int] = {}
        for item in request.items:
            try:
                item_id = UUID(item.id)
            except ValueError:
                raise ValueError(f"Invalid item id: {item.id}")
            if item_id in positions:
                raise ValueError(f"Duplicate item id: {item.id}")
            positions[item_id] = item.position
        return positions

    async def reorder(self, user_id: UUID, request: ReorderRequest) -> ReorderResponse:
        """Persist every position in the request or none of them.

        Raises PermissionError if any row belongs to another user and
        ValueError for malformed, duplicate or unknown ids.
        """
        positions = self._parse_positions(request)
        if not positions:
            return ReorderResponse(updated_count=0)

        ordered = [OrderedItem(id=item.id, position=item.position) for item in request.items]
        if not is_canonical(ordered):
            logger.warning(
                f"Non-canonical {request.type.value} positions from user {user_id}: "
                f"{sorted(positions.values())}"
            )

        model = COLLECTION_MODELS[request.type]
        result = await self.db.execute(select(model).where(model.id.in_(list(positions))))
        rows = {row.id: row for row in result.scalars().all()}

        if any(row.user_id != user_id for row in rows.values()):
            logger.warning(
                f"User {user_id} tried to reorder {request.type.value} they do not own"
            )
            raise PermissionError("Unauthorized to modify these items")

        missing = [str(item_id) for item_id in positions if item_id not in rows]
        if missing:
            raise ValueError(f"Items not found in {request.type.value}: {', '.join(missing)}")

        for item_id, position in positions.items():
            rows[item_id].position = position

        cascaded = await self._cascade_to_qr_codes(user_id, request.type, positions)

        await self.db.flush()

        logger.info(
            f"Reordered {len(positions)} {request.type.value} for user {user_id}"
            + (f", {cascaded} linked QR codes" if cascaded else "")
        )
        return ReorderResponse(updated_count=len(positions), cascaded_count=cascaded)

    async def _cascade_to_qr_codes(
        self,
        user_id: UUID,
        collection_type: CollectionType,
        positions: dict[UUID, int],
    ) -> int:
        field_name = QR_LINK_FIELDS.get(collection_type)
        if field_name is None:
            return 0

        link_column = getattr(QRCode, field_name)
        result = await self.db.execute(
            select(QRCode).where(
                link_column.in_(list(positions)),
                QRCode.user_id == user_id,
            )
        )

        qr_codes = list(result.scalars().all())
        for qr_code in qr_codes:
            qr_code.position = positions[getattr(qr_code, field_name)]

        return len(qr_codes)

    async def repair(self, user_id: UUID, collection_type: CollectionType) -> bool:
        """Renumber one of the user's collections to 0..N-1 if needed."""
        service = COLLECTION_SERVICES[collection_type](self.db)
        return await service.repair_positions(user_id)
