"""Shared operations for the per-user ordered collections."""

import logging
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import PaymentMethod, QRCode, SocialLink
from app.schemas.ordering import OrderedItem
from app.services.ordering import remove_and_repair, repair

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", SocialLink, PaymentMethod, QRCode)


class OwnedCollectionService(Generic[RowT]):
    """CRUD helpers for rows owned by a user and ordered by ``position``."""

    model: type[RowT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_next_position(self, user_id: UUID) -> int:
        """Get the next available position in this user's collection."""
        result = await self.db.execute(
            select(func.coalesce(func.max(self.model.position), -1) + 1).where(
                self.model.user_id == user_id
            )
        )
        return result.scalar() or 0

    async def get_by_id(self, item_id: UUID, user_id: UUID) -> RowT | None:
        """Get a row by ID if it belongs to user."""
        result = await self.db.execute(
            select(self.model).where(
                self.model.id == item_id,
                self.model.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: UUID) -> list[RowT]:
        """List the user's rows in display order."""
        result = await self.db.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.position, self.model.created_at)
        )
        return list(result.scalars().all())

    async def _add(self, row: RowT) -> RowT:
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return row

    async def update(self, item_id: UUID, data: BaseModel, user_id: UUID) -> RowT | None:
        """Apply the fields set on ``data``."""
        row = await self.get_by_id(item_id, user_id)
        if not row:
            return None

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(row, field, value)

        await self.db.flush()
        await self.db.refresh(row)

        return row

    async def delete(self, item_id: UUID, user_id: UUID) -> bool:
        """Delete a row and close the gap it leaves in the order."""
        row = await self.get_by_id(item_id, user_id)
        if not row:
            return False

        rows = await self.list_for_user(user_id)
        remaining = remove_and_repair(_as_ordered_items(rows), str(item_id))

        await self.db.delete(row)
        await self.db.flush()

        self._apply_positions(rows, remaining)
        await self.db.flush()

        return True

    async def repair_positions(self, user_id: UUID) -> bool:
        """Renumber the user's rows to 0..N-1 if they drifted; True if anything changed."""
        rows = await self.list_for_user(user_id)
        items = _as_ordered_items(rows)
        repaired = repair(items)
        if repaired is items:
            return False

        logger.info(
            f"Repaired {self.model.__tablename__} positions for user {user_id}"
        )
        self._apply_positions(rows, repaired)
        await self.db.flush()
        return True

    @staticmethod
    def _apply_positions(rows: list[RowT], items) -> None:
        positions = {item.id: item.position for item in items}
        for row in rows:
            position = positions.get(str(row.id))
            if position is not None and row.position != position:
                row.position = position


def _as_ordered_items(rows) -> list[OrderedItem]:
    return [OrderedItem(id=str(row.id), position=row.position) for row in rows]
