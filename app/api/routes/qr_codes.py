"""QR code management routes."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from app.api.deps import CurrentUser, DBSession
from app.models.qr_code import QRCode
from app.schemas.qr_code import QRCodeCreate, QRCodeUpdate, QRCodeResponse
from app.services.qr_code_service import QRCodeService

router = APIRouter(prefix="/qr-codes", tags=["qr-codes"])


@router.post("", response_model=QRCodeResponse, status_code=status.HTTP_201_CREATED)
async def create_qr_code(
    data: QRCodeCreate,
    current_user: CurrentUser,
    db: DBSession,
) -> QRCode:
    """Create a new QR code."""
    service = QRCodeService(db)

    try:
        return await service.create(data, current_user.id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=list[QRCodeResponse])
async def list_qr_codes(
    current_user: CurrentUser,
    db: DBSession,
) -> list[QRCode]:
    """List the user's QR codes in display order."""
    service = QRCodeService(db)
    return await service.list_for_user(current_user.id)


@router.put("/{qr_code_id}", response_model=QRCodeResponse)
async def update_qr_code(
    qr_code_id: UUID,
    data: QRCodeUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> QRCode:
    """Update a QR code."""
    service = QRCodeService(db)
    qr_code = await service.update(qr_code_id, data, current_user.id)

    if not qr_code:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="QR code not found",
        )

    return qr_code


@router.delete("/{qr_code_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_qr_code(
    qr_code_id: UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> None:
    """Delete a QR code."""
    service = QRCodeService(db)
    deleted = await service.delete(qr_code_id, current_user.id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="QR code not found",
        )
