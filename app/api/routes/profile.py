"""Profile ordering routes shared by every reorderable collection."""

from fastapi import APIRouter, HTTPException, status

from app.api.deps import CurrentUser, DBSession
from app.schemas.ordering import CollectionType, ReorderRequest, ReorderResponse
from app.services.reorder_service import ReorderService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("/reorder", response_model=ReorderResponse)
async def reorder_items(
    data: ReorderRequest,
    current_user: CurrentUser,
    db: DBSession,
) -> ReorderResponse:
    """Persist new positions for one collection; linked QR codes follow."""
    service = ReorderService(db)

    try:
        return await service.reorder(current_user.id, data)
    except PermissionError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/reorder/{collection_type}/repair")
async def repair_order(
    collection_type: CollectionType,
    current_user: CurrentUser,
    db: DBSession,
) -> dict:
    """Renumber a collection to a gap-free 0..N-1 sequence."""
    service = ReorderService(db)
    repaired = await service.repair(current_user.id, collection_type)
    return {"success": True, "repaired": repaired}
