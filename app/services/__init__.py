from app.services.auth import AuthService, auth_service
from app.services.ordering import (
    insert_at,
    is_canonical,
    move_to_position,
    next_append_position,
    position_payload,
    remove_and_repair,
    reorder,
    repair,
    sort_by_position,
)
from app.services.reorder_client import ReorderClient
from app.services.reorder_sync import (
    DebouncedReorder,
    ReorderPersistError,
    apply_reorder,
    bulk_update_positions,
    create_debounced_reorder,
)

__all__ = [
    "AuthService",
    "auth_service",
    # Display order engine
    "insert_at",
    "is_canonical",
    "move_to_position",
    "next_append_position",
    "position_payload",
    "remove_and_repair",
    "reorder",
    "repair",
    "sort_by_position",
    "apply_reorder",
    "bulk_update_positions",
    "create_debounced_reorder",
    "DebouncedReorder",
    "ReorderPersistError",
    "ReorderClient",
]
