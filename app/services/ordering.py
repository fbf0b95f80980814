"""Display order primitives for reorderable profile collections.

All functions are pure: they never mutate the list or the items they are
given. Every list-changing operation returns positions forming the canonical
sequence ``0..N-1``; ``sort_by_position`` only sorts.
"""

from collections.abc import Sequence
from operator import attrgetter
from typing import TypeVar

from app.schemas.ordering import OrderedItem, PositionUpdate

T = TypeVar("T", bound=OrderedItem)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _reindex(items: Sequence[T]) -> list[T]:
    """Assign position = index, copying only the items whose position changes."""
    return [
        item if item.position == index else item.model_copy(update={"position": index})
        for index, item in enumerate(items)
    ]


def sort_by_position(items: Sequence[T]) -> list[T]:
    """Stable ascending sort by position."""
    return sorted(items, key=attrgetter("position"))


def is_canonical(items: Sequence[T]) -> bool:
    """Check that positions are exactly 0..N-1 with no gaps or duplicates."""
    positions = sorted(item.position for item in items)
    return positions == list(range(len(positions)))


def repair(items: Sequence[T]) -> Sequence[T]:
    """Restore the canonical sequence.

    An already canonical input is returned as the very same object so callers
    can use identity for change detection. Otherwise items are sorted by their
    current position (ties keep their original order) and renumbered.
    """
    if is_canonical(items):
        return items
    return _reindex(sort_by_position(items))


def next_append_position(items: Sequence[T]) -> int:
    """Position for a new item appended after every existing one."""
    if not items:
        return 0
    return max(item.position for item in items) + 1


def reorder(items: Sequence[T], from_index: int, to_index: int) -> Sequence[T]:
    """Move the element at ``from_index`` to ``to_index`` and renumber.

    Both indices are clamped to the list bounds. Elements outside the moved
    range keep their relative order.
    """
    if not items:
        return items

    last = len(items) - 1
    from_index = _clamp(from_index, 0, last)
    to_index = _clamp(to_index, 0, last)
    if from_index == to_index:
        return repair(items)

    result = list(items)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return _reindex(result)


def move_to_position(items: Sequence[T], item_id: str, new_position: int) -> Sequence[T]:
    """Move the item with ``item_id`` to ``new_position``; unknown ids are a no-op."""
    for index, item in enumerate(items):
        if item.id == item_id:
            return reorder(items, index, new_position)
    return items


def insert_at(items: Sequence[T], new_item: T, position: int) -> list[T]:
    """Insert ``new_item`` at rank ``position`` (clamped to ``[0, len]``)."""
    position = _clamp(position, 0, len(items))

    shifted = [
        item.model_copy(update={"position": item.position + 1}) if item.position >= position else item
        for item in repair(items)
    ]
    shifted.append(new_item.model_copy(update={"position": position}))
    return _reindex(sort_by_position(shifted))


def remove_and_repair(items: Sequence[T], item_id: str) -> Sequence[T]:
    """Remove the item with ``item_id`` and close the gap; unknown ids are a no-op."""
    if not any(item.id == item_id for item in items):
        return items

    remaining = [item for item in items if item.id != item_id]
    return _reindex(sort_by_position(remaining))


def position_payload(items: Sequence[T]) -> list[PositionUpdate]:
    """Build the ``{id, position}`` pairs sent to the store for a whole collection."""
    return [PositionUpdate(id=item.id, position=item.position) for item in items]
