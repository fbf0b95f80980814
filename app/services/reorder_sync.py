"""Optimistic reorder with persistence and rollback.

The caller owns the item list. Each gesture publishes the new order through
``on_update`` right away, then hands the positions to ``persist``. If the
store does not confirm, ``on_update`` is called again with the list from
before the gesture and ``ReorderPersistError`` is raised.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.config import settings
from app.schemas.ordering import CollectionType, OrderedItem, PersistResult, PositionUpdate
from app.services.ordering import position_payload, reorder

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=OrderedItem)

PersistFn = Callable[[CollectionType, list[PositionUpdate]], Awaitable[PersistResult]]
UpdateFn = Callable[[Sequence[T]], None]


class ReorderPersistError(Exception):
    """The store did not accept a position payload."""

    def __init__(
        self,
        collection_type: CollectionType,
        message: str,
        result: PersistResult | None = None,
    ):
        super().__init__(message)
        self.collection_type = collection_type
        self.result = result


async def _persist_payload(
    collection_type: CollectionType,
    payload: list[PositionUpdate],
    persist: PersistFn,
) -> PersistResult:
    """Run ``persist`` and turn both raised errors and failed results into ReorderPersistError."""
    try:
        result = await persist(collection_type, payload)
    except Exception as e:
        raise ReorderPersistError(
            collection_type, f"Failed to update {collection_type.value} order: {e}"
        ) from e

    if not result.ok:
        raise ReorderPersistError(
            collection_type,
            result.error or f"Failed to update {collection_type.value} order",
            result,
        )
    return result


async def apply_reorder(
    items: Sequence[T],
    from_index: int,
    to_index: int,
    collection_type: CollectionType,
    persist: PersistFn,
    on_update: UpdateFn,
) -> Sequence[T]:
    """Reorder optimistically, persist, and roll back on failure.

    Returns the persisted list. Persist failures are not retried.
    """
    new_items = reorder(items, from_index, to_index)
    on_update(new_items)

    try:
        await _persist_payload(collection_type, position_payload(new_items), persist)
    except ReorderPersistError as e:
        logger.warning(f"Reverting {collection_type.value} reorder: {e}")
        on_update(items)
        raise

    return new_items


async def bulk_update_positions(
    updates: Mapping[CollectionType, list[PositionUpdate]],
    persist: PersistFn,
) -> dict[CollectionType, PersistResult]:
    """Persist several collections concurrently.

    Every payload is sent; the first failure (in mapping order) is raised
    once all calls have settled.
    """
    collection_types = list(updates)
    results = await asyncio.gather(
        *(_persist_payload(t, updates[t], persist) for t in collection_types),
        return_exceptions=True,
    )

    for result in results:
        if isinstance(result, BaseException):
            raise result

    return dict(zip(collection_types, results))


@dataclass
class _Burst(Generic[T]):
    """Reorder gestures coalesced into one persist call."""

    collection_type: CollectionType
    persist: PersistFn
    on_update: UpdateFn
    baseline: Sequence[T]
    latest: Sequence[T]
    future: asyncio.Future
    timer: asyncio.TimerHandle | None = None
    gestures: int = 1
    # Burst of the same collection still in flight when this one started
    parent: "_Burst[T] | None" = None
    failed: bool = False
    # A later burst built on this order was persisted
    superseded: bool = False

    def ancestors(self):
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent


class DebouncedReorder(Generic[T]):
    """Reorder callable that persists only the last state of a burst of gestures.

    Each call updates the UI immediately and returns a future shared by every
    call of the current burst. The future resolves with the persisted list,
    or fails with ReorderPersistError after the UI has been rolled back to the
    list from before the first gesture of the burst.

    One instance serves one collection at a time; a call for another
    collection type flushes the open burst first.

    A burst started while an earlier one is still being persisted builds on
    the earlier order. If the earlier burst is rejected, the newer one is
    dropped with the same error instead of persisting on top of it.
    """

    def __init__(self, delay_ms: int | None = None):
        if delay_ms is None:
            delay_ms = settings.reorder_debounce_ms
        self.delay = delay_ms / 1000
        self._burst: _Burst[T] | None = None
        self._in_flight: _Burst[T] | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """True while a burst is waiting for its timer."""
        return self._burst is not None

    def __call__(
        self,
        items: Sequence[T],
        from_index: int,
        to_index: int,
        collection_type: CollectionType,
        persist: PersistFn,
        on_update: UpdateFn,
    ) -> asyncio.Future:
        new_items = reorder(items, from_index, to_index)
        on_update(new_items)

        if self._burst is not None and self._burst.collection_type != collection_type:
            self.flush()

        loop = asyncio.get_running_loop()
        burst = self._burst
        if burst is None:
            parent = self._in_flight
            if parent is not None and parent.collection_type != collection_type:
                parent = None
            burst = _Burst(
                collection_type=collection_type,
                persist=persist,
                on_update=on_update,
                baseline=items,
                latest=new_items,
                future=loop.create_future(),
                parent=parent,
            )
            self._burst = burst
        else:
            burst.timer.cancel()
            burst.latest = new_items
            burst.persist = persist
            burst.on_update = on_update
            burst.gestures += 1
            logger.debug(
                f"Coalesced {burst.gestures} {collection_type.value} reorder gestures"
            )

        burst.timer = loop.call_later(self.delay, self._fire, burst)
        return burst.future

    def flush(self) -> asyncio.Future | None:
        """Persist the open burst now instead of waiting for its timer."""
        burst = self._burst
        if burst is None:
            return None
        burst.timer.cancel()
        self._fire(burst)
        return burst.future

    def cancel(self) -> None:
        """Drop the open burst without persisting or rolling back."""
        burst = self._burst
        if burst is None:
            return
        burst.timer.cancel()
        burst.future.cancel()
        self._burst = None
        logger.debug(f"Cancelled pending {burst.collection_type.value} reorder")

    def _fire(self, burst: _Burst[T]) -> None:
        if self._burst is burst:
            self._burst = None
        burst.timer = None
        self._in_flight = burst
        task = asyncio.get_running_loop().create_task(self._persist_burst(burst))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _persist_burst(self, burst: _Burst[T]) -> None:
        try:
            await _persist_payload(
                burst.collection_type, position_payload(burst.latest), burst.persist
            )
        except ReorderPersistError as e:
            self._reject(burst, e)
            return
        finally:
            if self._in_flight is burst:
                self._in_flight = None

        ancestors = list(burst.ancestors())
        if any(ancestor.failed for ancestor in ancestors):
            # The UI was rolled back past this order; show what the store holds
            burst.on_update(burst.latest)
        for ancestor in ancestors:
            ancestor.superseded = True
        burst.parent = None

        if not burst.future.done():
            burst.future.set_result(burst.latest)

    def _reject(self, burst: _Burst[T], error: ReorderPersistError) -> None:
        burst.failed = True
        if burst.superseded:
            # A later order built on this one is already stored and shown
            logger.warning(
                f"Superseded {burst.collection_type.value} reorder failed: {error}"
            )
        elif not any(ancestor.failed for ancestor in burst.ancestors()):
            logger.warning(
                f"Reverting {burst.gestures} {burst.collection_type.value} reorder gestures: {error}"
            )
            burst.on_update(burst.baseline)
        burst.parent = None
        if not burst.future.done():
            burst.future.set_exception(error)

        dependent = self._burst
        if burst.superseded or dependent is None:
            return
        if not any(ancestor is burst for ancestor in dependent.ancestors()):
            return
        dependent.timer.cancel()
        self._burst = None
        logger.warning(
            f"Dropping {dependent.gestures} {dependent.collection_type.value} reorder gestures "
            f"made on a rejected order"
        )
        if not dependent.future.done():
            dependent.future.set_exception(error)


def create_debounced_reorder(delay_ms: int | None = None) -> DebouncedReorder:
    """Create a debounced reorder callable; defaults to ``settings.reorder_debounce_ms``."""
    return DebouncedReorder(delay_ms)
