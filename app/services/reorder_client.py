"""HTTP client for the reorder endpoint, usable as a ``persist`` function."""

import logging
from typing import Any

import httpx

from app.config import settings
from app.schemas.ordering import CollectionType, PersistResult, PositionUpdate

logger = logging.getLogger(__name__)

REORDER_PATH = "/api/v1/profile/reorder"


class ReorderClient:
    """Sends position payloads to ``POST /api/v1/profile/reorder``."""

    def __init__(
        self,
        access_token: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.api_base_url
        self.access_token = access_token
        self.timeout = timeout or settings.reorder_request_timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {self.access_token}"},
            timeout=self.timeout,
            transport=self._transport,
        )

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            body: Any = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(body, dict):
            detail = body.get("detail") or body.get("error") or body.get("message")
            if detail:
                return str(detail)
        return f"HTTP {response.status_code}"

    async def persist(
        self, collection_type: CollectionType, items: list[PositionUpdate]
    ) -> PersistResult:
        """Persist one collection's positions; never raises for HTTP failures."""
        body = {
            "type": collection_type.value,
            "items": [item.model_dump() for item in items],
        }

        try:
            async with self._client() as client:
                response = await client.post(REORDER_PATH, json=body)
        except httpx.HTTPError as e:
            logger.error(f"Reorder request for {collection_type.value} failed: {e}")
            return PersistResult.failure(f"Failed to update order: {e}")

        if response.is_error:
            detail = self._error_detail(response)
            logger.error(
                f"Reorder of {collection_type.value} rejected "
                f"({response.status_code}): {detail}"
            )
            return PersistResult.failure(detail)

        data = response.json()
        return PersistResult.success(updated_count=data.get("updated_count", len(items)))

    async def list_items(self, collection_type: CollectionType) -> list[dict[str, Any]]:
        """Fetch a collection in display order."""
        path = f"/api/v1/{collection_type.value.replace('_', '-')}"
        async with self._client() as client:
            response = await client.get(path)
            response.raise_for_status()
            return response.json()
