"""Catalog API client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from catalogsync.adapters.http_resilience import ResilientClient, build_limiter

from .schema import ProductPayload, ProductQueryResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.adapters.http_resilience import ClientFactory
    from catalogsync.config.catalog import CatalogConfig
    from catalogsync.domain.model.actions import Payload

log = getLogger(__name__)

PRODUCTS_PATH = "products"


class CatalogAPIError(RuntimeError):
    """Raised when the catalog API returns an unexpected response."""


def quote_predicate_string(value: str) -> str:
    """Quote ``value`` as a string literal of a query predicate."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class CatalogClient:
    """Low-level HTTP client for the catalog's product endpoints."""

    def __init__(
        self,
        *,
        config: CatalogConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient
        self._limiter = build_limiter(self._resilience.ratelimit)

    def fetch_products_by_keys(self, keys: Sequence[str]) -> list[ProductPayload]:
        if not keys:
            return []
        return asyncio.run(self._fetch_products_by_keys_async(keys))

    def create_product(self, draft: Payload) -> ProductPayload:
        return asyncio.run(self._post_product_async(PRODUCTS_PATH, draft))

    def update_product(
        self,
        *,
        product_id: str,
        version: int,
        actions: Sequence[Payload],
    ) -> ProductPayload:
        body: Payload = {"version": version, "actions": list(actions)}
        log.debug(
            "Updating product %s (version %s) with %d actions", product_id, version, len(actions)
        )
        return asyncio.run(self._post_product_async(f"{PRODUCTS_PATH}/{product_id}", body))

    async def _fetch_products_by_keys_async(self, keys: Sequence[str]) -> list[ProductPayload]:
        quoted = ", ".join(quote_predicate_string(key) for key in keys)
        params = {"where": f"key in ({quoted})", "limit": str(len(keys))}
        async with self._client_factory(self._resilience, limiter=self._limiter) as client:
            response = await client.get(PRODUCTS_PATH, params=params)
            response.raise_for_status()
            payload = self._json_object(response.json())
        try:
            return ProductQueryResponse.model_validate(payload).results
        except ValidationError as exc:
            raise CatalogAPIError("Unexpected product query response payload") from exc

    async def _post_product_async(self, path: str, body: Payload) -> ProductPayload:
        async with self._client_factory(self._resilience, limiter=self._limiter) as client:
            response = await client.post(path, json=body)
            response.raise_for_status()
            payload = self._json_object(response.json())
        try:
            return ProductPayload.model_validate(payload)
        except ValidationError as exc:
            raise CatalogAPIError("Unexpected product response payload") from exc

    def _json_object(self, payload: object) -> dict[str, object]:
        if not isinstance(payload, dict):
            raise CatalogAPIError("Unexpected catalog response payload")
        return payload
