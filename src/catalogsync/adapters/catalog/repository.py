"""``ProductRepository`` implementation backed by the catalog API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.config.catalog import get_catalog_config

from .client import CatalogClient
from .translator import product_draft_payload, translate_product

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.config.catalog import CatalogConfig
    from catalogsync.domain.model import Product, ProductDraft, UpdateAction


class HttpProductRepository:
    def __init__(
        self,
        *,
        config: CatalogConfig | None = None,
        client: CatalogClient | None = None,
    ) -> None:
        self._client = client or CatalogClient(config=config or get_catalog_config())

    def fetch_by_keys(self, keys: Sequence[str]) -> dict[str, Product]:
        payloads = self._client.fetch_products_by_keys(keys)
        products = (translate_product(payload) for payload in payloads)
        return {product.key: product for product in products if product.key is not None}

    def create(self, draft: ProductDraft) -> Product:
        return translate_product(self._client.create_product(product_draft_payload(draft)))

    def update(self, product: Product, actions: Sequence[UpdateAction]) -> Product:
        payload = self._client.update_product(
            product_id=product.id,
            version=product.version,
            actions=[action.to_payload() for action in actions],
        )
        return translate_product(payload)
