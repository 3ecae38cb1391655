"""Catalog API adapter package."""

from __future__ import annotations

from .client import CatalogAPIError, CatalogClient
from .files import read_product_drafts, read_products
from .repository import HttpProductRepository
from .schema import ProductDraftPayload, ProductPayload, ProductQueryResponse
from .translator import product_draft_payload, translate_product, translate_product_draft

__all__ = [
    "CatalogAPIError",
    "CatalogClient",
    "HttpProductRepository",
    "ProductDraftPayload",
    "ProductPayload",
    "ProductQueryResponse",
    "product_draft_payload",
    "read_product_drafts",
    "read_products",
    "translate_product",
    "translate_product_draft",
]
