"""Read products and product drafts from JSON files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from .schema import ProductDraftPayload, ProductPayload
from .translator import translate_product, translate_product_draft

if TYPE_CHECKING:
    from pathlib import Path

    from catalogsync.domain.model import Product, ProductDraft

_PRODUCTS = TypeAdapter(list[ProductPayload])
_PRODUCT_DRAFTS = TypeAdapter(list[ProductDraftPayload])


def read_products(path: Path) -> list[Product]:
    """Read a JSON array of existing products; raises ``pydantic.ValidationError``."""

    return [translate_product(payload) for payload in _PRODUCTS.validate_json(path.read_bytes())]


def read_product_drafts(path: Path) -> list[ProductDraft]:
    """Read a JSON array of product drafts; raises ``pydantic.ValidationError``."""

    payloads = _PRODUCT_DRAFTS.validate_json(path.read_bytes())
    return [translate_product_draft(payload) for payload in payloads]
