"""Ports for reading and writing products in the remote catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from catalogsync.domain.model import Product, ProductDraft, UpdateAction


@runtime_checkable
class ProductRepository(Protocol):
    """Remote product storage the sync service executes against."""

    def fetch_by_keys(self, keys: Sequence[str]) -> Mapping[str, Product]:
        """Return the existing products for ``keys``; missing keys are simply absent."""
        ...

    def create(self, draft: ProductDraft) -> Product: ...

    def update(self, product: Product, actions: Sequence[UpdateAction]) -> Product: ...


__all__ = ["ProductRepository"]
