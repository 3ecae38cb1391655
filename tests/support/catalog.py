"""Builders and fakes shared by catalogsync tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from catalogsync.domain.model import (
    Asset,
    AssetDraft,
    Dimensions,
    Image,
    ImageDraft,
    Product,
    ProductDraft,
)
from catalogsync.domain.reconciliation import ABSENT, Present

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from catalogsync.domain.model import UpdateAction


@dataclass(frozen=True)
class Entry:
    key: str | None
    id: str
    label: str = ""


@dataclass(frozen=True)
class Draft:
    key: str | None
    label: str = ""


type Action = tuple[object, ...]


def diff_label(old: Entry, draft: Draft) -> list[Action]:
    if old.label == draft.label:
        return []
    return [("label", old.key, draft.label)]


def build_remove(key: str | None) -> Action:
    return ("remove", key)


def build_add(draft: Draft, index: int) -> Action:
    return ("add", draft.key, index)


def build_reorder(ids: tuple[str, ...]) -> Action:
    return ("reorder", ids)


class TupleActionFactory:
    def build_element_actions(self, old: Entry, draft: Draft) -> list[Action]:
        return diff_label(old, draft)

    def build_remove_action(self, key: str | None) -> Action:
        return build_remove(key)

    def build_add_action(self, draft: Draft, index: int) -> Action:
        return build_add(draft, index)

    def build_reorder_action(self, ids: tuple[str, ...]) -> Action:
        return build_reorder(ids)


def make_asset(key: str | None, asset_id: str | None = None, *, name: str | None = None) -> Asset:
    return Asset(id=asset_id or f"id-{key}", key=key, name={"en": name or f"asset {key}"})


def make_asset_draft(key: str | None, *, name: str | None = None) -> AssetDraft:
    return AssetDraft(key=key, name={"en": name or f"asset {key}"})


def make_image(url: str, *, label: str | None = None) -> Image:
    return Image(url=url, dimensions=Dimensions(width=100, height=100), label=label)


def make_image_draft(url: str, *, label: str | None = None) -> ImageDraft:
    return ImageDraft(url=url, dimensions=Dimensions(width=100, height=100), label=label)


def make_product(
    key: str | None,
    *,
    product_id: str | None = None,
    version: int = 1,
    name: str | None = None,
    assets: Sequence[Asset] = (),
    images: Sequence[Image] = (),
) -> Product:
    return Product(
        id=product_id or f"product-{key}",
        version=version,
        key=key,
        name={"en": name or f"product {key}"},
        assets=tuple(assets),
        images=tuple(images),
    )


def make_product_draft(
    key: str | None,
    *,
    name: str | None = None,
    assets: Sequence[AssetDraft] | None = (),
    images: Sequence[ImageDraft] | None = (),
) -> ProductDraft:
    return ProductDraft(
        key=key,
        name={"en": name or f"product {key}"},
        assets=ABSENT if assets is None else Present(tuple(assets)),
        images=ABSENT if images is None else Present(tuple(images)),
    )


@dataclass
class FakeProductRepository:
    """In-memory ``ProductRepository`` recording every call."""

    products: dict[str, Product] = field(default_factory=dict)
    fetched: list[list[str]] = field(default_factory=list)
    created: list[ProductDraft] = field(default_factory=list)
    updated: list[tuple[Product, list[UpdateAction]]] = field(default_factory=list)
    fail_fetch: Exception | None = None
    fail_update_for: set[str] = field(default_factory=set)

    def fetch_by_keys(self, keys: Sequence[str]) -> Mapping[str, Product]:
        self.fetched.append(list(keys))
        if self.fail_fetch is not None:
            raise self.fail_fetch
        return {key: self.products[key] for key in keys if key in self.products}

    def create(self, draft: ProductDraft) -> Product:
        self.created.append(draft)
        return make_product(draft.key)

    def update(self, product: Product, actions: Sequence[UpdateAction]) -> Product:
        if product.key in self.fail_update_for:
            raise RuntimeError(f"Conflict while updating {product.key}")
        self.updated.append((product, list(actions)))
        return product
