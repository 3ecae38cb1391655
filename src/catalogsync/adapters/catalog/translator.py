"""Translate catalog payloads into domain objects and back."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.model import (
    Asset,
    AssetDraft,
    AssetSource,
    CustomFields,
    Dimensions,
    Image,
    ImageDraft,
    Product,
    ProductDraft,
)
from catalogsync.domain.model.actions import asset_draft_payload, image_draft_payload
from catalogsync.domain.reconciliation import ABSENT, Present

if TYPE_CHECKING:
    from catalogsync.domain.model.actions import Payload
    from catalogsync.domain.reconciliation import DraftCollection

    from .schema import (
        AssetDraftPayload,
        AssetPayload,
        AssetSourcePayload,
        CustomFieldsPayload,
        DimensionsPayload,
        ImagePayload,
        ProductDraftPayload,
        ProductPayload,
    )


def translate_product(payload: ProductPayload) -> Product:
    return Product(
        id=payload.id,
        version=payload.version,
        key=payload.key,
        name=dict(payload.name),
        assets=tuple(_build_asset(asset) for asset in payload.assets),
        images=tuple(_build_image(image) for image in payload.images),
    )


def translate_product_draft(payload: ProductDraftPayload) -> ProductDraft:
    assets: DraftCollection[AssetDraft] = (
        ABSENT
        if payload.assets is None
        else Present(tuple(_build_asset_draft(asset) for asset in payload.assets))
    )
    images: DraftCollection[ImageDraft] = (
        ABSENT
        if payload.images is None
        else Present(tuple(_build_image_draft(image) for image in payload.images))
    )
    return ProductDraft(key=payload.key, name=dict(payload.name), assets=assets, images=images)


def product_draft_payload(draft: ProductDraft) -> Payload:
    """Build the create-request body for ``draft``; absent lists are left out."""

    payload: Payload = {"name": dict(draft.name)}
    if draft.key is not None:
        payload["key"] = draft.key
    if isinstance(draft.assets, Present):
        payload["assets"] = [asset_draft_payload(asset) for asset in draft.assets.drafts]
    if isinstance(draft.images, Present):
        payload["images"] = [image_draft_payload(image) for image in draft.images.drafts]
    return payload


def _build_asset(payload: AssetPayload) -> Asset:
    return Asset(
        id=payload.id,
        key=payload.key,
        name=dict(payload.name),
        description=dict(payload.description) if payload.description is not None else None,
        sources=tuple(_build_source(source) for source in payload.sources),
        tags=frozenset(payload.tags),
        custom=_build_custom(payload.custom),
    )


def _build_asset_draft(payload: AssetDraftPayload) -> AssetDraft:
    return AssetDraft(
        key=payload.key,
        name=dict(payload.name),
        description=dict(payload.description) if payload.description is not None else None,
        sources=tuple(_build_source(source) for source in payload.sources),
        tags=frozenset(payload.tags),
        custom=_build_custom(payload.custom),
    )


def _build_source(payload: AssetSourcePayload) -> AssetSource:
    return AssetSource(
        uri=payload.uri,
        key=payload.key,
        content_type=payload.content_type,
        dimensions=_build_dimensions(payload.dimensions),
    )


def _build_custom(payload: CustomFieldsPayload | None) -> CustomFields | None:
    if payload is None:
        return None
    return CustomFields(type_key=payload.type.key, fields=dict(payload.field_values))


def _build_dimensions(payload: DimensionsPayload | None) -> Dimensions | None:
    if payload is None:
        return None
    return Dimensions(width=payload.w, height=payload.h)


def _build_image(payload: ImagePayload) -> Image:
    return Image(
        url=payload.url,
        dimensions=Dimensions(width=payload.dimensions.w, height=payload.dimensions.h),
        label=payload.label,
    )


def _build_image_draft(payload: ImagePayload) -> ImageDraft:
    return ImageDraft(
        url=payload.url,
        dimensions=Dimensions(width=payload.dimensions.w, height=payload.dimensions.h),
        label=payload.label,
    )

