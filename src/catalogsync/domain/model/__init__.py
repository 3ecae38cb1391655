"""Public domain model surface."""

from __future__ import annotations

from catalogsync.domain.model.actions import (
    AddAsset,
    AddExternalImage,
    ChangeAssetName,
    ChangeAssetOrder,
    ChangeImageOrder,
    ChangeProductName,
    RemoveAsset,
    RemoveImage,
    SetAssetCustomField,
    SetAssetCustomType,
    SetAssetDescription,
    SetAssetSources,
    SetAssetTags,
    SetImageLabel,
    UpdateAction,
)
from catalogsync.domain.model.assets import Asset, AssetDraft, AssetSource
from catalogsync.domain.model.images import Image, ImageDraft
from catalogsync.domain.model.primitives import (
    CustomFields,
    CustomFieldValue,
    Dimensions,
    Locale,
    LocalizedString,
)
from catalogsync.domain.model.products import Product, ProductDraft

__all__ = [  # noqa: RUF022
    # actions
    "UpdateAction",
    "ChangeProductName",
    "AddAsset",
    "ChangeAssetName",
    "ChangeAssetOrder",
    "RemoveAsset",
    "SetAssetCustomField",
    "SetAssetCustomType",
    "SetAssetDescription",
    "SetAssetSources",
    "SetAssetTags",
    "AddExternalImage",
    "ChangeImageOrder",
    "RemoveImage",
    "SetImageLabel",
    # resources
    "Asset",
    "AssetDraft",
    "AssetSource",
    "Image",
    "ImageDraft",
    "Product",
    "ProductDraft",
    # primitives
    "CustomFieldValue",
    "CustomFields",
    "Dimensions",
    "Locale",
    "LocalizedString",
]
