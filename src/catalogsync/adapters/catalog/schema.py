"""Minimal Pydantic models for the catalog API payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class DimensionsPayload(CatalogBaseModel):
    w: int
    h: int


class TypeReference(CatalogBaseModel):
    key: str


class CustomFieldsPayload(CatalogBaseModel):
    type: TypeReference
    field_values: dict[str, Any] = Field(default_factory=dict, alias="fields")


class AssetSourcePayload(CatalogBaseModel):
    uri: str
    key: str | None = None
    content_type: str | None = None
    dimensions: DimensionsPayload | None = None


class AssetDraftPayload(CatalogBaseModel):
    key: str | None = None
    name: dict[str, str]
    description: dict[str, str] | None = None
    sources: list[AssetSourcePayload] = Field(default_factory=list["AssetSourcePayload"])
    tags: list[str] = Field(default_factory=list)
    custom: CustomFieldsPayload | None = None


class AssetPayload(AssetDraftPayload):
    id: str


class ImagePayload(CatalogBaseModel):
    url: str
    dimensions: DimensionsPayload
    label: str | None = None


class ProductDraftPayload(CatalogBaseModel):
    key: str | None = None
    name: dict[str, str]
    # ``None`` (field missing) differs from an empty list: it removes every element
    assets: list[AssetDraftPayload] | None = None
    images: list[ImagePayload] | None = None


class ProductPayload(CatalogBaseModel):
    id: str
    version: int
    key: str | None = None
    name: dict[str, str]
    assets: list[AssetPayload] = Field(default_factory=list["AssetPayload"])
    images: list[ImagePayload] = Field(default_factory=list["ImagePayload"])


class ProductQueryResponse(CatalogBaseModel):
    count: int | None = None
    total: int | None = None
    results: list[ProductPayload] = Field(default_factory=list["ProductPayload"])
