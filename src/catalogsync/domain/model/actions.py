"""Update actions sent to the catalog.

Each action is immutable and knows its own wire form. Actions never point back
at the entries or drafts that produced them; they only copy the values they need.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .assets import AssetDraft, AssetSource
    from .images import ImageDraft
    from .primitives import CustomFields, CustomFieldValue, Dimensions, LocalizedString

type Payload = dict[str, object]


def dimensions_payload(dimensions: Dimensions | None) -> Payload | None:
    if dimensions is None:
        return None
    return {"w": dimensions.width, "h": dimensions.height}


def source_payload(source: AssetSource) -> Payload:
    payload: Payload = {"uri": source.uri}
    if source.key is not None:
        payload["key"] = source.key
    if source.content_type is not None:
        payload["contentType"] = source.content_type
    if source.dimensions is not None:
        payload["dimensions"] = dimensions_payload(source.dimensions)
    return payload


def custom_payload(custom: CustomFields | None) -> Payload | None:
    if custom is None:
        return None
    return {"type": {"key": custom.type_key}, "fields": dict(custom.fields)}


def asset_draft_payload(draft: AssetDraft) -> Payload:
    payload: Payload = {
        "name": dict(draft.name),
        "sources": [source_payload(source) for source in draft.sources],
        "tags": sorted(draft.tags),
    }
    if draft.key is not None:
        payload["key"] = draft.key
    if draft.description is not None:
        payload["description"] = dict(draft.description)
    if draft.custom is not None:
        payload["custom"] = custom_payload(draft.custom)
    return payload


def image_draft_payload(draft: ImageDraft) -> Payload:
    payload: Payload = {"url": draft.url, "dimensions": dimensions_payload(draft.dimensions)}
    if draft.label is not None:
        payload["label"] = draft.label
    return payload


@dataclass(frozen=True, slots=True)
class UpdateAction:
    """Base class of every update action."""

    action: ClassVar[str]

    def to_payload(self) -> Payload:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ChangeProductName(UpdateAction):
    action: ClassVar[str] = "changeName"

    name: LocalizedString

    def to_payload(self) -> Payload:
        return {"action": self.action, "name": dict(self.name)}


@dataclass(frozen=True, slots=True)
class RemoveAsset(UpdateAction):
    action: ClassVar[str] = "removeAsset"

    asset_key: str | None

    def to_payload(self) -> Payload:
        return {"action": self.action, "assetKey": self.asset_key}


@dataclass(frozen=True, slots=True)
class AddAsset(UpdateAction):
    action: ClassVar[str] = "addAsset"

    asset: AssetDraft
    position: int

    def to_payload(self) -> Payload:
        return {
            "action": self.action,
            "asset": asset_draft_payload(self.asset),
            "position": self.position,
        }


@dataclass(frozen=True, slots=True)
class ChangeAssetOrder(UpdateAction):
    action: ClassVar[str] = "changeAssetOrder"

    asset_order: tuple[str, ...]

    def to_payload(self) -> Payload:
        return {"action": self.action, "assetOrder": list(self.asset_order)}


@dataclass(frozen=True, slots=True)
class ChangeAssetName(UpdateAction):
    action: ClassVar[str] = "changeAssetName"

    asset_key: str
    name: LocalizedString

    def to_payload(self) -> Payload:
        return {"action": self.action, "assetKey": self.asset_key, "name": dict(self.name)}


@dataclass(frozen=True, slots=True)
class SetAssetDescription(UpdateAction):
    action: ClassVar[str] = "setAssetDescription"

    asset_key: str
    description: LocalizedString | None

    def to_payload(self) -> Payload:
        description = dict(self.description) if self.description is not None else None
        return {"action": self.action, "assetKey": self.asset_key, "description": description}


@dataclass(frozen=True, slots=True)
class SetAssetSources(UpdateAction):
    action: ClassVar[str] = "setAssetSources"

    asset_key: str
    sources: tuple[AssetSource, ...]

    def to_payload(self) -> Payload:
        return {
            "action": self.action,
            "assetKey": self.asset_key,
            "sources": [source_payload(source) for source in self.sources],
        }


@dataclass(frozen=True, slots=True)
class SetAssetTags(UpdateAction):
    action: ClassVar[str] = "setAssetTags"

    asset_key: str
    tags: frozenset[str]

    def to_payload(self) -> Payload:
        return {"action": self.action, "assetKey": self.asset_key, "tags": sorted(self.tags)}


@dataclass(frozen=True, slots=True)
class SetAssetCustomType(UpdateAction):
    """Replace (or with ``custom=None`` remove) the custom type of an asset."""

    action: ClassVar[str] = "setAssetCustomType"

    asset_key: str
    custom: CustomFields | None

    def to_payload(self) -> Payload:
        payload: Payload = {"action": self.action, "assetKey": self.asset_key}
        if self.custom is not None:
            payload["type"] = {"key": self.custom.type_key}
            payload["fields"] = dict(self.custom.fields)
        return payload


@dataclass(frozen=True, slots=True)
class SetAssetCustomField(UpdateAction):
    """Set one custom field; ``value=None`` removes the field."""

    action: ClassVar[str] = "setAssetCustomField"

    asset_key: str
    name: str
    value: CustomFieldValue | None

    def to_payload(self) -> Payload:
        payload: Payload = {"action": self.action, "assetKey": self.asset_key, "name": self.name}
        if self.value is not None:
            payload["value"] = self.value
        return payload


@dataclass(frozen=True, slots=True)
class RemoveImage(UpdateAction):
    action: ClassVar[str] = "removeImage"

    image_url: str | None

    def to_payload(self) -> Payload:
        return {"action": self.action, "imageUrl": self.image_url}


@dataclass(frozen=True, slots=True)
class AddExternalImage(UpdateAction):
    action: ClassVar[str] = "addExternalImage"

    image: ImageDraft
    position: int

    def to_payload(self) -> Payload:
        return {
            "action": self.action,
            "image": image_draft_payload(self.image),
            "position": self.position,
        }


@dataclass(frozen=True, slots=True)
class ChangeImageOrder(UpdateAction):
    action: ClassVar[str] = "changeImageOrder"

    image_urls: tuple[str, ...]

    def to_payload(self) -> Payload:
        return {"action": self.action, "imageUrls": list(self.image_urls)}


@dataclass(frozen=True, slots=True)
class SetImageLabel(UpdateAction):
    action: ClassVar[str] = "setImageLabel"

    image_url: str
    label: str | None

    def to_payload(self) -> Payload:
        return {"action": self.action, "imageUrl": self.image_url, "label": self.label}
