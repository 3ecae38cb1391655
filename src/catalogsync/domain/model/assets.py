"""Assets attached to a product: existing assets and asset drafts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import CustomFields, Dimensions, LocalizedString


@dataclass(frozen=True, slots=True)
class AssetSource:
    uri: str
    key: str | None = None
    content_type: str | None = None
    dimensions: Dimensions | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AssetDraft:
    """Desired state of one asset; it gets an ``id`` only once created remotely."""

    key: str | None
    name: LocalizedString
    description: LocalizedString | None = None
    sources: tuple[AssetSource, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)
    custom: CustomFields | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Asset:
    """Asset as it currently exists on a product."""

    id: str
    key: str | None
    name: LocalizedString
    description: LocalizedString | None = None
    sources: tuple[AssetSource, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)
    custom: CustomFields | None = None
