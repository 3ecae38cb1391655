"""Products: the resource whose list fields get reconciled."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from catalogsync.domain.reconciliation import ABSENT, Present

from .assets import AssetDraft
from .images import ImageDraft

if TYPE_CHECKING:
    from catalogsync.domain.reconciliation import DraftCollection

    from .assets import Asset
    from .images import Image
    from .primitives import LocalizedString


@dataclass(frozen=True, slots=True, kw_only=True)
class ProductDraft:
    """Desired product state.

    ``assets`` and ``images`` default to ``ABSENT``, which removes every existing
    element of that list; pass ``Present(())`` to express an explicitly empty list.
    """

    key: str | None
    name: LocalizedString
    assets: DraftCollection[AssetDraft] = ABSENT
    images: DraftCollection[ImageDraft] = ABSENT


@dataclass(frozen=True, slots=True, kw_only=True)
class Product:
    """Product as currently stored in the catalog."""

    id: str
    version: int
    key: str | None
    name: LocalizedString
    assets: tuple[Asset, ...] = ()
    images: tuple[Image, ...] = ()

    def as_draft(self) -> ProductDraft:
        """Return a draft describing exactly this product's current state."""

        return ProductDraft(
            key=self.key,
            name=self.name,
            assets=Present(
                tuple(
                    AssetDraft(
                        key=asset.key,
                        name=asset.name,
                        description=asset.description,
                        sources=asset.sources,
                        tags=asset.tags,
                        custom=asset.custom,
                    )
                    for asset in self.assets
                )
            ),
            images=Present(
                tuple(
                    ImageDraft(url=image.url, dimensions=image.dimensions, label=image.label)
                    for image in self.images
                )
            ),
        )
