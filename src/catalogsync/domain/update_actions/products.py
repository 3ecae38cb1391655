"""Update actions for a whole product."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.domain.model import ChangeProductName

from .assets import build_assets_update_actions
from .common import same_localized
from .images import build_images_update_actions

if TYPE_CHECKING:
    from catalogsync.domain.model import Product, ProductDraft, UpdateAction

log = getLogger(__name__)


def build_product_actions(product: Product, draft: ProductDraft) -> list[UpdateAction]:
    """Compare a product with its draft: name first, then assets, then images.

    Raises ``DuplicateKeyError`` if the draft's assets or images share a key;
    no actions are returned for the product in that case.
    """

    actions: list[UpdateAction] = []
    if not same_localized(product.name, draft.name):
        actions.append(ChangeProductName(name=draft.name))
    actions.extend(build_assets_update_actions(product.assets, draft.assets))
    actions.extend(build_images_update_actions(product.images, draft.images))

    log.debug("Built %d actions for product %s", len(actions), product.key or product.id)
    return actions
