"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.adapters.catalog import HttpProductRepository
from catalogsync.config import get_sync_config
from catalogsync.domain.product_sync import ProductSync, SyncOptions, SyncStatistics
from catalogsync.domain.reconciliation import ReconciliationError
from catalogsync.domain.update_actions import build_product_actions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.domain.model import Product, ProductDraft, UpdateAction
    from catalogsync.domain.ports.catalog import ProductRepository


log = getLogger(__name__)


@dataclass(slots=True)
class ProductPlan:
    """Planned change for one product draft."""

    key: str | None
    product_id: str | None
    actions: list[UpdateAction] = field(default_factory=list["UpdateAction"])
    error: str | None = None

    @property
    def creates(self) -> bool:
        return self.product_id is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "key": self.key,
            "productId": self.product_id,
            "create": self.creates,
            "actions": [action.to_payload() for action in self.actions],
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


def plan_product_actions(
    existing: Sequence[Product],
    drafts: Sequence[ProductDraft],
) -> list[ProductPlan]:
    """Compute, without executing anything, what syncing ``drafts`` would do.

    A draft whose actions cannot be built (for example because its assets
    share a key) gets a plan carrying the error and no actions; the other
    drafts are still planned.
    """

    by_key = {product.key: product for product in existing if product.key is not None}
    plans: list[ProductPlan] = []
    for draft in drafts:
        product = by_key.get(draft.key) if draft.key is not None else None
        if product is None:
            plans.append(ProductPlan(key=draft.key, product_id=None))
            continue
        try:
            actions = build_product_actions(product, draft)
        except ReconciliationError as exc:
            log.error("Failed to plan the product with key '%s'. Reason: %s", draft.key, exc)
            plans.append(ProductPlan(key=draft.key, product_id=product.id, error=str(exc)))
            continue
        plans.append(ProductPlan(key=draft.key, product_id=product.id, actions=actions))
    log.info(
        "Planned %d products: %d to create, %d failed, %d actions in total",
        len(plans),
        sum(plan.creates for plan in plans),
        sum(plan.failed for plan in plans),
        sum(len(plan.actions) for plan in plans),
    )
    return plans


def sync_product_drafts(
    drafts: Sequence[ProductDraft],
    *,
    repository: ProductRepository | None = None,
    batch_size: int | None = None,
) -> SyncStatistics:
    """Synchronise product drafts into the configured catalog."""

    effective_repository = repository or HttpProductRepository()
    effective_batch_size = batch_size or get_sync_config().batch_size
    log.info("Starting product sync: drafts=%s, batch_size=%s", len(drafts), effective_batch_size)

    product_sync = ProductSync(
        repository=effective_repository,
        options=SyncOptions(batch_size=effective_batch_size),
    )
    return product_sync.sync(drafts)
