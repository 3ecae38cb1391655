"""Application service syncing product drafts into the catalog.

For every draft the service looks up the existing product by key and either
creates it or sends the update actions computed by the reconciliation core.
The actions are executed by a ``ProductRepository``; the service itself
never talks to the network.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from itertools import batched
from logging import getLogger
from time import perf_counter
from typing import TYPE_CHECKING

from catalogsync.domain.reconciliation import ReconciliationError
from catalogsync.domain.update_actions import build_product_actions

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from catalogsync.domain.model import ProductDraft
    from catalogsync.domain.ports.catalog import ProductRepository

DEFAULT_BATCH_SIZE = 30

type ErrorCallback = Callable[[str, Exception | None], None]
type WarningCallback = Callable[[str], None]

log = getLogger(__name__)


def _log_error(message: str, exc: Exception | None) -> None:
    log.error(message, exc_info=exc)


def _log_warning(message: str) -> None:
    log.warning(message)


@dataclass(slots=True)
class SyncStatistics:
    """Counters of one or more sync runs."""

    processed: int = 0
    created: int = 0
    updated: int = 0
    failed: int = 0
    processing_time_seconds: float = 0.0

    def merge(self, other: SyncStatistics) -> None:
        self.processed += other.processed
        self.created += other.created
        self.updated += other.updated
        self.failed += other.failed
        self.processing_time_seconds += other.processing_time_seconds

    def report_message(self) -> str:
        return (
            f"Summary: {self.processed} products were processed in total "
            f"({self.created} created, {self.updated} updated and {self.failed} failed to sync)."
        )


@dataclass(frozen=True, slots=True)
class SyncOptions:
    batch_size: int = DEFAULT_BATCH_SIZE
    error_callback: ErrorCallback = _log_error
    warning_callback: WarningCallback = _log_warning

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError("Batch size must be at least 1")


@dataclass(slots=True)
class ProductSync:
    """Sync product drafts against a product repository.

    Statistics of every ``sync`` call are returned and also accumulated into
    ``statistics``, which is safe to read while other threads are syncing.
    """

    repository: ProductRepository
    options: SyncOptions = field(default_factory=SyncOptions)
    _totals: SyncStatistics = field(default_factory=SyncStatistics, init=False)
    _totals_lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    @property
    def statistics(self) -> SyncStatistics:
        with self._totals_lock:
            totals = SyncStatistics()
            totals.merge(self._totals)
            return totals

    def sync(self, drafts: Sequence[ProductDraft]) -> SyncStatistics:
        started = perf_counter()
        statistics = SyncStatistics()

        keyed: list[ProductDraft] = []
        for draft in drafts:
            if draft.key is None:
                statistics.processed += 1
                statistics.failed += 1
                self.options.warning_callback("Product draft without a key was skipped.")
                continue
            keyed.append(draft)

        for batch in batched(keyed, self.options.batch_size):
            self._sync_batch(batch, statistics)

        statistics.processing_time_seconds = perf_counter() - started
        with self._totals_lock:
            self._totals.merge(statistics)

        log.info(statistics.report_message())
        return statistics

    def _sync_batch(self, batch: Sequence[ProductDraft], statistics: SyncStatistics) -> None:
        keys = [draft.key for draft in batch if draft.key is not None]
        statistics.processed += len(batch)
        try:
            existing = self.repository.fetch_by_keys(keys)
        except Exception as exc:  # noqa: BLE001
            statistics.failed += len(batch)
            self.options.error_callback(
                f"Failed to fetch existing products with keys: {', '.join(keys)}.", exc
            )
            return

        seen: set[str] = set()
        for draft in batch:
            key = draft.key
            if key is None:
                continue
            if key in seen:
                statistics.failed += 1
                self.options.warning_callback(
                    f"Product draft with key '{key}' appears more than once in the batch "
                    "and was skipped."
                )
                continue
            seen.add(key)

            product = existing.get(key)
            try:
                if product is None:
                    self.repository.create(draft)
                    statistics.created += 1
                    continue
                actions = build_product_actions(product, draft)
                if actions:
                    self.repository.update(product, actions)
                    statistics.updated += 1
            except ReconciliationError as exc:
                statistics.failed += 1
                self.options.error_callback(
                    f"Failed to build update actions for the product with key '{key}'. "
                    f"Reason: {exc}",
                    exc,
                )
            except Exception as exc:  # noqa: BLE001
                statistics.failed += 1
                action = "create" if product is None else "update"
                self.options.error_callback(
                    f"Failed to {action} the product with key '{key}'. Reason: {exc}", exc
                )
