"""Synchronization defaults for the product sync service."""

from __future__ import annotations

from dataclasses import dataclass

from catalogsync.domain.product_sync import DEFAULT_BATCH_SIZE

from .env import optional_env_number


@dataclass(frozen=True, slots=True)
class SyncConfig:
    batch_size: int = DEFAULT_BATCH_SIZE


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        batch_size=optional_env_number(
            "CATALOG_SYNC_BATCH_SIZE", default=DEFAULT_BATCH_SIZE, kind=int
        )
    )
