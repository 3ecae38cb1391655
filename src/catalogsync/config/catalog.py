"""Catalog API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_number, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_RATE_LIMIT_PER_SECOND = 10
CATALOG_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    resilience: ResilienceConfig


def get_catalog_config(*, resilience: ResilienceConfig | None = None) -> CatalogConfig:
    values = require_env_vars(("CATALOG_API_URL", "CATALOG_API_TOKEN"))
    if resilience is not None:
        return CatalogConfig(resilience=resilience)

    calls_per_second = optional_env_number(
        "CATALOG_RATE_LIMIT", default=DEFAULT_RATE_LIMIT_PER_SECOND, kind=int
    )
    return CatalogConfig(
        resilience=ResilienceConfig(
            name="catalog",
            base_url=values["CATALOG_API_URL"].rstrip("/"),
            timeout_seconds=CATALOG_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=calls_per_second, per_seconds=1.0),
            retry=RetryPolicy(total=4),
            default_headers={"Authorization": f"Bearer {values['CATALOG_API_TOKEN']}"},
        )
    )
