from __future__ import annotations

import pytest

CATALOG_ENV_VARS = (
    "CATALOG_API_URL",
    "CATALOG_API_TOKEN",
    "CATALOG_RATE_LIMIT",
    "CATALOG_SYNC_BATCH_SIZE",
)


@pytest.fixture(autouse=True)
def _isolate_catalog_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
