"""Errors raised by the list reconciliation core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ReconciliationError(ValueError):
    """Base class for failures that abort one list reconciliation."""


class DuplicateKeyError(ReconciliationError):
    """Raised when drafts of one collection share the same key."""

    def __init__(
        self,
        *,
        collection: str,
        duplicate_keys: Iterable[str],
        detail: str | None = None,
    ) -> None:
        self.collection = collection
        self.duplicate_keys = tuple(duplicate_keys)
        keys = ", ".join(repr(key) for key in self.duplicate_keys)
        message = f"Supplied {collection} have duplicate keys: {keys}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
