"""Reconciliation core for ordered, uniquely-keyed list fields.

Layered flow for one list field:
1) index old entries and drafts by key, rejecting duplicate draft keys
2) remove unmatched entries, diff matched pairs
3) reorder surviving entries if their relative order changed
4) add drafts without a counterpart at their final index
"""

from __future__ import annotations

from .contracts import (
    ABSENT,
    Absent,
    DraftCollection,
    Identified,
    Keyed,
    ListActionFactory,
    Present,
    as_draft_collection,
)
from .engine import ListReconciler, reconcile_list
from .errors import DuplicateKeyError, ReconciliationError

__all__ = [
    "ABSENT",
    "Absent",
    "DraftCollection",
    "DuplicateKeyError",
    "Identified",
    "Keyed",
    "ListActionFactory",
    "ListReconciler",
    "Present",
    "ReconciliationError",
    "as_draft_collection",
    "reconcile_list",
]
