"""Order reconciliation stage.

Compares the order of surviving entries before and after the change. Only
identifiers of entries that already exist remotely can take part, so drafts
without an old counterpart are left out of the target order and get placed by
their add actions instead.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .contracts import Identified, Keyed, ReorderActionBuilder

log = getLogger(__name__)


def reconcile_order[E: Identified, D: Keyed, A](
    old_entries: Sequence[E],
    drafts: Sequence[D],
    *,
    removed_keys: frozenset[str | None],
    build_reorder: ReorderActionBuilder[A],
) -> A | None:
    """Return one reorder action if the surviving entries changed order, else ``None``."""

    id_by_key: dict[str, str] = {}
    for entry in old_entries:
        if entry.key is not None:
            id_by_key.setdefault(entry.key, entry.id)

    old_order = tuple(entry.id for entry in old_entries if entry.key not in removed_keys)
    new_order = tuple(
        id_by_key[draft.key]
        for draft in drafts
        if draft.key is not None and draft.key in id_by_key
    )

    if old_order == new_order:
        return None
    log.debug("Order changed: %s -> %s", old_order, new_order)
    return build_reorder(new_order)
