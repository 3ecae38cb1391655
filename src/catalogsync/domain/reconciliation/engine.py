"""Orchestrator for the list reconciliation core.

The engine composes the stages but knows nothing about concrete resources.
Each list field (assets, images, ...) supplies its own diff collaborator and
action builders, so every field shares one reconciliation core.

Actions are concatenated as remove/update, then reorder, then add. A reorder
may only reference identifiers that exist, and new entries get theirs only
after their add action ran remotely, so this order is part of the contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .additions import find_additions
from .contracts import Absent, as_draft_collection
from .elements import reconcile_elements
from .keys import index_keys
from .ordering import reconcile_order

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .contracts import (
        AddActionBuilder,
        DraftCollection,
        ElementDiff,
        Identified,
        Keyed,
        ListActionFactory,
        RemoveActionBuilder,
        ReorderActionBuilder,
    )

log = getLogger(__name__)


def reconcile_list[E: Identified, D: Keyed, A](
    old_entries: Sequence[E],
    new_drafts: DraftCollection[D] | Sequence[D] | None,
    *,
    diff_element: ElementDiff[E, D, A],
    build_remove: RemoveActionBuilder[A],
    build_add: AddActionBuilder[D, A],
    build_reorder: ReorderActionBuilder[A],
    collection: str = "drafts",
    duplicate_detail: str | None = None,
) -> tuple[A, ...]:
    """Compute the ordered actions turning ``old_entries`` into ``new_drafts``.

    An absent draft collection removes every old entry and nothing else.
    Raises ``DuplicateKeyError`` before building any action if drafts share a key.
    """

    drafts_variant = as_draft_collection(new_drafts)
    if isinstance(drafts_variant, Absent):
        return tuple(build_remove(entry.key) for entry in old_entries)

    drafts = drafts_variant.drafts
    index = index_keys(old_entries, drafts, collection=collection, detail=duplicate_detail)

    elements = reconcile_elements(
        old_entries,
        index.drafts_by_key,
        diff_element=diff_element,
        build_remove=build_remove,
    )
    reorder = reconcile_order(
        old_entries,
        drafts,
        removed_keys=elements.removed_keys,
        build_reorder=build_reorder,
    )
    additions = find_additions(drafts, index.old_by_key, build_add=build_add)

    actions = elements.actions + ((reorder,) if reorder is not None else ()) + additions
    log.debug(
        "Reconciled %s: old=%d, new=%d, actions=%d",
        collection,
        len(old_entries),
        len(drafts),
        len(actions),
    )
    return actions


@dataclass(frozen=True, slots=True)
class ListReconciler[E: Identified, D: Keyed, A]:
    """Reconcile one list field using a resource-specific action factory."""

    factory: ListActionFactory[E, D, A]
    collection: str = "drafts"
    duplicate_detail: str | None = None

    def __call__(
        self,
        old_entries: Sequence[E],
        new_drafts: DraftCollection[D] | Sequence[D] | None,
    ) -> tuple[A, ...]:
        return reconcile_list(
            old_entries,
            new_drafts,
            diff_element=self.factory.build_element_actions,
            build_remove=self.factory.build_remove_action,
            build_add=self.factory.build_add_action,
            build_reorder=self.factory.build_reorder_action,
            collection=self.collection,
            duplicate_detail=self.duplicate_detail,
        )
