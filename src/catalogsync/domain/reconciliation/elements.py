"""Element reconciliation stage.

Responsibilities of this stage:
- walk old entries in their original order
- emit a remove action for every entry without a same-keyed draft
- delegate matched pairs to the per-element diff collaborator

The removed keys are returned as an immutable value so the order stage can
compute its post-removal baseline without shared state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .contracts import ElementDiff, Identified, Keyed, RemoveActionBuilder

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ElementReconciliation[A]:
    """Remove and update actions plus the keys of removed entries."""

    actions: tuple[A, ...] = ()
    removed_keys: frozenset[str | None] = field(default_factory=frozenset)


def reconcile_elements[E: Identified, D: Keyed, A](
    old_entries: Sequence[E],
    drafts_by_key: Mapping[str, D],
    *,
    diff_element: ElementDiff[E, D, A],
    build_remove: RemoveActionBuilder[A],
) -> ElementReconciliation[A]:
    actions: list[A] = []
    removed_keys: set[str | None] = set()

    for entry in old_entries:
        draft = drafts_by_key.get(entry.key) if entry.key is not None else None
        if draft is None:
            removed_keys.add(entry.key)
            actions.append(build_remove(entry.key))
            continue
        actions.extend(diff_element(entry, draft))

    if removed_keys:
        log.debug("Removing %d entries: %s", len(removed_keys), sorted(map(str, removed_keys)))
    return ElementReconciliation(actions=tuple(actions), removed_keys=frozenset(removed_keys))
