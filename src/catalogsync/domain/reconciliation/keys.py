"""Key indexing stage.

Builds the lookup maps every later stage relies on and enforces the only
precondition of a reconciliation: draft keys are unique. Unkeyed elements never
enter a map and therefore never match anything.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import DuplicateKeyError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .contracts import Identified, Keyed


@dataclass(frozen=True, slots=True)
class KeyIndex[E: Identified, D: Keyed]:
    """Key lookups for one reconciliation call."""

    old_by_key: Mapping[str, E]
    drafts_by_key: Mapping[str, D]


def index_keys[E: Identified, D: Keyed](
    old_entries: Sequence[E],
    drafts: Sequence[D],
    *,
    collection: str = "drafts",
    detail: str | None = None,
) -> KeyIndex[E, D]:
    """Index ``old_entries`` and ``drafts`` by key.

    Raises ``DuplicateKeyError`` listing every key shared by two or more drafts.
    """

    counts = Counter(draft.key for draft in drafts if draft.key is not None)
    duplicates = [key for key, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateKeyError(collection=collection, duplicate_keys=duplicates, detail=detail)

    old_by_key: dict[str, E] = {}
    for entry in old_entries:
        if entry.key is not None:
            old_by_key.setdefault(entry.key, entry)

    drafts_by_key = {draft.key: draft for draft in drafts if draft.key is not None}
    return KeyIndex(old_by_key=old_by_key, drafts_by_key=drafts_by_key)
