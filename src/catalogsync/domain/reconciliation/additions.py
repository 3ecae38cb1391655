"""Addition stage: drafts without an existing counterpart."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .contracts import AddActionBuilder, Identified, Keyed


def find_additions[E: Identified, D: Keyed, A](
    drafts: Sequence[D],
    old_by_key: Mapping[str, E],
    *,
    build_add: AddActionBuilder[D, A],
) -> tuple[A, ...]:
    """Build add actions positioned at each draft's index in the full new collection."""

    return tuple(
        build_add(draft, index)
        for index, draft in enumerate(drafts)
        if draft.key is None or draft.key not in old_by_key
    )
