"""Shared contracts of the list reconciliation core.

This module intentionally holds only:
- the structural shapes of entries and drafts the core can key and order
- the capability protocols supplied by each resource list field
- the explicit ``Present`` / ``ABSENT`` variants of a draft collection
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol


class Keyed(Protocol):
    """Anything the core can match by key; ``None`` means unmatchable."""

    @property
    def key(self) -> str | None: ...


class Identified(Keyed, Protocol):
    """Existing entry carrying the identifier assigned by the remote system."""

    @property
    def id(self) -> str: ...


type ElementDiff[E, D, A] = Callable[[E, D], Sequence[A]]
type RemoveActionBuilder[A] = Callable[[str | None], A]
type AddActionBuilder[D, A] = Callable[[D, int], A]
type ReorderActionBuilder[A] = Callable[[tuple[str, ...]], A]


class ListActionFactory[E, D, A](Protocol):
    """Resource-specific action building for one list field."""

    def build_element_actions(self, old: E, draft: D) -> Sequence[A]: ...

    def build_remove_action(self, key: str | None) -> A: ...

    def build_add_action(self, draft: D, index: int) -> A: ...

    def build_reorder_action(self, ids: tuple[str, ...]) -> A: ...


class Absent(Enum):
    """Marker for a draft collection that was not supplied at all."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT


@dataclass(frozen=True, slots=True)
class Present[D]:
    """Draft collection that was supplied, possibly empty."""

    drafts: tuple[D, ...] = ()


type DraftCollection[D] = Present[D] | Absent


def as_draft_collection[D](drafts: DraftCollection[D] | Sequence[D] | None) -> DraftCollection[D]:
    """Coerce boundary input into an explicit draft collection variant."""

    if drafts is None or drafts is ABSENT:
        return ABSENT
    if isinstance(drafts, Present):
        return drafts
    return Present(tuple(drafts))
