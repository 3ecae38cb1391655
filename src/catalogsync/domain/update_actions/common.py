"""Comparison helpers shared by the per-field action builders."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalogsync.domain.model import LocalizedString


def build_update_action[T, A](old_value: T, new_value: T, build: Callable[[], A]) -> A | None:
    """Return ``build()`` if the values differ, otherwise ``None``."""

    if old_value == new_value:
        return None
    return build()


def same_localized(old: LocalizedString | None, new: LocalizedString | None) -> bool:
    """Compare localized strings, treating ``None`` and an empty mapping alike."""

    return dict(old or {}) == dict(new or {})


def require_key(key: str | None, *, kind: str) -> str:
    if key is None:
        raise ValueError(f"Only keyed {kind}s can be compared field by field")
    return key
