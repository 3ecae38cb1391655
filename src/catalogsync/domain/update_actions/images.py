"""Update actions for product images."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from catalogsync.domain.model import (
    AddExternalImage,
    ChangeImageOrder,
    RemoveImage,
    SetImageLabel,
    UpdateAction,
)
from catalogsync.domain.reconciliation import ListReconciler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.domain.model import Image, ImageDraft
    from catalogsync.domain.reconciliation import DraftCollection


def build_image_actions(old: Image, draft: ImageDraft) -> list[UpdateAction]:
    # dimensions are ignored; a new url is a different image
    if old.label == draft.label:
        return []
    return [SetImageLabel(image_url=old.url, label=draft.label)]


class ImageActionFactory:
    def build_element_actions(self, old: Image, draft: ImageDraft) -> list[UpdateAction]:
        return build_image_actions(old, draft)

    def build_remove_action(self, key: str | None) -> UpdateAction:
        return RemoveImage(image_url=key)

    def build_add_action(self, draft: ImageDraft, index: int) -> UpdateAction:
        return AddExternalImage(image=draft, position=index)

    def build_reorder_action(self, ids: tuple[str, ...]) -> UpdateAction:
        return ChangeImageOrder(image_urls=ids)


reconcile_images: Final[ListReconciler[Image, ImageDraft, UpdateAction]] = ListReconciler(
    factory=ImageActionFactory(),
    collection="image drafts",
    duplicate_detail="Image URLs are expected to be unique inside their product.",
)


def build_images_update_actions(
    old_images: Sequence[Image],
    new_drafts: DraftCollection[ImageDraft] | Sequence[ImageDraft] | None,
) -> tuple[UpdateAction, ...]:
    return reconcile_images(old_images, new_drafts)
