"""Update actions for product assets.

The asset list is reconciled by the generic list core; this module only
contributes what is asset-specific: the field comparison of a matched pair and
the shapes of the add/remove/reorder actions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from catalogsync.domain.model import (
    AddAsset,
    ChangeAssetName,
    ChangeAssetOrder,
    RemoveAsset,
    SetAssetCustomField,
    SetAssetCustomType,
    SetAssetDescription,
    SetAssetSources,
    SetAssetTags,
    UpdateAction,
)
from catalogsync.domain.reconciliation import ListReconciler

from .common import build_update_action, require_key, same_localized

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.domain.model import Asset, AssetDraft, CustomFields
    from catalogsync.domain.reconciliation import DraftCollection

ASSET_KEYS_DETAIL: Final[str] = (
    "Asset keys are expected to be unique inside their container (a product)."
)


def build_asset_actions(old: Asset, draft: AssetDraft) -> list[UpdateAction]:
    """Compare one existing asset with its draft."""

    asset_key = require_key(old.key, kind="asset")
    actions: list[UpdateAction | None] = []

    if not same_localized(old.name, draft.name):
        actions.append(ChangeAssetName(asset_key=asset_key, name=draft.name))
    if not same_localized(old.description, draft.description):
        actions.append(SetAssetDescription(asset_key=asset_key, description=draft.description))
    actions.append(
        build_update_action(
            old.sources,
            draft.sources,
            lambda: SetAssetSources(asset_key=asset_key, sources=draft.sources),
        )
    )
    actions.append(
        build_update_action(
            old.tags,
            draft.tags,
            lambda: SetAssetTags(asset_key=asset_key, tags=draft.tags),
        )
    )
    actions.extend(build_custom_actions(asset_key, old.custom, draft.custom))

    return [action for action in actions if action is not None]


def build_custom_actions(
    asset_key: str,
    old: CustomFields | None,
    new: CustomFields | None,
) -> list[UpdateAction]:
    if old is None and new is None:
        return []
    if old is None or new is None or old.type_key != new.type_key:
        return [SetAssetCustomType(asset_key=asset_key, custom=new)]

    actions: list[UpdateAction] = []
    for name in sorted(set(old.fields) | set(new.fields)):
        old_value = old.fields.get(name)
        new_value = new.fields.get(name)
        if old_value != new_value:
            actions.append(SetAssetCustomField(asset_key=asset_key, name=name, value=new_value))
    return actions


class AssetActionFactory:
    """Builds asset actions for the list reconciliation core."""

    def build_element_actions(self, old: Asset, draft: AssetDraft) -> list[UpdateAction]:
        return build_asset_actions(old, draft)

    def build_remove_action(self, key: str | None) -> UpdateAction:
        return RemoveAsset(asset_key=key)

    def build_add_action(self, draft: AssetDraft, index: int) -> UpdateAction:
        return AddAsset(asset=draft, position=index)

    def build_reorder_action(self, ids: tuple[str, ...]) -> UpdateAction:
        return ChangeAssetOrder(asset_order=ids)


reconcile_assets: Final[ListReconciler[Asset, AssetDraft, UpdateAction]] = ListReconciler(
    factory=AssetActionFactory(),
    collection="asset drafts",
    duplicate_detail=ASSET_KEYS_DETAIL,
)


def build_assets_update_actions(
    old_assets: Sequence[Asset],
    new_drafts: DraftCollection[AssetDraft] | Sequence[AssetDraft] | None,
) -> tuple[UpdateAction, ...]:
    """Compare the assets of a product with their drafts.

    If the drafts are absent, every existing asset is removed.
    Raises ``DuplicateKeyError`` if asset drafts share a key.
    """

    return reconcile_assets(old_assets, new_drafts)
