from __future__ import annotations

import pytest

from catalogsync.domain.model import (
    AddAsset,
    Asset,
    AssetDraft,
    AssetSource,
    ChangeAssetName,
    ChangeAssetOrder,
    CustomFields,
    Dimensions,
    RemoveAsset,
    SetAssetCustomField,
    SetAssetCustomType,
    SetAssetDescription,
    SetAssetSources,
    SetAssetTags,
)
from catalogsync.domain.reconciliation import ABSENT, DuplicateKeyError
from catalogsync.domain.update_actions import build_asset_actions, build_assets_update_actions
from tests.support.catalog import make_asset, make_asset_draft


def _asset(**overrides: object) -> Asset:
    values: dict[str, object] = {
        "id": "asset-1",
        "key": "front",
        "name": {"en": "Front"},
        "description": {"en": "Front view"},
        "sources": (AssetSource(uri="https://cdn.example.com/front.jpg"),),
        "tags": frozenset({"hero"}),
        "custom": CustomFields(type_key="asset-meta", fields={"alt": "Front", "rank": 1}),
    }
    values.update(overrides)
    return Asset(**values)  # type: ignore[arg-type]


def _draft_of(asset: Asset, **overrides: object) -> AssetDraft:
    values: dict[str, object] = {
        "key": asset.key,
        "name": asset.name,
        "description": asset.description,
        "sources": asset.sources,
        "tags": asset.tags,
        "custom": asset.custom,
    }
    values.update(overrides)
    return AssetDraft(**values)  # type: ignore[arg-type]


def test_identical_asset_needs_no_actions() -> None:
    asset = _asset()

    assert build_asset_actions(asset, _draft_of(asset)) == []


def test_missing_and_empty_description_are_equal() -> None:
    asset = _asset(description=None)

    assert build_asset_actions(asset, _draft_of(asset, description={})) == []


def test_changed_fields_produce_actions_in_field_order() -> None:
    asset = _asset()
    sources = (
        AssetSource(
            uri="https://cdn.example.com/front-large.jpg",
            content_type="image/jpeg",
            dimensions=Dimensions(width=1600, height=1200),
        ),
    )
    draft = _draft_of(
        asset,
        name={"en": "Front", "de": "Vorne"},
        description=None,
        sources=sources,
        tags=frozenset({"hero", "main"}),
    )

    actions = build_asset_actions(asset, draft)

    assert actions == [
        ChangeAssetName(asset_key="front", name={"en": "Front", "de": "Vorne"}),
        SetAssetDescription(asset_key="front", description=None),
        SetAssetSources(asset_key="front", sources=sources),
        SetAssetTags(asset_key="front", tags=frozenset({"hero", "main"})),
    ]


def test_changed_custom_type_replaces_the_whole_type() -> None:
    asset = _asset()
    custom = CustomFields(type_key="other-meta", fields={"alt": "Front"})

    actions = build_asset_actions(asset, _draft_of(asset, custom=custom))

    assert actions == [SetAssetCustomType(asset_key="front", custom=custom)]


def test_removed_custom_type_clears_it() -> None:
    asset = _asset()

    actions = build_asset_actions(asset, _draft_of(asset, custom=None))

    assert actions == [SetAssetCustomType(asset_key="front", custom=None)]


def test_changed_custom_fields_are_set_one_by_one_sorted_by_name() -> None:
    asset = _asset()
    custom = CustomFields(type_key="asset-meta", fields={"rank": 2, "zoom": True})

    actions = build_asset_actions(asset, _draft_of(asset, custom=custom))

    assert actions == [
        SetAssetCustomField(asset_key="front", name="alt", value=None),
        SetAssetCustomField(asset_key="front", name="rank", value=2),
        SetAssetCustomField(asset_key="front", name="zoom", value=True),
    ]


def test_assets_list_builds_remove_update_reorder_add() -> None:
    old = [make_asset("a", "1"), make_asset("b", "2", name="B"), make_asset("c", "3")]
    new = [make_asset_draft("c"), make_asset_draft("b", name="B2"), make_asset_draft("d")]

    actions = build_assets_update_actions(old, new)

    assert actions == (
        RemoveAsset(asset_key="a"),
        ChangeAssetName(asset_key="b", name={"en": "B2"}),
        ChangeAssetOrder(asset_order=("3", "2")),
        AddAsset(asset=new[2], position=2),
    )


def test_absent_asset_drafts_remove_every_asset() -> None:
    old = [make_asset("a"), make_asset("b")]

    assert build_assets_update_actions(old, ABSENT) == (
        RemoveAsset(asset_key="a"),
        RemoveAsset(asset_key="b"),
    )


def test_duplicate_asset_keys_are_rejected_with_container_hint() -> None:
    with pytest.raises(DuplicateKeyError) as exc:
        build_assets_update_actions([], [make_asset_draft("x"), make_asset_draft("x")])

    message = str(exc.value)
    assert message.startswith("Supplied asset drafts have duplicate keys: 'x'.")
    assert "unique inside their container" in message
