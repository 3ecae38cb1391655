from __future__ import annotations

from catalogsync.domain.model import (
    AddAsset,
    AddExternalImage,
    AssetDraft,
    AssetSource,
    ChangeAssetOrder,
    CustomFields,
    Dimensions,
    ImageDraft,
    RemoveAsset,
    SetAssetCustomField,
    SetAssetCustomType,
)


def test_remove_and_reorder_payloads() -> None:
    assert RemoveAsset(asset_key="front").to_payload() == {
        "action": "removeAsset",
        "assetKey": "front",
    }
    assert ChangeAssetOrder(asset_order=("2", "1")).to_payload() == {
        "action": "changeAssetOrder",
        "assetOrder": ["2", "1"],
    }


def test_add_asset_payload_includes_position_and_camel_case_fields() -> None:
    draft = AssetDraft(
        key="front",
        name={"en": "Front"},
        sources=(
            AssetSource(
                uri="https://cdn.example.com/front.jpg",
                content_type="image/jpeg",
                dimensions=Dimensions(width=800, height=600),
            ),
        ),
        tags=frozenset({"b", "a"}),
        custom=CustomFields(type_key="asset-meta", fields={"alt": "Front"}),
    )

    assert AddAsset(asset=draft, position=3).to_payload() == {
        "action": "addAsset",
        "position": 3,
        "asset": {
            "key": "front",
            "name": {"en": "Front"},
            "sources": [
                {
                    "uri": "https://cdn.example.com/front.jpg",
                    "contentType": "image/jpeg",
                    "dimensions": {"w": 800, "h": 600},
                }
            ],
            "tags": ["a", "b"],
            "custom": {"type": {"key": "asset-meta"}, "fields": {"alt": "Front"}},
        },
    }


def test_custom_actions_leave_out_cleared_values() -> None:
    assert SetAssetCustomType(asset_key="front", custom=None).to_payload() == {
        "action": "setAssetCustomType",
        "assetKey": "front",
    }
    assert SetAssetCustomField(asset_key="front", name="alt", value=None).to_payload() == {
        "action": "setAssetCustomField",
        "assetKey": "front",
        "name": "alt",
    }


def test_add_external_image_payload() -> None:
    image = ImageDraft(url="https://img/1.jpg", dimensions=Dimensions(width=10, height=20))

    assert AddExternalImage(image=image, position=0).to_payload() == {
        "action": "addExternalImage",
        "image": {"url": "https://img/1.jpg", "dimensions": {"w": 10, "h": 20}},
        "position": 0,
    }
