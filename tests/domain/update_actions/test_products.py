from __future__ import annotations

import pytest

from catalogsync.domain.model import (
    AddAsset,
    ChangeProductName,
    RemoveAsset,
    RemoveImage,
    SetImageLabel,
)
from catalogsync.domain.reconciliation import DuplicateKeyError
from catalogsync.domain.update_actions import build_product_actions
from tests.support.catalog import (
    make_asset,
    make_asset_draft,
    make_image,
    make_image_draft,
    make_product,
    make_product_draft,
)


def test_product_as_draft_round_trips_to_no_actions() -> None:
    product = make_product(
        "shirt",
        assets=[make_asset("front"), make_asset("back")],
        images=[make_image("https://img/1.jpg", label="main")],
    )

    assert build_product_actions(product, product.as_draft()) == []


def test_product_actions_are_name_then_assets_then_images() -> None:
    product = make_product(
        "shirt",
        assets=[make_asset("front")],
        images=[make_image("https://img/1.jpg", label="main")],
    )
    new_asset = make_asset_draft("back")
    draft = make_product_draft(
        "shirt",
        name="Shirt",
        assets=[make_asset_draft("front"), new_asset],
        images=[make_image_draft("https://img/1.jpg", label="primary")],
    )

    actions = build_product_actions(product, draft)

    assert actions == [
        ChangeProductName(name={"en": "Shirt"}),
        AddAsset(asset=new_asset, position=1),
        SetImageLabel(image_url="https://img/1.jpg", label="primary"),
    ]


def test_absent_lists_remove_all_their_elements() -> None:
    product = make_product(
        "shirt",
        assets=[make_asset("front")],
        images=[make_image("https://img/1.jpg")],
    )

    actions = build_product_actions(product, make_product_draft("shirt", assets=None, images=None))

    assert actions == [RemoveAsset(asset_key="front"), RemoveImage(image_url="https://img/1.jpg")]


def test_duplicate_image_urls_fail_the_whole_product() -> None:
    product = make_product("shirt")
    draft = make_product_draft(
        "shirt",
        assets=[make_asset_draft("front")],
        images=[make_image_draft("https://img/1.jpg"), make_image_draft("https://img/1.jpg")],
    )

    with pytest.raises(DuplicateKeyError, match="image drafts"):
        build_product_actions(product, draft)
