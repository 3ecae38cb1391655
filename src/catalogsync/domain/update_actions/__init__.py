"""Resource-specific update action builders."""

from __future__ import annotations

from .assets import AssetActionFactory, build_asset_actions, build_assets_update_actions
from .images import ImageActionFactory, build_image_actions, build_images_update_actions
from .products import build_product_actions

__all__ = [
    "AssetActionFactory",
    "ImageActionFactory",
    "build_asset_actions",
    "build_assets_update_actions",
    "build_image_actions",
    "build_images_update_actions",
    "build_product_actions",
]
