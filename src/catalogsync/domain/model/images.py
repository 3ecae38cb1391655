"""External images attached to a product.

Images carry no key of their own; their URL is both the key used for matching
and the identifier used for ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import Dimensions


@dataclass(frozen=True, slots=True, kw_only=True)
class ImageDraft:
    url: str
    dimensions: Dimensions
    label: str | None = None

    @property
    def key(self) -> str | None:
        return self.url


@dataclass(frozen=True, slots=True, kw_only=True)
class Image:
    url: str
    dimensions: Dimensions
    label: str | None = None

    @property
    def key(self) -> str | None:
        return self.url

    @property
    def id(self) -> str:
        return self.url
