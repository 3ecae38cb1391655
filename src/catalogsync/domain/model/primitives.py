"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

type Locale = str
type LocalizedString = Mapping[Locale, str]
type CustomFieldValue = object


@dataclass(frozen=True, slots=True)
class Dimensions:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class CustomFields:
    """Custom type reference plus its field values."""

    type_key: str
    fields: Mapping[str, CustomFieldValue]
