"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import ProductRepository

__all__ = ["ProductRepository"]
