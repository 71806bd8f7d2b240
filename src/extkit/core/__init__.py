"""Core types and settings shared by the extkit helpers."""

from extkit.core.config import Settings, settings
from extkit.core.types import H, IndexedElement, Predicate, R, Span, T, Transform

__all__ = [
    "Settings",
    "settings",
    "T",
    "R",
    "H",
    "Predicate",
    "Transform",
    "Span",
    "IndexedElement",
]
