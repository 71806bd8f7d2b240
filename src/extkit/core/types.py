"""Reusable type definitions for the extkit helpers.

This module provides the type variables and callback aliases shared by the
sequence and text utilities, so every helper spells its contract the same way.

Type Aliases:
    Predicate: A callable deciding whether an element matches.
    Transform: A callable mapping an element to a result.
    Span: A ``(start, end)`` pair of inclusive indices.
    IndexedElement: An ``(index, element)`` pair.
"""

from typing import Callable, Hashable, Tuple, TypeVar

__all__ = [
    "T",
    "R",
    "H",
    "Predicate",
    "Transform",
    "Span",
    "IndexedElement",
]

T = TypeVar("T")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)

Predicate = Callable[[T], bool]
Transform = Callable[[T], R]

# Inclusive start and end index of a matched run
Span = Tuple[int, int]

IndexedElement = Tuple[int, T]
