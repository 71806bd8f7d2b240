"""Lookups over ordered sequences.

These helpers never mutate their input. Predicates are called in index order
and any exception they raise propagates to the caller unchanged, aborting the
scan.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from extkit.core.types import H, IndexedElement, Predicate, Span, T

__all__ = [
    "find_match",
    "filter_first",
    "filter_first_with_index",
    "indices",
    "unique_count",
]


def find_match(source: Sequence[T], candidate: Sequence[T]) -> Optional[Span]:
    """Locate the first contiguous run of ``candidate`` inside ``source``.

    This is a naive search: on a mismatch the comparison restarts from the
    first element of ``candidate`` at the next start position, so the worst
    case is ``O(len(source) * len(candidate))``.

    Args:
        source: Sequence to scan.
        candidate: Elements to look for, compared with ``==``.

    Returns:
        ``(start, end)`` with ``end`` inclusive, or ``None`` if ``candidate``
        is empty or does not occur in ``source``.

    Example:
        >>> find_match([5, 1, 2, 1, 2, 3], [1, 2, 3])
        (3, 5)
    """
    width = len(candidate)
    if width == 0:
        return None

    for start in range(len(source)):
        matched = 0
        for offset, expected in enumerate(candidate):
            position = start + offset
            # Source ran out before the candidate did
            if position >= len(source):
                return None
            if source[position] != expected:
                break
            matched += 1

        if matched == width:
            return start, start + width - 1

    return None


def filter_first(items: Sequence[T], condition: Predicate[T]) -> Optional[T]:
    """Return the first element satisfying ``condition``, or ``None``."""
    for element in items:
        if condition(element):
            return element

    return None


def filter_first_with_index(
    items: Sequence[T], condition: Predicate[T]
) -> Optional[IndexedElement[T]]:
    """Return ``(index, element)`` for the first element satisfying ``condition``.

    Args:
        items: Sequence to scan.
        condition: Predicate called on each element in order.

    Returns:
        The index and element of the first match, or ``None``.
    """
    for index, element in enumerate(items):
        if condition(element):
            return index, element

    return None


def indices(items: Sequence[T], condition: Predicate[T]) -> List[int]:
    """Return the ascending indices of every element satisfying ``condition``."""
    return [index for index, element in enumerate(items) if condition(element)]


def unique_count(items: Sequence[H]) -> Dict[H, int]:
    """Count how many times each distinct element occurs.

    Args:
        items: Sequence of hashable elements.

    Returns:
        Mapping of element to occurrence count. Key order is not part of the
        contract.

    Example:
        >>> unique_count(["a", "b", "a", "c", "a"])
        {'a': 3, 'b': 1, 'c': 1}
    """
    return dict(Counter(items))
