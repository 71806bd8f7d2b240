"""Cyclic repetition of sequences.

A cyclic walk visits ``source[0], source[1], ..., source[-1]`` and then wraps
back to ``source[0]``. :func:`repeating_list` collects elements from that walk
until a count bound and/or a stopping predicate is reached.

Example:
    >>> repeating_list([1, 2, 3], total=7)
    [1, 2, 3, 1, 2, 3, 1]
    >>> repeating_list(["a", "b", "stop"], until=lambda x: x == "stop")
    ['a', 'b']
"""

from typing import Iterator, List, Optional, Sequence

from extkit.core.types import Predicate, T

__all__ = [
    "cyclic_walk",
    "repeating_list",
]


def cyclic_walk(source: Sequence[T]) -> Iterator[T]:
    """Yield the elements of ``source`` forever, wrapping at the end.

    Args:
        source: A non-empty sequence.

    Yields:
        Elements in cyclic order starting at index 0.

    Raises:
        ValueError: If ``source`` is empty.
    """
    if not source:
        raise ValueError("Cannot walk an empty sequence cyclically.")

    index = 0
    last = len(source) - 1
    while True:
        yield source[index]
        index = 0 if index == last else index + 1


def repeating_list(
    source: Sequence[T],
    total: Optional[int] = None,
    until: Optional[Predicate[T]] = None,
) -> List[T]:
    """Build a list by walking ``source`` cyclically until a bound is reached.

    On every step the predicate is checked against the candidate element
    first, then the count bound. The element that satisfies ``until`` is never
    appended.

    Args:
        source: Sequence to repeat.
        total: Number of elements wanted. ``None`` means no count bound.
        until: Stop before the first element for which this returns ``True``.
            ``None`` means no predicate bound.

    Returns:
        A new list with at most ``total`` elements. Empty when ``source`` is
        empty, when ``total <= 0`` or when ``until(source[0])`` is ``True``.

    Raises:
        ValueError: If ``source`` is non-empty and neither bound is given.

    Note:
        An ``until`` that never returns ``True`` combined with ``total=None``
        does not terminate. Avoiding that is up to the caller.
    """
    result: List[T] = []

    if not source:
        return result

    if total is None and until is None:
        raise ValueError("repeating_list needs a total, an until predicate, or both.")

    for element in cyclic_walk(source):
        if until is not None and until(element):
            break

        if total is not None and len(result) >= total:
            break

        result.append(element)

    return result
