"""In-place editing helpers for mutable sequences."""

from typing import List, MutableSequence, Optional

from extkit.core.types import Predicate, T

__all__ = [
    "remove_and_return",
    "remove_first",
    "remove_first_where",
    "append_optional",
]


def remove_and_return(
    items: MutableSequence[T], should_be_removed: Predicate[T]
) -> List[T]:
    """Remove every element matching ``should_be_removed`` and return them.

    The predicate runs over the whole sequence before anything is deleted, so
    if it raises the sequence is left as it was.

    Args:
        items: Sequence edited in place.
        should_be_removed: Predicate selecting the elements to take out.

    Returns:
        The removed elements in their original order. ``items`` keeps the
        remaining elements, also in original order.
    """
    matched_indices: List[int] = []
    result: List[T] = []

    for index, element in enumerate(items):
        if should_be_removed(element):
            matched_indices.append(index)
            result.append(element)

    # Delete from the back so earlier indices stay valid
    for index in reversed(matched_indices):
        del items[index]

    return result


def remove_first(items: MutableSequence[T], obj: T) -> None:
    """Remove the first element equal to ``obj``. No-op if there is none."""
    for index, element in enumerate(items):
        if element == obj:
            del items[index]
            return


def remove_first_where(items: MutableSequence[T], condition: Predicate[T]) -> None:
    """Remove the first element satisfying ``condition``. No-op if there is none."""
    for index, element in enumerate(items):
        if condition(element):
            del items[index]
            return


def append_optional(items: MutableSequence[T], new_element: Optional[T]) -> None:
    """Append ``new_element`` unless it is ``None``."""
    if new_element is not None:
        items.append(new_element)
