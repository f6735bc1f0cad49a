"""Wrap-around helpers for cycling through a fixed sequence of choices."""

from typing import Sequence, TypeVar

T = TypeVar("T")


def next_element(items: Sequence[T], current: object) -> T:
    """Return the element after ``current``, wrapping to the first.

    Unknown values of ``current`` yield the first element.
    """
    if not items:
        raise ValueError("Cannot cycle through an empty sequence")
    try:
        index = list(items).index(current)
    except ValueError:
        return items[0]
    return items[(index + 1) % len(items)]


def previous_element(items: Sequence[T], current: object) -> T:
    """Return the element before ``current``, wrapping to the last.

    Unknown values of ``current`` yield the last element.
    """
    if not items:
        raise ValueError("Cannot cycle through an empty sequence")
    try:
        index = list(items).index(current)
    except ValueError:
        return items[-1]
    return items[(index - 1) % len(items)]
