"""Free-function helpers for ordered sequences."""

from typing import Sequence, TypeVar

T = TypeVar("T")


def rest(items: Sequence[T]) -> list[T]:
    """Return all but the lead element, or [] if there are fewer than two."""
    if len(items) <= 1:
        return []
    return list(items[1:])
