"""Rate-and-copy capability shared by articles and magazines."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class RateAndCopy(Protocol):
    """Protocol for objects that carry a rating and can copy themselves.

    Article and Magazine satisfy it structurally.
    """

    @property
    def rating(self) -> float:
        """Numeric rating of the object."""
        ...

    def deep_copy(self) -> "RateAndCopy":
        """Return an independent copy sharing no mutable state."""
        ...


def average_rating(items: Iterable[RateAndCopy]) -> float:
    """Compute the mean rating of a collection.

    Args:
        items: Objects exposing a ``rating``

    Returns:
        The arithmetic mean, or 0.0 for an empty collection

    Examples:
        >>> average_rating([])
        0.0
    """
    ratings = [item.rating for item in items]
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)
