"""In-place orderings of a bid store by title.

Both sorters permute the caller's list and return ``None``.  Neither is
stable and neither accepts a comparator; titles are compared with ``<`` on
plain ``str`` values.
"""

from __future__ import annotations

from typing import MutableSequence, Optional

from .models import Bid


def selection_sort(bids: MutableSequence[Bid]) -> None:
    """Sort ``bids`` by repeatedly swapping the smallest remaining title forward."""

    size = len(bids)
    for pos in range(size - 1):
        min_index = pos
        for candidate in range(pos + 1, size):
            if bids[candidate].title < bids[min_index].title:
                min_index = candidate
        bids[pos], bids[min_index] = bids[min_index], bids[pos]


def partition(bids: MutableSequence[Bid], low: int, high: int) -> int:
    """Hoare partition of ``bids[low:high + 1]`` around the middle title.

    Returns the boundary index ``b`` such that every title in ``[low, b]`` is
    no greater than every title in ``[b + 1, high]``.
    """

    # Copy of the key, the element it came from may be swapped away.
    pivot = bids[(low + high) // 2].title

    while True:
        while bids[low].title < pivot:
            low += 1
        while pivot < bids[high].title:
            high -= 1

        if low >= high:
            return high

        bids[low], bids[high] = bids[high], bids[low]
        low += 1
        high -= 1


def quick_sort(bids: MutableSequence[Bid], low: int = 0, high: Optional[int] = None) -> None:
    """Sort the inclusive range ``[low, high]`` of ``bids`` in place.

    ``high`` defaults to the last index.  Ranges with fewer than two elements
    (including ``low > high``) are left alone.  Indices are not bounds
    checked.
    """

    if high is None:
        high = len(bids) - 1
    if low >= high:
        return

    boundary = partition(bids, low, high)
    quick_sort(bids, low, boundary)
    quick_sort(bids, boundary + 1, high)


__all__ = ["partition", "quick_sort", "selection_sort"]
