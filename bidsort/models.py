"""Record types shared by the loader, the sorters and the menu driver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Bid:
    """A single row of the bid export.

    Only ``title`` takes part in ordering.  ``bid_id`` and ``fund`` are carried
    through untouched and ``amount`` stays ``0.0`` unless the loader supplies a
    parsed value.
    """

    bid_id: str = ""
    title: str = ""
    fund: str = ""
    amount: float = 0.0


# Ordered, index-addressable collection of bids owned by the caller.
BidStore = List[Bid]


__all__ = ["Bid", "BidStore"]
