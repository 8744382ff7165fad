"""Console formatting for bids and timing measurements."""

from __future__ import annotations

from typing import Iterable, Iterator, List, TextIO

from .models import Bid
from .timing import TimingResult


def format_amount(value: float) -> str:
    """Render an amount the way a default C++ ostream would (six significant digits)."""

    return f"{value:g}"


def format_bid(bid: Bid) -> str:
    return f"{bid.bid_id}: {bid.title} | {format_amount(bid.amount)} | {bid.fund}"


def iter_bid_lines(bids: Iterable[Bid]) -> Iterator[str]:
    for bid in bids:
        yield format_bid(bid)


def format_timing(result: TimingResult) -> List[str]:
    return [
        f"time: {result.ticks} clock ticks",
        f"time: {result.seconds:g} seconds",
    ]


def write_bids(bids: Iterable[Bid], stream: TextIO) -> int:
    """Write one line per bid followed by a blank line; return the count written."""

    count = 0
    for line in iter_bid_lines(bids):
        print(line, file=stream)
        count += 1
    print(file=stream)
    return count


__all__ = ["format_amount", "format_bid", "format_timing", "iter_bid_lines", "write_bids"]
