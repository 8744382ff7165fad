"""IO helpers for loading bid exports into memory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import ColumnMapping
from .models import Bid, BidStore
from .parsing import DEFAULT_STRIP_CHAR, coerce_amounts

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".csv", ".txt"}


def load_bids(
    path: Path,
    columns: Optional[ColumnMapping] = None,
    strip_char: str = DEFAULT_STRIP_CHAR,
    chunk_size: Optional[int] = None,
    encoding: str = "utf-8",
) -> BidStore:
    """Read a delimited bid export into a new list of :class:`Bid`.

    The first line is treated as a header and skipped.  Fields are picked by
    position according to ``columns``.
    """

    path = Path(path)
    columns = columns or ColumnMapping()
    logger.info("Loading CSV file %s", path)

    if not path.exists():
        raise FileNotFoundError(f"Dataset '{path}' does not exist")

    ext = path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file extension '{ext}' for dataset '{path}'")

    logger.debug("Reading CSV %s with chunk size %s", path, chunk_size)
    read_kwargs = {"dtype": str, "keep_default_na": False, "encoding": encoding}
    bids: BidStore = []
    if chunk_size and chunk_size > 0:
        for chunk in pd.read_csv(path, chunksize=chunk_size, **read_kwargs):
            bids.extend(_frame_to_bids(chunk, columns, strip_char))
    else:
        raw = pd.read_csv(path, **read_kwargs)
        bids = _frame_to_bids(raw, columns, strip_char)

    logger.info("%d bids read from %s", len(bids), path)
    return bids


def _frame_to_bids(frame: pd.DataFrame, columns: ColumnMapping, strip_char: str) -> List[Bid]:
    _ensure_width(frame, columns)

    def text_column(position: int) -> pd.Series:
        return frame.iloc[:, position].fillna("").astype(str)

    titles = text_column(columns.title)
    bid_ids = text_column(columns.bid_id)
    funds = text_column(columns.fund)
    amounts = coerce_amounts(frame.iloc[:, columns.amount], strip_char)

    return [
        Bid(bid_id=bid_id, title=title, fund=fund, amount=float(amount))
        for bid_id, title, fund, amount in zip(bid_ids, titles, funds, amounts)
    ]


def _ensure_width(frame: pd.DataFrame, columns: ColumnMapping) -> None:
    width = frame.shape[1]
    if width >= columns.required_width:
        return
    missing = [
        f"{name} (column {position})"
        for name, position in columns.as_dict().items()
        if position >= width
    ]
    raise KeyError(f"Dataset has {width} columns; missing " + ", ".join(missing))


__all__ = ["SUPPORTED_EXTENSIONS", "load_bids"]
