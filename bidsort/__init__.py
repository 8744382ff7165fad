"""Bid Sort core package.

Loads bid exports into memory and orders them by title with either a
selection sort or a Hoare-partition quicksort.  The sorters and the amount
parser are usable on their own; :mod:`bidsort.cli` wraps them in the
interactive menu.
"""

from .config import AppConfig, ColumnMapping, ParsingConfig, load_config
from .io import load_bids
from .models import Bid, BidStore
from .parsing import coerce_amounts, str_to_double
from .sorting import partition, quick_sort, selection_sort

__all__ = [
    "AppConfig",
    "Bid",
    "BidStore",
    "ColumnMapping",
    "ParsingConfig",
    "coerce_amounts",
    "load_bids",
    "load_config",
    "partition",
    "quick_sort",
    "selection_sort",
    "str_to_double",
]
