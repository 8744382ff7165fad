from __future__ import annotations

from pathlib import Path
from typing import List
import sys

import pytest

# Ensure project root is on sys.path for absolute imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from bidsort.models import Bid

SAMPLE_CSV = ROOT / "sample_data" / "eBid_Monthly_Sales_sample.csv"
SAMPLE_CONFIG = ROOT / "config" / "config.yaml"


@pytest.fixture
def phonetic_bids() -> List[Bid]:
    return [
        Bid(bid_id="4", title="Delta", fund="General Fund", amount=40.0),
        Bid(bid_id="1", title="Alpha", fund="Enterprise", amount=10.5),
        Bid(bid_id="3", title="Charlie", fund="Parks", amount=30.25),
        Bid(bid_id="2", title="Bravo", fund="General Fund", amount=20.0),
    ]


@pytest.fixture
def sample_csv() -> Path:
    return SAMPLE_CSV


@pytest.fixture
def sample_config() -> Path:
    return SAMPLE_CONFIG
