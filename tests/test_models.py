import dataclasses

import pytest

from bidsort.models import Bid


def test_new_bid_has_zero_amount():
    assert Bid().amount == 0.0
    assert Bid(bid_id="1", title="Chair").amount == 0.0


def test_bid_fields_are_read_only():
    bid = Bid(bid_id="1", title="Chair", fund="General", amount=5.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        bid.title = "Table"
