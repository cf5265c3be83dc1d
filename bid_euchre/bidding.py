"""Bid choices and their ordering."""

from __future__ import annotations

from enum import Enum
from typing import List


class BidChoice(Enum):
    PASS = "Pass"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    PARTNERS_BEST_CARD = "Partner's Best Card"
    GOING_ALONE = "Going Alone"

    def __str__(self) -> str:
        return self.value


# Highest first.
BID_HIERARCHY: List[BidChoice] = [
    BidChoice.GOING_ALONE,
    BidChoice.PARTNERS_BEST_CARD,
    BidChoice.SIX,
    BidChoice.FIVE,
    BidChoice.FOUR,
    BidChoice.THREE,
    BidChoice.PASS,
]

_BID_STRENGTH: dict[BidChoice, int] = {
    choice: len(BID_HIERARCHY) - index for index, choice in enumerate(BID_HIERARCHY)
}

# Tricks the bidding side must take to make each contract.
TRICKS_REQUIRED: dict[BidChoice, int] = {
    BidChoice.THREE: 3,
    BidChoice.FOUR: 4,
    BidChoice.FIVE: 5,
    BidChoice.SIX: 6,
    BidChoice.PARTNERS_BEST_CARD: 6,
    BidChoice.GOING_ALONE: 6,
}


def is_higher_bid(first: BidChoice, second: BidChoice) -> bool:
    """Return True if ``first`` strictly outranks ``second``."""
    return _BID_STRENGTH[first] > _BID_STRENGTH[second]


def higher_bid(bid_a: BidChoice, bid_b: BidChoice) -> BidChoice:
    """Return whichever of the two choices ranks higher."""
    return bid_a if _BID_STRENGTH[bid_a] >= _BID_STRENGTH[bid_b] else bid_b


def higher_bids_than(bid: BidChoice) -> List[BidChoice]:
    """Return every choice that strictly outranks ``bid``, highest first."""
    return [choice for choice in BID_HIERARCHY if is_higher_bid(choice, bid)]


def tricks_required(bid: BidChoice) -> int:
    if bid is BidChoice.PASS:
        raise ValueError("A pass is not a contract.")
    return TRICKS_REQUIRED[bid]
