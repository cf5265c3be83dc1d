"""Bidding round: each seat bids once, starting left of the dealer."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from ..bidding import BID_HIERARCHY, BidChoice, higher_bid, is_higher_bid
from ..seats import SEATS, Seat, next_seat
from ..state import Bid, BiddingPhase, TrumpPickingPhase
from .base import PhaseRuleError, PhaseRules

__all__ = ["BiddingRules", "best_bid"]


def best_bid(bids: Sequence[Bid]) -> Optional[Bid]:
    """Return the highest non-pass bid, or None if every bid so far is a pass."""
    best: Optional[Bid] = None
    for bid in bids:
        if bid.choice is BidChoice.PASS:
            continue
        if best is None or higher_bid(bid.choice, best.choice) is bid.choice:
            best = bid
    return best


class BiddingRules(PhaseRules):
    phase_type = BiddingPhase
    option_type = BidChoice

    def options(self, phase: BiddingPhase, seat: Seat) -> List[BidChoice]:
        if seat != phase.bid_position or len(phase.bids) >= len(SEATS):
            return []
        best = best_bid(phase.bids)
        floor = best.choice if best is not None else BidChoice.PASS
        raises = [choice for choice in reversed(BID_HIERARCHY) if is_higher_bid(choice, floor)]
        # The dealer bids last and is stuck with the hand if everyone else passed.
        if best is None and len(phase.bids) == len(SEATS) - 1:
            return raises
        return [BidChoice.PASS] + raises

    def choose(self, option: BidChoice, phase: BiddingPhase, seat: Seat):
        if seat != phase.bid_position:
            raise PhaseRuleError(f"Seat {seat} bid out of turn; seat {phase.bid_position} is to act.")
        bids = phase.bids + (Bid(seat=seat, choice=option),)
        if len(bids) < len(SEATS):
            return replace(phase, bids=bids, bid_position=next_seat(seat))

        winner = best_bid(bids)
        if winner is None:
            raise PhaseRuleError("Bidding closed without a single bid.")
        return TrumpPickingPhase(teams=phase.teams, dealer=phase.dealer, winning_bid=winner)
