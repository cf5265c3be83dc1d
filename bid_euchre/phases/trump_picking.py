"""The winning bidder names trump."""

from __future__ import annotations

from typing import List

from ..bidding import BidChoice
from ..seats import Seat, partner_seat
from ..state import PartnersBestCardPhase, TrickTakingPhase, TrumpPickingPhase
from ..trump import Trump
from .base import PhaseRuleError, PhaseRules

__all__ = ["TrumpPickingRules"]


class TrumpPickingRules(PhaseRules):
    phase_type = TrumpPickingPhase
    option_type = Trump

    def options(self, phase: TrumpPickingPhase, seat: Seat) -> List[Trump]:
        if seat != phase.winning_bid.seat:
            return []
        return list(Trump)

    def choose(self, option: Trump, phase: TrumpPickingPhase, seat: Seat):
        bidder = phase.winning_bid.seat
        if seat != bidder:
            raise PhaseRuleError(f"Only seat {bidder} may pick trump.")

        if phase.winning_bid.choice is BidChoice.PARTNERS_BEST_CARD:
            return PartnersBestCardPhase(
                teams=phase.teams,
                dealer=phase.dealer,
                trump=option,
                winning_bid=phase.winning_bid,
                partner=partner_seat(bidder),
            )

        sitting_out = None
        if phase.winning_bid.choice is BidChoice.GOING_ALONE:
            sitting_out = partner_seat(bidder)
        return TrickTakingPhase(
            teams=phase.teams,
            dealer=phase.dealer,
            trump=option,
            winning_bid=phase.winning_bid,
            card_position=bidder,
            player_sitting_out=sitting_out,
        )
