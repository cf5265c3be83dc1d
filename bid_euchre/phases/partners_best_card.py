"""The bidder's partner passes one card across before play."""

from __future__ import annotations

from typing import List

from ..cards import Card
from ..seats import Seat
from ..state import PartnersBestCardPhase, TrickTakingPhase
from .base import PhaseRuleError, PhaseRules

__all__ = ["PartnersBestCardRules"]


class PartnersBestCardRules(PhaseRules):
    phase_type = PartnersBestCardPhase
    option_type = Card

    def options(self, phase: PartnersBestCardPhase, seat: Seat) -> List[Card]:
        if seat != phase.partner:
            return []
        return list(phase.player_at(seat).hand)

    def choose(self, option: Card, phase: PartnersBestCardPhase, seat: Seat):
        if seat != phase.partner:
            raise PhaseRuleError(f"Only seat {phase.partner} may hand over a card.")
        partner = phase.player_at(seat)
        if option not in partner.hand:
            raise PhaseRuleError(f"{option} is not in seat {seat}'s hand.")

        bidder_seat = phase.winning_bid.seat
        bidder = phase.player_at(bidder_seat)
        updated = phase.with_player(partner.without_card(option)).with_player(bidder.with_card(option))
        return TrickTakingPhase(
            teams=updated.teams,
            dealer=phase.dealer,
            trump=phase.trump,
            winning_bid=phase.winning_bid,
            card_position=bidder_seat,
            player_sitting_out=seat,
        )
