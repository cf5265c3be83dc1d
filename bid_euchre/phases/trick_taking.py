"""Trick play, hand scoring and the deal of the next hand."""

from __future__ import annotations

import logging
from dataclasses import replace
from random import Random
from typing import List, Optional, Sequence, Union

from ..bidding import tricks_required
from ..cards import Card
from ..deck import HAND_SIZE, deal_four_hands
from ..rules_schema import RuleSet
from ..seats import SEATS, Seat, next_seat
from ..state import BiddingPhase, GameOverPhase, Team, TrickTakingPhase, UpCard
from ..trump import Trump, card_strength, effective_suit
from .base import PhaseRuleError, PhaseRules

__all__ = ["TrickTakingRules", "trick_winner"]

logger = logging.getLogger(__name__)


def trick_winner(trick: Sequence[UpCard], trump: Trump) -> Seat:
    """Return the seat whose card takes the trick."""
    if not trick:
        raise PhaseRuleError("Cannot determine the winner of an empty trick.")
    led_suit = effective_suit(trick[0].card, trump)
    winning = max(trick, key=lambda up_card: card_strength(up_card.card, led_suit, trump))
    return winning.owner


class TrickTakingRules(PhaseRules):
    phase_type = TrickTakingPhase
    option_type = Card

    def __init__(self, rules: RuleSet, rng: Optional[Random] = None) -> None:
        self.rules = rules
        self.rng = rng if rng is not None else Random()

    def options(self, phase: TrickTakingPhase, seat: Seat) -> List[Card]:
        if seat != phase.card_position or seat == phase.player_sitting_out:
            return []
        hand = list(phase.player_at(seat).hand)
        if not phase.current_trick:
            return hand
        led_suit = effective_suit(phase.current_trick[0].card, phase.trump)
        following = [card for card in hand if effective_suit(card, phase.trump) is led_suit]
        return following if following else hand

    def choose(self, option: Card, phase: TrickTakingPhase, seat: Seat) -> Union[TrickTakingPhase, BiddingPhase, GameOverPhase]:
        if seat != phase.card_position:
            raise PhaseRuleError(f"Seat {seat} played out of turn; seat {phase.card_position} is to act.")
        player = phase.player_at(seat)
        if option not in player.hand:
            raise PhaseRuleError(f"{option} is not in seat {seat}'s hand.")

        played = phase.with_player(player.without_card(option))
        trick = phase.current_trick + (UpCard(owner=seat, card=option),)
        active = [s for s in SEATS if s != phase.player_sitting_out]
        if len(trick) < len(active):
            return replace(
                played,
                current_trick=trick,
                card_position=self._next_active_seat(seat, phase.player_sitting_out),
            )

        winner = trick_winner(trick, phase.trump)
        logger.debug("Seat %s takes trick %d.", winner, len(phase.finished_tricks) + 1)
        played = replace(
            played,
            current_trick=(),
            finished_tricks=phase.finished_tricks + (trick,),
            card_position=winner,
        )
        if len(played.finished_tricks) < HAND_SIZE:
            return played
        return self._finish_hand(played)

    def _next_active_seat(self, seat: Seat, sitting_out: Optional[Seat]) -> Seat:
        following = next_seat(seat)
        if following == sitting_out:
            following = next_seat(following)
        return following

    def _finish_hand(self, phase: TrickTakingPhase) -> Union[BiddingPhase, GameOverPhase]:
        bid = phase.winning_bid
        bidders = phase.team_of(bid.seat)
        tricks_won = sum(
            1 for trick in phase.finished_tricks if trick_winner(trick, phase.trump) in bidders.seats()
        )
        made = tricks_won >= tricks_required(bid.choice)
        value = self.rules.contract_points(bid.choice)
        logger.info(
            "Seat %s bid %s and took %d tricks: contract %s.",
            bid.seat,
            bid.choice,
            tricks_won,
            "made" if made else "set",
        )

        scorers = bidders if made else next(team for team in phase.teams if team is not bidders)
        teams = tuple(
            replace(team, points=team.points + value) if team is scorers else team
            for team in phase.teams
        )
        first, second = teams
        for winners, losers in ((first, second), (second, first)):
            if winners.points >= self.rules.target_score:
                return GameOverPhase(winners=winners, losers=losers)
        return self._deal_next_hand(phase, teams)

    def _deal_next_hand(self, phase: TrickTakingPhase, teams: Sequence[Team]) -> BiddingPhase:
        hands = deal_four_hands(rng=self.rng)
        dealt = tuple(
            replace(
                team,
                players=tuple(replace(p, hand=tuple(hands[p.seat - 1])) for p in team.players),
            )
            for team in teams
        )
        dealer = next_seat(phase.dealer)
        return BiddingPhase(teams=dealt, dealer=dealer, bid_position=next_seat(dealer))
