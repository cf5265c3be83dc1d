"""Structural invariants every game snapshot must satisfy."""

from __future__ import annotations

from typing import List, Tuple

from .bidding import BidChoice
from .cards import Card
from .deck import DECK_SIZE, HAND_SIZE
from .seats import SEATS, partner_seat
from .state import PartnersBestCardPhase, Phase, Player, TrickTakingPhase, TrumpPickingPhase

NO_ISSUE = "No issue detected"


def is_legal(phase: Phase) -> Tuple[bool, str]:
    """Check ``phase`` against the invariant battery, stopping at the first failure.

    Returns ``(True, "No issue detected")`` when every invariant holds, and
    ``(False, reason)`` naming the violated invariant otherwise.
    """
    trick_taking = isinstance(phase, TrickTakingPhase)

    if (
        trick_taking
        and phase.player_sitting_out is not None
        and phase.player_sitting_out == phase.card_position
    ):
        return False, "The player sitting out shouldn't be able to play."

    if len(phase.teams) != 2:
        return False, "There must be exactly two teams."
    if any(len(team.players) != 2 for team in phase.teams):
        return False, "Each team must have exactly two players."
    if any(team.points < 0 for team in phase.teams):
        return False, "Team points cannot be negative."
    if (
        isinstance(phase, (TrumpPickingPhase, PartnersBestCardPhase, TrickTakingPhase))
        and phase.winning_bid.choice is BidChoice.PASS
    ):
        return False, "A pass cannot be the winning bid."

    players: List[Player] = list(phase.players())
    # Hands only become uneven once play (or the partner's card transfer) starts.
    if not isinstance(phase, (TrickTakingPhase, PartnersBestCardPhase)) and not all(
        len(player.hand) == HAND_SIZE for player in players
    ):
        return False, (
            f"Not all players have {HAND_SIZE} cards in their hands even though "
            "the Trick-Taking phase has not started."
        )

    if trick_taking:
        tricks = list(phase.finished_tricks) + [phase.current_trick]
        for trick in tricks:
            owners = [up_card.owner for up_card in trick]
            if len(set(owners)) != len(owners):
                return False, "A trick holds more than one card from the same player."

    cards: List[Card] = [card for player in players for card in player.hand]
    if trick_taking:
        cards.extend(up_card.card for trick in phase.finished_tricks for up_card in trick)
        cards.extend(up_card.card for up_card in phase.current_trick)
    if len(cards) != DECK_SIZE:
        return False, f"Game has {len(cards)} cards in play instead of {DECK_SIZE}."
    if len(set(cards)) != len(cards):
        return False, "Not every card is unique."

    seats = [player.seat for player in players]
    if sorted(seats) != list(SEATS):
        return False, "Every seat must be held by exactly one player."
    for team in phase.teams:
        first, second = team.seats()
        if partner_seat(first) != second:
            return False, "Players of the same team are not sitting opposite each other."

    if trick_taking and len(phase.current_trick) >= len(SEATS):
        return False, (
            f"The current trick holds {len(phase.current_trick)} cards; a trick of "
            f"{len(SEATS)} cards is finished and belongs with the finished tricks."
        )
    return True, NO_ISSUE
