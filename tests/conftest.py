from __future__ import annotations

from dataclasses import replace

import pytest

from bid_euchre.bidding import BidChoice
from bid_euchre.cards import Card
from bid_euchre.deck import build_deck, deal_four_hands
from bid_euchre.game import build_teams
from bid_euchre.seats import SEATS, next_seat
from bid_euchre.state import Bid, BiddingPhase, LobbyPlayer, TrickTakingPhase, UpCard
from bid_euchre.trump import Trump


def _play_into_trick(phase: TrickTakingPhase, seat: int, card: Card) -> TrickTakingPhase:
    updated = phase.with_player(phase.player_at(seat).without_card(card))
    return replace(updated, current_trick=updated.current_trick + (UpCard(owner=seat, card=card),))


@pytest.fixture
def lobby_players():
    return [LobbyPlayer(name=f"P{seat}", seat=seat) for seat in SEATS]


@pytest.fixture
def teams(lobby_players):
    """Seat 1 holds every club, seat 2 diamonds, seat 3 hearts, seat 4 spades."""
    return build_teams(lobby_players, deal_four_hands(deck=build_deck()))


@pytest.fixture
def bidding_phase(teams):
    return BiddingPhase(teams=teams, dealer=4, bid_position=next_seat(4))


@pytest.fixture
def trick_phase(teams):
    return TrickTakingPhase(
        teams=teams,
        dealer=4,
        trump=Trump.HEARTS,
        winning_bid=Bid(seat=1, choice=BidChoice.THREE),
        card_position=1,
    )


@pytest.fixture
def play_into_trick():
    """Move a card from a seat's hand into the current trick."""
    return _play_into_trick
