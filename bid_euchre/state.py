"""Immutable game snapshots for Bid Euchre.

Every phase is a frozen dataclass; transitions build new snapshots with
``dataclasses.replace`` rather than mutating the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Iterator, Optional, Tuple, Union

from .bidding import BidChoice
from .cards import Card
from .seats import Seat
from .trump import Trump


@dataclass(frozen=True)
class LobbyPlayer:
    name: str
    seat: Seat


@dataclass(frozen=True)
class Player:
    name: str
    seat: Seat
    hand: Tuple[Card, ...] = ()

    def without_card(self, card: Card) -> "Player":
        return replace(self, hand=tuple(c for c in self.hand if c != card))

    def with_card(self, card: Card) -> "Player":
        return replace(self, hand=self.hand + (card,))


@dataclass(frozen=True)
class Team:
    players: Tuple[Player, ...]
    points: int = 0

    def seats(self) -> Tuple[Seat, ...]:
        return tuple(player.seat for player in self.players)


@dataclass(frozen=True)
class Bid:
    seat: Seat
    choice: BidChoice


@dataclass(frozen=True)
class UpCard:
    """A card played face up into a trick."""

    owner: Seat
    card: Card


Trick = Tuple[UpCard, ...]


@dataclass(frozen=True, kw_only=True)
class BasePhase:
    name: ClassVar[str] = ""

    teams: Tuple[Team, ...]
    dealer: Seat

    def players(self) -> Iterator[Player]:
        for team in self.teams:
            yield from team.players

    def player_at(self, seat: Seat) -> Player:
        for player in self.players():
            if player.seat == seat:
                return player
        raise KeyError(f"No player is sitting in seat {seat}.")

    def team_of(self, seat: Seat) -> Team:
        for team in self.teams:
            if seat in team.seats():
                return team
        raise KeyError(f"No team holds seat {seat}.")

    def with_player(self, updated: Player):
        """Return a copy of this phase with the player in ``updated.seat`` replaced."""
        teams = tuple(
            replace(
                team,
                players=tuple(updated if p.seat == updated.seat else p for p in team.players),
            )
            for team in self.teams
        )
        return replace(self, teams=teams)


@dataclass(frozen=True, kw_only=True)
class BiddingPhase(BasePhase):
    name: ClassVar[str] = "Bidding"

    bid_position: Seat
    bids: Tuple[Bid, ...] = ()


@dataclass(frozen=True, kw_only=True)
class TrumpPickingPhase(BasePhase):
    name: ClassVar[str] = "Picking Trump"

    winning_bid: Bid


@dataclass(frozen=True, kw_only=True)
class PartnersBestCardPhase(BasePhase):
    name: ClassVar[str] = "Picking Partner's Best Card"

    trump: Trump
    winning_bid: Bid
    partner: Seat


@dataclass(frozen=True, kw_only=True)
class TrickTakingPhase(BasePhase):
    name: ClassVar[str] = "Trick-Taking"

    trump: Trump
    winning_bid: Bid
    card_position: Seat
    current_trick: Trick = ()
    finished_tricks: Tuple[Trick, ...] = ()
    player_sitting_out: Optional[Seat] = None


@dataclass(frozen=True, kw_only=True)
class GameOverPhase:
    name: ClassVar[str] = "Game Over"

    winners: Team
    losers: Team


Phase = Union[BiddingPhase, TrumpPickingPhase, PartnersBestCardPhase, TrickTakingPhase]

Option = Union[BidChoice, Trump, Card]
