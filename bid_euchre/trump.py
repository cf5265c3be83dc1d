"""Trump selection and card ranking under trump."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from .cards import Card, RANK_ORDER, Rank, Suit, same_color_suit


class Trump(Enum):
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"
    HIGH = "High"
    LOW = "Low"

    def __str__(self) -> str:
        return self.value

    @property
    def suit(self) -> Optional[Suit]:
        """The trump suit, or None for the no-trump High/Low hands."""
        if self in (Trump.HIGH, Trump.LOW):
            return None
        return Suit(self.value)

    @classmethod
    def from_suit(cls, suit: Suit) -> "Trump":
        return cls(suit.value)


# Natural order within a plain suit, strongest first.
_PLAIN_ORDER: List[Rank] = [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN, Rank.NINE]


def ranked_cards(suit: Suit, trump: Trump) -> List[Card]:
    """Return the cards that belong to ``suit`` under ``trump``, strongest first.

    A trump suit ranks seven cards (right bower, left bower, then Ace down to
    9), the suit that donated its Jack as left bower ranks five, and every
    other suit ranks six. No-trump hands rank by face: High is Ace down to 9,
    Low is 9 up to Ace.
    """
    if trump is Trump.LOW:
        return [Card(rank, suit) for rank in RANK_ORDER]
    if trump is Trump.HIGH:
        return [Card(rank, suit) for rank in reversed(RANK_ORDER)]

    trump_suit = trump.suit
    if suit is trump_suit:
        bowers = [Card(Rank.JACK, suit), Card(Rank.JACK, same_color_suit(suit))]
        return bowers + [Card(rank, suit) for rank in _PLAIN_ORDER if rank is not Rank.JACK]
    if suit is same_color_suit(trump_suit):
        return [Card(rank, suit) for rank in _PLAIN_ORDER if rank is not Rank.JACK]
    return [Card(rank, suit) for rank in _PLAIN_ORDER]


def effective_suit(card: Card, trump: Trump) -> Suit:
    """Return the suit a card follows as, counting the left bower as trump."""
    trump_suit = trump.suit
    if (
        trump_suit is not None
        and card.rank is Rank.JACK
        and card.suit is same_color_suit(trump_suit)
    ):
        return trump_suit
    return card.suit


def card_strength(card: Card, led_suit: Suit, trump: Trump) -> int:
    """Return a comparable strength for a card within a trick.

    Trump beats the led suit, which beats everything else. Cards that can
    neither follow nor trump have strength -1.
    """
    suit = effective_suit(card, trump)
    trump_suit = trump.suit
    if trump_suit is not None and suit is trump_suit:
        ranking = ranked_cards(trump_suit, trump)
        return 2 * len(RANK_ORDER) + len(ranking) - ranking.index(card)
    if suit is led_suit:
        ranking = ranked_cards(led_suit, trump)
        return len(ranking) - ranking.index(card)
    return -1
