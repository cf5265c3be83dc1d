"""Card-related data structures and helpers for Bid Euchre."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class Suit(Enum):
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"
    ACE = "Ace"

    def __str__(self) -> str:
        return self.value


# Rank order from lowest to highest by face value.
RANK_ORDER: list[Rank] = [
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
]

# Suits paired by colour; the partner suit donates the left bower.
SAME_COLOR_SUIT: dict[Suit, Suit] = {
    Suit.CLUBS: Suit.SPADES,
    Suit.SPADES: Suit.CLUBS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.HEARTS: Suit.DIAMONDS,
}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return card_label(self)


def same_color_suit(suit: Suit) -> Suit:
    return SAME_COLOR_SUIT[suit]


def serialize_card(card: Card) -> dict[str, str]:
    return {"rank": card.rank.value, "suit": card.suit.value}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    try:
        return Card(Rank(payload["rank"]), Suit(payload["suit"]))
    except KeyError as exc:
        raise ValueError(f"Card payload missing {exc.args[0]!r}.") from exc


def card_label(card: Card) -> str:
    return f"{card.rank.value} of {card.suit.value}"
