"""Deck creation and dealing for Bid Euchre."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence

from .cards import Card, RANK_ORDER, Suit

DECK_SIZE = 24
HAND_SIZE = 6


def build_deck() -> List[Card]:
    """Return the ordered 24-card deck."""
    return [Card(rank, suit) for suit in Suit for rank in RANK_ORDER]


def deal_four_hands(
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> List[List[Card]]:
    """Shuffle and deal four 6-card hands; index 0..3 belongs to seats 1..4.

    A pre-arranged ``deck`` is dealt as given, without shuffling.
    """
    if deck is not None:
        cards = list(deck)
    else:
        cards = build_deck()
        if rng is None:
            rng = Random()
        rng.shuffle(cards)
    if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} distinct cards.")

    return [cards[index : index + HAND_SIZE] for index in range(0, DECK_SIZE, HAND_SIZE)]
