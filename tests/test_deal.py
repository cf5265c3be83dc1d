from random import Random

import pytest

from bid_euchre.cards import Card, Rank, Suit
from bid_euchre.deck import build_deck, deal_four_hands


def test_build_deck_has_24_distinct_cards():
    deck = build_deck()
    assert len(deck) == 24
    assert len(set(deck)) == 24
    assert Card(Rank.NINE, Suit.CLUBS) in deck


def test_deal_partitions_the_deck_into_four_hands():
    hands = deal_four_hands(rng=Random(11))
    assert [len(hand) for hand in hands] == [6, 6, 6, 6]
    dealt = [card for hand in hands for card in hand]
    assert set(dealt) == set(build_deck())
    assert len(set(dealt)) == 24


def test_seeded_deals_repeat_and_fresh_shuffles_differ():
    assert deal_four_hands(rng=Random(5)) == deal_four_hands(rng=Random(5))

    rng = Random(5)
    assert deal_four_hands(rng=rng) != deal_four_hands(rng=rng)


def test_fixed_deck_is_dealt_in_order():
    hands = deal_four_hands(deck=build_deck())
    assert {card.suit for card in hands[0]} == {Suit.CLUBS}
    assert {card.suit for card in hands[3]} == {Suit.SPADES}


def test_short_or_duplicated_deck_is_rejected():
    deck = build_deck()
    with pytest.raises(ValueError):
        deal_four_hands(deck=deck[:-1])
    with pytest.raises(ValueError):
        deal_four_hands(deck=deck[:-1] + [deck[0]])
