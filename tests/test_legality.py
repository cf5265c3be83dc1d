from dataclasses import replace

from bid_euchre.bidding import BidChoice
from bid_euchre.cards import Card, Rank, Suit
from bid_euchre.legality import is_legal
from bid_euchre.state import Bid, PartnersBestCardPhase, Player, Team, TrumpPickingPhase, UpCard
from bid_euchre.trump import Trump


def test_freshly_dealt_phase_is_legal(bidding_phase):
    assert is_legal(bidding_phase) == (True, "No issue detected")


def test_current_trick_of_four_cards_is_illegal(trick_phase, play_into_trick):
    phase = trick_phase
    for seat, card in [
        (1, Card(Rank.NINE, Suit.CLUBS)),
        (2, Card(Rank.NINE, Suit.DIAMONDS)),
        (3, Card(Rank.NINE, Suit.HEARTS)),
        (4, Card(Rank.NINE, Suit.SPADES)),
    ]:
        phase = play_into_trick(phase, seat, card)

    legal, message = is_legal(phase)
    assert not legal
    assert "current trick" in message


def test_trick_of_three_cards_is_legal(trick_phase, play_into_trick):
    phase = play_into_trick(trick_phase, 1, Card(Rank.NINE, Suit.CLUBS))
    phase = play_into_trick(phase, 2, Card(Rank.NINE, Suit.DIAMONDS))
    phase = play_into_trick(phase, 3, Card(Rank.NINE, Suit.HEARTS))
    assert is_legal(replace(phase, card_position=4)) == (True, "No issue detected")


def test_player_sitting_out_cannot_be_next_to_play(trick_phase):
    phase = replace(trick_phase, card_position=3, player_sitting_out=3)
    legal, message = is_legal(phase)
    assert not legal
    assert "sitting out" in message


def test_players_must_hold_six_cards_before_play(bidding_phase):
    player = bidding_phase.player_at(2)
    phase = bidding_phase.with_player(player.without_card(player.hand[0]))
    legal, message = is_legal(phase)
    assert not legal
    assert "6 cards" in message


def test_lost_card_breaks_conservation_during_play(trick_phase):
    player = trick_phase.player_at(2)
    phase = trick_phase.with_player(player.without_card(player.hand[0]))
    legal, message = is_legal(phase)
    assert not legal
    assert "23 cards" in message


def test_duplicated_card_is_illegal(bidding_phase):
    stolen = bidding_phase.player_at(1).hand[0]
    player = bidding_phase.player_at(2)
    copy = replace(player, hand=(stolen,) + player.hand[1:])
    legal, message = is_legal(bidding_phase.with_player(copy))
    assert not legal
    assert "unique" in message


def test_same_owner_twice_in_a_trick_is_illegal(trick_phase, play_into_trick):
    phase = play_into_trick(trick_phase, 1, Card(Rank.NINE, Suit.CLUBS))
    phase = play_into_trick(phase, 1, Card(Rank.TEN, Suit.CLUBS))
    legal, message = is_legal(replace(phase, card_position=2))
    assert not legal
    assert "same player" in message


def test_partners_must_sit_opposite(bidding_phase):
    first, second = bidding_phase.teams
    p1, p3 = first.players
    p2, p4 = second.players
    phase = replace(bidding_phase, teams=(Team(players=(p1, p2)), Team(players=(p3, p4))))
    legal, message = is_legal(phase)
    assert not legal
    assert "opposite" in message


def test_two_players_in_one_seat_is_illegal(bidding_phase):
    first, second = bidding_phase.teams
    p1, p3 = first.players
    moved = Player(name=p3.name, seat=1, hand=p3.hand)
    phase = replace(bidding_phase, teams=(Team(players=(p1, moved)), second))
    legal, message = is_legal(phase)
    assert not legal
    assert "seat" in message


def test_wrong_team_count_is_illegal(bidding_phase):
    phase = replace(bidding_phase, teams=bidding_phase.teams[:1])
    assert is_legal(phase) == (False, "There must be exactly two teams.")


def test_negative_points_are_illegal(bidding_phase):
    first, second = bidding_phase.teams
    phase = replace(bidding_phase, teams=(replace(first, points=-3), second))
    assert not is_legal(phase)[0]


def test_a_pass_cannot_win_the_auction(bidding_phase, trick_phase):
    passed = Bid(seat=1, choice=BidChoice.PASS)
    picking = TrumpPickingPhase(teams=bidding_phase.teams, dealer=4, winning_bid=passed)
    giving = PartnersBestCardPhase(
        teams=bidding_phase.teams, dealer=4, trump=Trump.CLUBS, winning_bid=passed, partner=3
    )
    for phase in (picking, giving, replace(trick_phase, winning_bid=passed)):
        legal, message = is_legal(phase)
        assert not legal
        assert "pass" in message


def test_uneven_hands_allowed_once_the_partner_has_passed_a_card(bidding_phase):
    partner = bidding_phase.player_at(3)
    bidder = bidding_phase.player_at(1)
    gift = partner.hand[0]
    teams = bidding_phase.with_player(partner.without_card(gift)).with_player(bidder.with_card(gift)).teams
    phase = PartnersBestCardPhase(
        teams=teams,
        dealer=4,
        trump=Trump.CLUBS,
        winning_bid=Bid(seat=1, choice=BidChoice.PARTNERS_BEST_CARD),
        partner=3,
    )
    assert is_legal(phase) == (True, "No issue detected")


def test_finished_tricks_count_towards_the_deck(trick_phase, play_into_trick):
    phase = trick_phase
    for seat, card in [
        (1, Card(Rank.NINE, Suit.CLUBS)),
        (2, Card(Rank.NINE, Suit.DIAMONDS)),
        (3, Card(Rank.NINE, Suit.HEARTS)),
        (4, Card(Rank.NINE, Suit.SPADES)),
    ]:
        phase = play_into_trick(phase, seat, card)
    phase = replace(phase, current_trick=(), finished_tricks=(phase.current_trick,), card_position=3)
    assert is_legal(phase) == (True, "No issue detected")
    assert UpCard(owner=3, card=Card(Rank.NINE, Suit.HEARTS)) in phase.finished_tricks[0]
