from random import Random

from bid_euchre.bidding import BidChoice
from bid_euchre.game import RulesEngine
from bid_euchre.phases.bidding import BiddingRules, best_bid
from bid_euchre.state import Bid, TrumpPickingPhase


def play_bids(engine, phase, choices):
    for choice in choices:
        phase = engine.choose_option(choice, phase, phase.bid_position)
    return phase


def test_opening_bidder_may_pass_or_bid_anything(bidding_phase):
    options = BiddingRules().options(bidding_phase, 1)
    assert options == [
        BidChoice.PASS,
        BidChoice.THREE,
        BidChoice.FOUR,
        BidChoice.FIVE,
        BidChoice.SIX,
        BidChoice.PARTNERS_BEST_CARD,
        BidChoice.GOING_ALONE,
    ]
    assert BiddingRules().options(bidding_phase, 2) == []


def test_later_bidders_must_overcall(bidding_phase):
    engine = RulesEngine(rng=Random(0))
    phase = play_bids(engine, bidding_phase, [BidChoice.FIVE])
    assert engine.get_options(phase, 2) == [
        BidChoice.PASS,
        BidChoice.SIX,
        BidChoice.PARTNERS_BEST_CARD,
        BidChoice.GOING_ALONE,
    ]
    assert not engine.is_legal_option(BidChoice.FOUR, phase, 2)

    phase = play_bids(engine, phase, [BidChoice.GOING_ALONE])
    assert engine.get_options(phase, 3) == [BidChoice.PASS]


def test_dealer_is_stuck_when_everyone_passes(bidding_phase):
    engine = RulesEngine(rng=Random(0))
    phase = play_bids(engine, bidding_phase, [BidChoice.PASS] * 3)
    assert phase.bid_position == phase.dealer
    options = engine.get_options(phase, phase.dealer)
    assert BidChoice.PASS not in options
    assert options[0] is BidChoice.THREE


def test_fourth_bid_closes_the_auction(bidding_phase):
    engine = RulesEngine(rng=Random(0))
    phase = play_bids(
        engine,
        bidding_phase,
        [BidChoice.THREE, BidChoice.FIVE, BidChoice.PASS, BidChoice.PASS],
    )
    assert isinstance(phase, TrumpPickingPhase)
    assert phase.winning_bid == Bid(seat=2, choice=BidChoice.FIVE)
    assert phase.teams == bidding_phase.teams


def test_best_bid_ignores_passes():
    bids = [
        Bid(seat=1, choice=BidChoice.PASS),
        Bid(seat=2, choice=BidChoice.FOUR),
        Bid(seat=3, choice=BidChoice.PARTNERS_BEST_CARD),
        Bid(seat=4, choice=BidChoice.PASS),
    ]
    assert best_bid(bids) == Bid(seat=3, choice=BidChoice.PARTNERS_BEST_CARD)
    assert best_bid(bids[:1]) is None
