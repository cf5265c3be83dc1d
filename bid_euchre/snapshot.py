"""Plain-dict (JSON ready) serialization of game snapshots."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from .bidding import BidChoice
from .cards import deserialize_card, serialize_card
from .state import (
    Bid,
    BiddingPhase,
    GameOverPhase,
    PartnersBestCardPhase,
    Phase,
    Player,
    Team,
    Trick,
    TrickTakingPhase,
    TrumpPickingPhase,
    UpCard,
)
from .trump import Trump


def _player_to_dict(player: Player) -> Dict[str, Any]:
    return {
        "name": player.name,
        "seat": player.seat,
        "hand": [serialize_card(card) for card in player.hand],
    }


def _team_to_dict(team: Team) -> Dict[str, Any]:
    return {"players": [_player_to_dict(p) for p in team.players], "points": team.points}


def _bid_to_dict(bid: Bid) -> Dict[str, Any]:
    return {"seat": bid.seat, "choice": bid.choice.value}


def _trick_to_list(trick: Trick) -> list:
    return [{"owner": up.owner, "card": serialize_card(up.card)} for up in trick]


def phase_to_dict(phase: Union[Phase, GameOverPhase]) -> Dict[str, Any]:
    if isinstance(phase, GameOverPhase):
        return {
            "name": phase.name,
            "winners": _team_to_dict(phase.winners),
            "losers": _team_to_dict(phase.losers),
        }

    payload: Dict[str, Any] = {
        "name": phase.name,
        "teams": [_team_to_dict(team) for team in phase.teams],
        "dealer": phase.dealer,
    }
    if isinstance(phase, BiddingPhase):
        payload["bid_position"] = phase.bid_position
        payload["bids"] = [_bid_to_dict(bid) for bid in phase.bids]
    elif isinstance(phase, TrumpPickingPhase):
        payload["winning_bid"] = _bid_to_dict(phase.winning_bid)
    elif isinstance(phase, PartnersBestCardPhase):
        payload["trump"] = phase.trump.value
        payload["winning_bid"] = _bid_to_dict(phase.winning_bid)
        payload["partner"] = phase.partner
    elif isinstance(phase, TrickTakingPhase):
        payload["trump"] = phase.trump.value
        payload["winning_bid"] = _bid_to_dict(phase.winning_bid)
        payload["card_position"] = phase.card_position
        payload["current_trick"] = _trick_to_list(phase.current_trick)
        payload["finished_tricks"] = [_trick_to_list(trick) for trick in phase.finished_tricks]
        payload["player_sitting_out"] = phase.player_sitting_out
    else:
        raise ValueError(f"Unknown phase type {type(phase).__name__}.")
    return payload


def _player_from_dict(payload: Mapping[str, Any]) -> Player:
    return Player(
        name=payload["name"],
        seat=int(payload["seat"]),
        hand=tuple(deserialize_card(card) for card in payload["hand"]),
    )


def _team_from_dict(payload: Mapping[str, Any]) -> Team:
    return Team(
        players=tuple(_player_from_dict(p) for p in payload["players"]),
        points=int(payload["points"]),
    )


def _bid_from_dict(payload: Mapping[str, Any]) -> Bid:
    return Bid(seat=int(payload["seat"]), choice=BidChoice(payload["choice"]))


def _trick_from_list(payload: list) -> Trick:
    return tuple(UpCard(owner=int(up["owner"]), card=deserialize_card(up["card"])) for up in payload)


def phase_from_dict(payload: Mapping[str, Any]) -> Union[Phase, GameOverPhase]:
    """Rebuild a snapshot from :func:`phase_to_dict` output.

    Raises:
        ValueError: unknown phase name, bid choice, trump, rank or suit.
        KeyError: a required field is missing.
    """
    name = payload["name"]
    if name == GameOverPhase.name:
        return GameOverPhase(
            winners=_team_from_dict(payload["winners"]),
            losers=_team_from_dict(payload["losers"]),
        )

    common = {
        "teams": tuple(_team_from_dict(team) for team in payload["teams"]),
        "dealer": int(payload["dealer"]),
    }
    if name == BiddingPhase.name:
        return BiddingPhase(
            bid_position=int(payload["bid_position"]),
            bids=tuple(_bid_from_dict(bid) for bid in payload["bids"]),
            **common,
        )
    if name == TrumpPickingPhase.name:
        return TrumpPickingPhase(winning_bid=_bid_from_dict(payload["winning_bid"]), **common)
    if name == PartnersBestCardPhase.name:
        return PartnersBestCardPhase(
            trump=Trump(payload["trump"]),
            winning_bid=_bid_from_dict(payload["winning_bid"]),
            partner=int(payload["partner"]),
            **common,
        )
    if name == TrickTakingPhase.name:
        sitting_out = payload.get("player_sitting_out")
        return TrickTakingPhase(
            trump=Trump(payload["trump"]),
            winning_bid=_bid_from_dict(payload["winning_bid"]),
            card_position=int(payload["card_position"]),
            current_trick=_trick_from_list(payload["current_trick"]),
            finished_tricks=tuple(_trick_from_list(trick) for trick in payload["finished_tricks"]),
            player_sitting_out=int(sitting_out) if sitting_out is not None else None,
            **common,
        )
    raise ValueError(f"Unknown phase name {name!r}.")
