"""Phase dispatch: option enumeration, option application and game setup."""

from __future__ import annotations

import logging
from random import Random
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .cards import Card
from .deck import deal_four_hands
from .legality import is_legal
from .phases import PhaseRuleError, PhaseRules, default_handlers
from .rules_schema import RuleSet, load_rules
from .seats import SEATS, Seat, next_seat
from .state import (
    BiddingPhase,
    GameOverPhase,
    LobbyPlayer,
    Option,
    PartnersBestCardPhase,
    Phase,
    Player,
    Team,
    TrickTakingPhase,
    TrumpPickingPhase,
)

__all__ = [
    "IllegalPhaseError",
    "RulesEngine",
    "build_teams",
    "start_game",
    "get_options",
    "is_legal_option",
    "choose_option",
    "is_legal",
    "seat_to_act",
]

logger = logging.getLogger(__name__)


class IllegalPhaseError(RuntimeError):
    """Raised when a freshly built game fails the legality checker."""


PHASE_TYPES = (BiddingPhase, TrumpPickingPhase, PartnersBestCardPhase, TrickTakingPhase)


def build_teams(players: Iterable[LobbyPlayer], hands: Sequence[Sequence[Card]]) -> Tuple[Team, Team]:
    """Seat players with their hands; seats 1 and 3 partner seats 2 and 4."""
    by_seat: Dict[Seat, LobbyPlayer] = {}
    for player in players:
        by_seat[player.seat] = player
    if sorted(by_seat) != list(SEATS):
        raise ValueError("Exactly four players must occupy seats 1 to 4.")

    dealt = {
        seat: Player(name=by_seat[seat].name, seat=seat, hand=tuple(hands[seat - 1]))
        for seat in SEATS
    }
    return (
        Team(players=(dealt[1], dealt[3]), points=0),
        Team(players=(dealt[2], dealt[4]), points=0),
    )


def seat_to_act(phase: Phase) -> Seat:
    """Return the seat whose move the phase is waiting on."""
    if isinstance(phase, BiddingPhase):
        return phase.bid_position
    if isinstance(phase, TrumpPickingPhase):
        return phase.winning_bid.seat
    if isinstance(phase, PartnersBestCardPhase):
        return phase.partner
    if isinstance(phase, TrickTakingPhase):
        return phase.card_position
    raise ValueError(f"Unknown phase type {type(phase).__name__}.")


class RulesEngine:
    """Stateless rules core; the caller owns the current snapshot.

    Every move is checked twice: the input snapshot and the option must be
    legal before the phase collaborator runs, and the collaborator's result
    must be legal before it is handed back. A rejected move returns the input
    snapshot unchanged.
    """

    def __init__(
        self,
        rules: Optional[RuleSet] = None,
        rng: Optional[Random] = None,
        handlers: Optional[Mapping[type, PhaseRules]] = None,
    ) -> None:
        self.rules = rules or load_rules()
        self.rng = rng if rng is not None else Random()
        self.handlers: Dict[type, PhaseRules] = default_handlers(self.rules, self.rng)
        if handlers:
            self.handlers.update(handlers)
        for phase_type in PHASE_TYPES:
            handler = self.handlers.get(phase_type)
            if handler is None:
                raise ValueError(f"No rules registered for {phase_type.__name__}.")
            if not isinstance(handler, PhaseRules):
                raise TypeError(f"Rules for {phase_type.__name__} must be a PhaseRules, got {type(handler).__name__}.")

    # Game setup --------------------------------------------------------

    def start_game(self, players: Sequence[LobbyPlayer]) -> BiddingPhase:
        if len(players) != len(SEATS):
            raise ValueError(f"A game needs exactly {len(SEATS)} players, got {len(players)}.")
        dealer = self.rng.choice(SEATS)
        hands = deal_four_hands(rng=self.rng)
        phase = BiddingPhase(
            teams=build_teams(players, hands),
            dealer=dealer,
            bid_position=next_seat(dealer),
        )
        legal, message = is_legal(phase)
        if not legal:
            raise IllegalPhaseError(message)
        logger.debug("New game dealt by seat %s.", dealer)
        return phase

    # Options -----------------------------------------------------------

    def get_options(self, phase: Phase, seat: Seat) -> List[Option]:
        """Return the legal options for ``seat``; an illegal snapshot offers none."""
        handler = self._handler(phase)
        if handler is None or not is_legal(phase)[0]:
            return []
        return list(handler.options(phase, seat))

    def is_legal_option(self, option: Option, phase: Phase, seat: Seat) -> bool:
        return option in self.get_options(phase, seat)

    def choose_option(self, option: Option, phase: Phase, seat: Seat) -> Union[Phase, GameOverPhase]:
        """Apply ``option`` for ``seat``, or return ``phase`` unchanged if the move is rejected."""
        handler = self._handler(phase)
        if handler is None:
            logger.warning("No rules accept moves during %s.", phase.name)
            return phase
        legal, message = is_legal(phase)
        if not legal:
            logger.warning("Refusing to move from an illegal %s snapshot: %s", phase.name, message)
            return phase
        if not self.is_legal_option(option, phase, seat):
            logger.warning("Option %s is illegal for seat %s during %s.", option, seat, phase.name)
            return phase

        if not isinstance(option, handler.option_type):
            logger.warning("%s does not accept a %s option.", phase.name, type(option).__name__)
            return phase
        try:
            candidate = handler.choose(option, phase, seat)
        except PhaseRuleError as exc:
            logger.warning("%s rejected %s from seat %s: %s", phase.name, option, seat, exc)
            return phase
        except Exception:
            logger.warning("%s rules failed on %s from seat %s.", phase.name, option, seat, exc_info=True)
            return phase

        if not isinstance(candidate, (GameOverPhase,) + tuple(self.handlers)):
            logger.warning("%s rules returned a %s instead of a phase.", phase.name, type(candidate).__name__)
            return phase
        if isinstance(candidate, GameOverPhase):
            logger.info("Game over at %d to %d.", candidate.winners.points, candidate.losers.points)
            return candidate
        legal, message = is_legal(candidate)
        if not legal:
            logger.warning("Discarding illegal %s snapshot: %s", candidate.name, message)
            return phase
        if candidate.name != phase.name:
            logger.debug("%s -> %s", phase.name, candidate.name)
        return candidate

    # Helpers -----------------------------------------------------------

    def _handler(self, phase: Phase) -> Optional[PhaseRules]:
        for klass in type(phase).__mro__:
            if klass in self.handlers:
                return self.handlers[klass]
        return None


_default_engine = RulesEngine()


def start_game(players: Sequence[LobbyPlayer]) -> BiddingPhase:
    return _default_engine.start_game(players)


def get_options(phase: Phase, seat: Seat) -> List[Option]:
    return _default_engine.get_options(phase, seat)


def is_legal_option(option: Option, phase: Phase, seat: Seat) -> bool:
    return _default_engine.is_legal_option(option, phase, seat)


def choose_option(option: Option, phase: Phase, seat: Seat) -> Union[Phase, GameOverPhase]:
    return _default_engine.choose_option(option, phase, seat)
