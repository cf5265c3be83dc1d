"""Simple bot arena for Bid Euchre."""

from __future__ import annotations

import argparse
import logging
from random import Random
from typing import Dict, Iterable, Sequence

from bid_euchre.game import RulesEngine, seat_to_act
from bid_euchre.rules_schema import load_rules
from bid_euchre.state import BiddingPhase, GameOverPhase, LobbyPlayer

from .base import BotStrategy
from .random_bot import RandomBot

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "first": BotStrategy,
    "random": RandomBot,
}

logger = logging.getLogger(__name__)


def run_game(
    bots: Sequence[BotStrategy],
    *,
    seed: int | None = None,
    target_score: int = 32,
    max_moves: int = 20000,
) -> dict:
    """Play a full game between four bots seated 1 to 4."""
    if len(bots) != 4:
        raise ValueError("Bid Euchre needs exactly four bots.")
    engine = RulesEngine(rules=load_rules({"target_score": target_score}), rng=Random(seed))
    players = [LobbyPlayer(name=f"{bot.name} {seat}", seat=seat) for seat, bot in enumerate(bots, start=1)]
    phase = engine.start_game(players)
    for bot in bots:
        bot.on_game_start(phase)

    hands = 1
    moves = 0
    while not isinstance(phase, GameOverPhase):
        if moves >= max_moves:
            raise RuntimeError(f"Game did not finish within {max_moves} moves.")
        seat = seat_to_act(phase)
        options = engine.get_options(phase, seat)
        option = bots[seat - 1].choose(phase, seat, options)
        next_phase = engine.choose_option(option, phase, seat)
        if next_phase is phase:
            raise RuntimeError(f"Engine rejected {option} from seat {seat} during {phase.name}.")
        if isinstance(next_phase, BiddingPhase) and not isinstance(phase, BiddingPhase):
            hands += 1
            logger.info("Scores after hand %d: %s", hands - 1, [team.points for team in next_phase.teams])
        phase = next_phase
        moves += 1

    return {
        "winners": [player.seat for player in phase.winners.players],
        "scores": {"winners": phase.winners.points, "losers": phase.losers.points},
        "hands": hands,
        "moves": moves,
    }


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a four-bot Bid Euchre game.")
    parser.add_argument("--bot", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--games", type=int, default=1, help="Number of games to play.")
    parser.add_argument("--target-score", type=int, default=32)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    for index in range(args.games):
        seed = args.seed + index
        if args.bot == "random":
            bots = [RandomBot(seed=seed * 10 + seat) for seat in range(1, 5)]
        else:
            bots = [BOT_REGISTRY[args.bot]() for _ in range(4)]
        results = run_game(bots, seed=seed, target_score=args.target_score)
        print(
            f"Game {index + 1}: seats {results['winners']} won "
            f"{results['scores']['winners']}-{results['scores']['losers']} "
            f"after {results['hands']} hands"
        )


if __name__ == "__main__":
    main()
