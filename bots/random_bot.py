"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from bid_euchre.bidding import BidChoice
from bid_euchre.state import Option, Phase

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, pass_rate: float = 0.5) -> None:
        self._rng = random.Random(seed)
        self.pass_rate = pass_rate

    def choose(self, phase: Phase, seat: int, options: Sequence[Option]) -> Option:
        if not options:
            raise RuntimeError("No legal options available for bot.")
        # Bid sparingly so that hands get played rather than always climbing to Going Alone.
        if BidChoice.PASS in options and self._rng.random() < self.pass_rate:
            return BidChoice.PASS
        return self._rng.choice(list(options))
