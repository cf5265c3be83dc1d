"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Sequence

from bid_euchre.state import Option, Phase


class BotStrategy:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_game_start(self, phase: Phase) -> None:
        """Optional hook invoked once the opening hand is dealt."""
        return None

    def choose(self, phase: Phase, seat: int, options: Sequence[Option]) -> Option:
        """Return one of ``options`` for ``seat`` to play."""
        if not options:
            raise RuntimeError("No legal options available for bot.")
        return options[0]
