"""Common interface for the per-phase rule collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, List, Union

from ..seats import Seat
from ..state import GameOverPhase, Option, Phase


class PhaseRuleError(RuntimeError):
    """Raised when a collaborator is asked to apply an option it cannot honour."""


class PhaseRules(ABC):
    """Option enumeration and application for a single phase variant.

    ``options`` must never repeat an option and must only offer moves that
    are legal under the phase's own rules. ``choose`` is only called with a
    member of ``options`` and returns a brand new snapshot.
    """

    phase_type: ClassVar[type]
    option_type: ClassVar[type]

    @abstractmethod
    def options(self, phase: Phase, seat: Seat) -> List[Option]:
        ...

    @abstractmethod
    def choose(self, option: Option, phase: Phase, seat: Seat) -> Union[Phase, GameOverPhase]:
        ...
