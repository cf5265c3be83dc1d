"""Per-phase rule collaborators used by the engine."""

from __future__ import annotations

from random import Random
from typing import Dict, Optional

from ..rules_schema import RuleSet
from .base import PhaseRuleError, PhaseRules
from .bidding import BiddingRules
from .partners_best_card import PartnersBestCardRules
from .trick_taking import TrickTakingRules
from .trump_picking import TrumpPickingRules

__all__ = [
    "PhaseRuleError",
    "PhaseRules",
    "BiddingRules",
    "TrumpPickingRules",
    "PartnersBestCardRules",
    "TrickTakingRules",
    "default_handlers",
]


def default_handlers(rules: RuleSet, rng: Optional[Random] = None) -> Dict[type, PhaseRules]:
    """Return the standard collaborator for every phase, keyed by phase class."""
    handlers = [
        BiddingRules(),
        TrumpPickingRules(),
        PartnersBestCardRules(),
        TrickTakingRules(rules=rules, rng=rng),
    ]
    return {handler.phase_type: handler for handler in handlers}
