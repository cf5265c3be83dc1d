"""Validation schema for Bid Euchre rules configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .bidding import BidChoice


class RuleSet(BaseModel):
    target_score: int = Field(32, description="Points a team needs to win the game.")
    partners_best_card_points: int = Field(8, description="Value of a Partner's Best Card contract.")
    going_alone_points: int = Field(12, description="Value of a Going Alone contract.")

    @field_validator("target_score", "partners_best_card_points", "going_alone_points")
    @classmethod
    def ensure_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Point values must be positive.")
        return value

    def contract_points(self, bid: BidChoice) -> int:
        """Points at stake for a contract; numeric bids are worth their trick count."""
        if bid is BidChoice.PARTNERS_BEST_CARD:
            return self.partners_best_card_points
        if bid is BidChoice.GOING_ALONE:
            return self.going_alone_points
        if bid is BidChoice.PASS:
            raise ValueError("A pass is not a contract.")
        return int(bid.value)


def load_rules(payload: Optional[Mapping[str, Any]] = None) -> RuleSet:
    """Build a validated rule set, falling back to the defaults."""
    return RuleSet(**dict(payload or {}))
