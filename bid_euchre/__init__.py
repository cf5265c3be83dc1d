"""Rules engine for four-player Bid Euchre."""

__all__ = [
    "cards",
    "deck",
    "seats",
    "bidding",
    "trump",
    "state",
    "legality",
    "phases",
    "game",
    "rules_schema",
    "snapshot",
]
