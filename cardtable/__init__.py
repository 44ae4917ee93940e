"""
cardtable: a single-table blackjack simulator.

One human player and up to two bots play against the dealer from a single
52-card deck.
"""

from cardtable.common import Card, Deck, EmptyDeckError, Hand, Rank, Suit, reduce_ace
from cardtable.engine import (
    DealerOrchestrator,
    RoundResult,
    RoundStage,
    Seat,
    TableEngine,
    determine_result,
)

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Deck",
    "EmptyDeckError",
    "Hand",
    "Rank",
    "Suit",
    "reduce_ace",
    "DealerOrchestrator",
    "RoundResult",
    "RoundStage",
    "Seat",
    "TableEngine",
    "determine_result",
]
