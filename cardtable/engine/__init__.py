"""
Core engine for the cardtable package.

`TableEngine` owns the deck and every hand; `DealerOrchestrator` decides when
each seat draws and settles the round.
"""

from cardtable.engine.model import Seat, TableEngine
from cardtable.engine.dealer import (
    DealerOrchestrator,
    RoundResult,
    RoundStage,
    determine_result,
)

__all__ = [
    "Seat",
    "TableEngine",
    "DealerOrchestrator",
    "RoundResult",
    "RoundStage",
    "determine_result",
]
