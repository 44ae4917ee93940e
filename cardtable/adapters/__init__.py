"""
Presentation adapters for the cardtable engine.

Adapters observe a TableEngine, render its snapshot each time it changes and
supply the player's hit/stand decisions.
"""

from cardtable.adapters.base import Action, TableAdapter, attach, play_round
from cardtable.adapters.console import ConsoleAdapter
from cardtable.adapters.scripted import ScriptedAdapter

__all__ = [
    "Action",
    "TableAdapter",
    "attach",
    "play_round",
    "ConsoleAdapter",
    "ScriptedAdapter",
]
