"""
Base adapter interface for the cardtable engine.

This module defines the interface presentation layers implement to sit on
top of the engine: they render the table whenever it changes and choose the
player's next action.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, List

from cardtable.engine.dealer import DealerOrchestrator
from cardtable.engine.model import TableEngine


class Action(Enum):
    """Actions available to the human player."""

    HIT = "hit"
    STAND = "stand"


class TableAdapter(ABC):
    """
    Base interface for presentation adapters.

    Implementations bridge the platform-agnostic engine and a concrete
    front end such as a console or a test harness. Adapters only read engine
    state; they never mutate it while being notified.
    """

    def update(self, engine: TableEngine) -> None:
        """Observer callback: render the engine's current snapshot."""
        self.render(engine.snapshot())

    @abstractmethod
    def render(self, snapshot: Dict[str, Any]) -> None:
        """
        Render the current table state.

        Args:
            snapshot: Output of `TableEngine.snapshot`
        """
        pass

    @abstractmethod
    def request_action(self, snapshot: Dict[str, Any], valid_actions: List[Action]) -> Action:
        """
        Ask for the player's next action.

        Args:
            snapshot: Output of `TableEngine.snapshot`
            valid_actions: Actions the player may take now

        Returns:
            The chosen action
        """
        pass


def attach(adapter: TableAdapter, orchestrator: DealerOrchestrator) -> Callable[[], None]:
    """Register ``adapter`` as an observer of the orchestrator's engine."""
    return orchestrator.engine.register_observer(adapter.update)


def play_round(adapter: TableAdapter, orchestrator: DealerOrchestrator) -> None:
    """
    Feed the adapter's decisions to the orchestrator until the round completes.

    The round must already be dealt.
    """
    while orchestrator.can_hit:
        action = adapter.request_action(
            orchestrator.engine.snapshot(), [Action.HIT, Action.STAND]
        )
        if action is Action.HIT:
            orchestrator.on_hit()
        else:
            orchestrator.on_stand()
