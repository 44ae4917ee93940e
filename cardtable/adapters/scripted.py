"""
Non-interactive adapter used for tests and simulations.

It plays a predefined list of actions, then falls back to standing once the
player's hand reaches a threshold. Rendered snapshots are kept for
inspection.
"""

from typing import Any, Dict, List, Optional

from cardtable.adapters.base import Action, TableAdapter
from cardtable.constants import DRAW_THRESHOLD


class ScriptedAdapter(TableAdapter):
    """
    Adapter that never asks a human.

    Args:
        actions: Actions to play in order before the threshold policy applies
        stand_on: Stand once the player's value reaches this
        verbose: Print rendered snapshots
    """

    def __init__(
        self,
        actions: Optional[List[Action]] = None,
        stand_on: int = DRAW_THRESHOLD,
        verbose: bool = False,
    ):
        self.actions = list(actions or [])
        self.stand_on = stand_on
        self.verbose = verbose
        self.rendered_states: List[Dict[str, Any]] = []

    def render(self, snapshot: Dict[str, Any]) -> None:
        self.rendered_states.append(snapshot)
        if self.verbose:
            print(snapshot)

    def request_action(
        self, snapshot: Dict[str, Any], valid_actions: List[Action]
    ) -> Action:
        if self.actions:
            action = self.actions.pop(0)
            if action in valid_actions:
                return action

        if snapshot["seats"]["player"]["value"] < self.stand_on:
            return Action.HIT
        return Action.STAND

    def clear(self) -> None:
        self.rendered_states.clear()
