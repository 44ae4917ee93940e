"""
Command-line interface adapter for the cardtable engine.

Renders the table as text and reads hit/stand decisions from the console.
"""

from typing import Any, Callable, Dict, List, Optional

from cardtable.adapters.base import Action, TableAdapter
from cardtable.common.card import Suit

_SUIT_BY_CODE = {suit.value: suit for suit in Suit}

_SEAT_LABELS = {
    "dealer": "Dealer",
    "player": "You",
    "bot1": "Bot 1",
    "bot2": "Bot 2",
}


def format_card(card: Dict[str, Any]) -> str:
    return f"{card['rank']}{_SUIT_BY_CODE[card['suit']].symbol}"


class ConsoleAdapter(TableAdapter):
    """
    Text adapter writing to stdout and reading from stdin.

    The output and input functions can be swapped for testing.
    """

    def __init__(
        self,
        output: Optional[Callable[[str], None]] = None,
        input_func: Optional[Callable[[str], str]] = None,
        max_attempts: int = 3,
    ):
        self.output = output or print
        self.input_func = input_func or input
        self.max_attempts = max_attempts

    def render(self, snapshot: Dict[str, Any]) -> None:
        lines = []
        for seat, view in snapshot["seats"].items():
            cards = " ".join(format_card(card) for card in view["cards"])
            label = _SEAT_LABELS.get(seat, seat)
            if seat == "dealer":
                hidden = snapshot["hidden_card"]
                cards = f"{format_card(hidden) if hidden else '??'} {cards}"
            score = "?" if view["value"] is None else view["value"]
            lines.append(f"{label:>7}: {cards}  ({score})")
        lines.append(f"   Deck: {snapshot['deck_size']} cards")
        self.output("\n".join(lines))

    def request_action(
        self, snapshot: Dict[str, Any], valid_actions: List[Action]
    ) -> Action:
        """
        Prompt until a valid action is typed.

        Raises:
            ValueError: After too many invalid responses
        """
        names = "/".join(action.value for action in valid_actions)
        for _ in range(self.max_attempts):
            response = self.input_func(f"{names}? ").strip().lower()
            for action in valid_actions:
                if response in (action.value, action.value[0]):
                    return action
            self.output(f"Invalid action, valid actions are: {names}")
        raise ValueError("Too many invalid attempts.")
