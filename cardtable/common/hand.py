"""
This module contains the hand of a single table seat and the ace-reduction rule.

A `Hand` keeps a running total of its card values as dealt (aces at 11) and
a count of its aces. Both are updated together each time a card is added.
The effective score is never stored; `value()` derives it with
`reduce_ace`.
"""
from typing import List, Optional

from cardtable.common.card import Card
from cardtable.constants import ACE_REDUCTION, BUST_LIMIT


def reduce_ace(total: int, ace_count: int) -> int:
    """
    Re-read aces as 1 until the total is no longer bust or no aces remain.

    >>> reduce_ace(22, 1)
    12
    >>> reduce_ace(32, 2)
    12
    >>> reduce_ace(25, 0)
    25
    """
    while total > BUST_LIMIT and ace_count > 0:
        total -= ACE_REDUCTION
        ace_count -= 1
    return total


class Hand:
    """
    The cards held by one participant.

    The dealer's face-down card is kept apart in ``hidden_card`` but counts
    toward ``total`` and ``ace_count`` from the moment it is dealt.
    """

    def __init__(self):
        self._cards: List[Card] = []
        self.hidden_card: Optional[Card] = None
        self.total = 0
        self.ace_count = 0

    @property
    def cards(self) -> List[Card]:
        """Visible cards in draw order."""
        return self._cards

    @property
    def all_cards(self) -> List[Card]:
        """Every card in the hand, hidden card first."""
        if self.hidden_card is None:
            return list(self._cards)
        return [self.hidden_card] + self._cards

    def add_card(self, card: Card, hidden: bool = False) -> None:
        """
        Add a card and update the running total and ace count.

        Args:
            card: The card to add.
            hidden: Deal the card face down. A hand holds at most one.

        Raises:
            ValueError: If the hand already has a hidden card.
        """
        if hidden:
            if self.hidden_card is not None:
                raise ValueError("Hand already holds a hidden card.")
            self.hidden_card = card
        else:
            self._cards.append(card)
        self.total += card.value
        self.ace_count += 1 if card.is_ace else 0

    def value(self) -> int:
        """Effective score after ace reduction."""
        return reduce_ace(self.total, self.ace_count)

    @property
    def is_bust(self) -> bool:
        return self.value() > BUST_LIMIT

    def __len__(self) -> int:
        return len(self._cards) + (0 if self.hidden_card is None else 1)

    def __repr__(self) -> str:
        return f"Hand({self._cards!r}, hidden={self.hidden_card!r})"

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self._cards)
