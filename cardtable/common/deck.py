"""
This module contains the Deck class, which represents a single 52-card deck.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.SPADES, Rank.KING)
>>> deck.size
51
"""

import random
from typing import List, Optional

from cardtable.common.card import Card, Rank, Suit


class EmptyDeckError(IndexError):
    """Raised when a card is drawn from a deck with no cards left."""

    pass


class Deck:
    """
    A class representing a deck of cards.

    Cards are drawn from the end of ``cards``, so the last element is the top
    of the deck.
    """

    # Suit-major, ace-first build order
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the canonical 52-card deck is built.
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = cards.copy()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct the canonical deck with every suit and rank combination.

        :return: A list of Card instances representing the default deck.
        """
        return self._default_deck.copy()

    def shuffle(self, rng: Optional[random.Random] = None):
        """
        Shuffle the deck in place.

        Every position ``i`` is swapped with a position drawn from the whole
        deck, not just the unshuffled suffix. All orderings remain reachable
        but they are not equally likely.

        :param rng: Random source; the module-level generator if omitted.
        :return: The deck, for chaining.
        """
        rng = rng or random
        cards = self.cards
        size = len(cards)
        for i in range(size):
            j = rng.randrange(size)
            cards[i], cards[j] = cards[j], cards[i]
        return self

    def deal(self) -> Card:
        """
        Remove and return the top card.

        :raises EmptyDeckError: If the deck has no cards left.
        """
        if not self.cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self.cards.pop()

    @property
    def size(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def reset(self):
        """
        Reset the deck to the canonical, unshuffled 52 cards.
        """
        self.cards = self.initialize_default_deck()

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
