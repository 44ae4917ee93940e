"""
Pytest configuration for the cardtable tests.

Provides card shorthands and a fixture that stacks the deck so rounds deal a
known sequence of cards.
"""

from typing import List

import pytest

from cardtable.common.card import Card, Rank, Suit
from cardtable.common.deck import Deck


def make_card(code: str) -> Card:
    """Build a card from an asset-style code such as ``"10-H"`` or ``"A-S"``."""
    rank, suit = code.split("-")
    return Card(Suit(suit), Rank(rank))


def make_cards(*codes: str) -> List[Card]:
    return [make_card(code) for code in codes]


@pytest.fixture
def stack_deck(monkeypatch):
    """
    Make every subsequent shuffle put ``codes`` on top of the deck.

    The first code is the first card drawn. The remaining cards of the
    52-card deck sit underneath in canonical order, so the deck still holds
    each card exactly once.
    """

    def _stack(*codes: str) -> List[Card]:
        top = make_cards(*codes)

        def fake_shuffle(self, rng=None):
            rest = [card for card in self.initialize_default_deck() if card not in top]
            self.cards = rest + list(reversed(top))
            return self

        monkeypatch.setattr(Deck, "shuffle", fake_shuffle)
        return top

    return _stack
