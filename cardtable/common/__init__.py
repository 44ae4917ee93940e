"""Card, deck and hand primitives shared by the table engine."""

from cardtable.common.card import Card, Rank, Suit
from cardtable.common.deck import Deck, EmptyDeckError
from cardtable.common.hand import Hand, reduce_ace

__all__ = ["Card", "Rank", "Suit", "Deck", "EmptyDeckError", "Hand", "reduce_ace"]
