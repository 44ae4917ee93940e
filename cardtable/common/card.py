"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck: Clubs,
Diamonds, Hearts and Spades. The enum value is the one-letter code used in
card asset names.

- `Rank`: An enum representing the thirteen ranks of a standard deck, Ace
through King. Every member is distinct; the blackjack scoring value is
exposed separately through `rank_value`.

- `Card`: An immutable playing card. A card is fully described by its rank
and suit, and also supplies the display-asset key a presentation layer
resolves to an image.
"""

from dataclasses import dataclass
from enum import Enum, unique

from cardtable.constants import DEFAULT_ASSET_ROOT


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, in deck-building order.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def rank_value(self) -> int:
        """The value of the rank as dealt, with aces counted as 11."""
        if self is Rank.ACE:
            return 11
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def rank_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card.

    >>> card = Card(Suit.HEARTS, Rank.ACE)
    >>> print(card)
    A-H
    >>> card.value
    11
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @property
    def value(self) -> int:
        """Numeric value of the card; aces count 11 until reduced."""
        return self.rank.rank_value

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    @property
    def asset_key(self) -> str:
        """Opaque display identifier, e.g. ``"10-S"``."""
        return f"{self.rank.value}-{self.suit.value}"

    def image_path(self, root: str = DEFAULT_ASSET_ROOT) -> str:
        """
        Path of the card face image under ``root``.

        :param root: Directory the presentation layer keeps card faces in.
        :return: ``"<root>/<asset_key>.png"``
        """
        return f"{root.rstrip('/')}/{self.asset_key}.png"

    def __repr__(self) -> str:
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        return self.asset_key
