"""
Blackjack table state.

This module provides the TableEngine class, the single owner of the deck and
of every seat's hand for one round. It draws cards and deals the opening
hands, but never decides on its own when a seat draws afterwards; that is
left to the dealer orchestrator, which calls `draw_card` and `add_card`.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
import logging
import random

from cardtable.common.card import Card
from cardtable.common.deck import Deck
from cardtable.common.hand import Hand, reduce_ace
from cardtable.constants import (
    DEFAULT_ASSET_ROOT,
    INITIAL_HAND_SIZE,
    MAX_PLAYERS,
    MIN_PLAYERS,
)
from cardtable.events import EventEmitter, Observable, TableEventType

logger = logging.getLogger("cardtable.engine")


class Seat(Enum):
    """
    Participants at the table, in resolution order.
    """

    DEALER = "dealer"
    PLAYER = "player"
    BOT_1 = "bot1"
    BOT_2 = "bot2"


# Seats filled for each player count, dealer excluded
_SEATS_BY_COUNT = {
    1: (Seat.PLAYER,),
    2: (Seat.PLAYER, Seat.BOT_1),
    3: (Seat.PLAYER, Seat.BOT_1, Seat.BOT_2),
}


def _check_player_count(player_count: int) -> int:
    if (
        isinstance(player_count, bool)
        or not isinstance(player_count, int)
        or not (MIN_PLAYERS <= player_count <= MAX_PLAYERS)
    ):
        raise ValueError(
            f"player_count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, "
            f"got {player_count!r}"
        )
    return player_count


class TableEngine(Observable):
    """
    Authoritative game state for one table.

    Config keys:
        seed: Seed for the shuffle's random source (None for OS entropy)
        asset_root: Directory prefix used for card image paths in snapshots
    """

    def __init__(self, player_count: int, config: Dict[str, Any] = None):
        """
        Initialize the engine. No cards are dealt until `start_new_game`.

        Args:
            player_count: 1 for the player alone, 2 adds bot 1, 3 adds bot 2
            config: Configuration options for the table
        """
        super().__init__()
        self.player_count = _check_player_count(player_count)
        self.config = config or {}
        self.random = random.Random(self.config.get("seed"))
        self.asset_root = self.config.get("asset_root", DEFAULT_ASSET_ROOT)
        self.events = EventEmitter()

        self.deck = Deck([])
        self._hands: Dict[Seat, Hand] = {}
        self._hidden_revealed = False

    @property
    def active_seats(self) -> List[Seat]:
        """The dealer followed by every seat in play, in resolution order."""
        return [Seat.DEALER, *_SEATS_BY_COUNT[self.player_count]]

    @property
    def bot_seats(self) -> List[Seat]:
        return [seat for seat in self.active_seats if seat in (Seat.BOT_1, Seat.BOT_2)]

    def start_new_game(self, player_count: Optional[int] = None) -> None:
        """
        Build and shuffle a fresh deck, clear every hand and deal the opening cards.

        The dealer gets one hidden and one visible card; the player and each
        active bot get two cards.

        Args:
            player_count: Seat count for the new round; keeps the current one if omitted
        """
        if player_count is not None:
            self.player_count = _check_player_count(player_count)

        self.deck = Deck()
        self.deck.shuffle(self.random)
        self._hands = {seat: Hand() for seat in self.active_seats}
        self._hidden_revealed = False

        self.events.emit(
            TableEventType.ROUND_STARTED,
            {"player_count": self.player_count, "seats": self.active_seats},
        )

        dealer = self._hands[Seat.DEALER]
        dealer.add_card(self.draw_card(), hidden=True)
        self._deal_to(Seat.DEALER, self.draw_card())

        for seat in _SEATS_BY_COUNT[self.player_count]:
            for _ in range(INITIAL_HAND_SIZE):
                self._deal_to(seat, self.draw_card())

        logger.debug(
            "Dealt new round for %d player(s), %d cards left",
            self.player_count,
            self.deck.size,
        )

    def draw_card(self) -> Card:
        """
        Remove and return the top card of the deck.

        Raises:
            EmptyDeckError: If the deck is exhausted
        """
        return self.deck.deal()

    @staticmethod
    def reduce_ace(total: int, ace_count: int) -> int:
        return reduce_ace(total, ace_count)

    def add_card(self, seat: Seat, card: Card) -> None:
        """
        Append a drawn card to a seat's hand, updating its total and ace count.

        Raises:
            KeyError: If the seat is not in play this round
        """
        self._deal_to(seat, card)

    def _deal_to(self, seat: Seat, card: Card) -> None:
        self.hand(seat).add_card(card)
        logger.debug("%s receives %s", seat.value, card)
        self.events.emit(TableEventType.CARD_DEALT, {"seat": seat, "card": card})

    def hand(self, seat: Seat) -> Hand:
        """
        Hand held by a seat.

        Raises:
            KeyError: If the seat is not in play or no round has been dealt
        """
        try:
            return self._hands[seat]
        except KeyError:
            raise KeyError(f"{seat} has no hand this round") from None

    def total(self, seat: Seat) -> int:
        """Running total of the seat's cards with aces at 11."""
        return self.hand(seat).total

    def ace_count(self, seat: Seat) -> int:
        return self.hand(seat).ace_count

    def value(self, seat: Seat) -> int:
        """Ace-reduced score of the seat's hand, computed on demand."""
        hand = self.hand(seat)
        return self.reduce_ace(hand.total, hand.ace_count)

    @property
    def hidden_card(self) -> Optional[Card]:
        if Seat.DEALER not in self._hands:
            return None
        return self._hands[Seat.DEALER].hidden_card

    @property
    def hidden_revealed(self) -> bool:
        return self._hidden_revealed

    def reveal_hidden_card(self) -> None:
        self._hidden_revealed = True

    @property
    def deck_size(self) -> int:
        return self.deck.size

    def snapshot(self) -> Dict[str, Any]:
        """
        Plain-data view of the table for presentation layers.

        The dealer's hidden card, and any total that would expose it, is
        withheld until `reveal_hidden_card` has been called.
        """
        seats = {}
        for seat, hand in self._hands.items():
            concealed = seat is Seat.DEALER and not self._hidden_revealed
            seats[seat.value] = {
                "cards": [self._card_view(card) for card in hand.cards],
                "total": None if concealed else hand.total,
                "ace_count": None if concealed else hand.ace_count,
                "value": None if concealed else hand.value(),
            }

        hidden = self.hidden_card
        return {
            "player_count": self.player_count,
            "deck_size": self.deck.size,
            "hidden_card": (
                self._card_view(hidden)
                if hidden is not None and self._hidden_revealed
                else None
            ),
            "hidden_revealed": self._hidden_revealed,
            "seats": seats,
        }

    def _card_view(self, card: Card) -> Dict[str, Any]:
        return {
            "rank": card.rank.value,
            "suit": card.suit.value,
            "value": card.value,
            "is_ace": card.is_ace,
            "asset": card.image_path(self.asset_root),
        }

    def __repr__(self) -> str:
        return f"TableEngine(player_count={self.player_count}, deck={self.deck.size})"
