"""
Turn sequencing and settlement for a blackjack round.

The DealerOrchestrator is the only component that decides when a seat draws.
A round moves through three stages:

PLAYER_TURN: the human hits or stands. A hit that takes the hand past 21
forces a stand.
DEALER_AND_BOTS_RESOLVING: the dealer, then bot 1, then bot 2 draw while
their running total (aces still counted as 11) is below 17. This pass is
synchronous and uninterruptible.
ROUND_COMPLETE: the hidden card is revealed and every non-dealer seat is
settled against the dealer.
"""

from enum import Enum, auto
from typing import Dict, Optional
import logging

from cardtable.constants import BUST_LIMIT, DRAW_THRESHOLD
from cardtable.engine.model import Seat, TableEngine
from cardtable.events import TableEventType

logger = logging.getLogger("cardtable.engine.dealer")


class RoundStage(Enum):
    """
    Stages of a single round.
    """

    PLAYER_TURN = auto()
    DEALER_AND_BOTS_RESOLVING = auto()
    ROUND_COMPLETE = auto()


class RoundResult(Enum):
    """Outcome of a seat against the dealer, valued with the table's result codes."""

    WIN = 1
    LOSS = 2
    PUSH = 3

    def __str__(self) -> str:
        return self.name.lower()


def determine_result(participant_value: int, dealer_value: int) -> RoundResult:
    """
    Settle one seat against the dealer using ace-reduced values.

    A bust participant loses even when the dealer also busts.

    >>> determine_result(22, 25)
    <RoundResult.LOSS: 2>
    >>> determine_result(18, 23)
    <RoundResult.WIN: 1>
    """
    if participant_value > BUST_LIMIT:
        return RoundResult.LOSS
    if dealer_value > BUST_LIMIT:
        return RoundResult.WIN
    if participant_value == dealer_value:
        return RoundResult.PUSH
    return RoundResult.WIN if participant_value > dealer_value else RoundResult.LOSS


class DealerOrchestrator:
    """
    Drives the player's hit/stand turn and resolves the dealer and bots.

    Both `on_hit` and `on_stand` are complete, synchronous state transitions
    that end with the engine notifying its observers.
    """

    def __init__(self, engine: TableEngine):
        self.engine = engine
        # None until a round has been dealt
        self.stage: Optional[RoundStage] = None
        self._results: Dict[Seat, RoundResult] = {}
        engine.events.on(TableEventType.ROUND_STARTED, self._on_round_started)

    def _on_round_started(self, event_data) -> None:
        self.stage = RoundStage.PLAYER_TURN
        self._results = {}

    def start_round(self, player_count: Optional[int] = None) -> None:
        """
        Deal a fresh round and hand the turn to the player.

        Args:
            player_count: Seat count for the new round; keeps the engine's if omitted
        """
        self.engine.start_new_game(player_count)
        logger.info("Round started with %d player(s)", self.engine.player_count)
        self.engine.notify_observers()

    @property
    def can_hit(self) -> bool:
        return self.stage is RoundStage.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        return self.stage is RoundStage.PLAYER_TURN

    @property
    def is_complete(self) -> bool:
        return self.stage is RoundStage.ROUND_COMPLETE

    def _require_player_turn(self, action: str) -> None:
        if self.stage is None:
            raise ValueError(f"Cannot {action} before a round is dealt")
        if self.stage is not RoundStage.PLAYER_TURN:
            raise ValueError(f"Cannot {action} during {self.stage.name}")

    def on_hit(self) -> None:
        """
        Draw one card for the player.

        If the ace-reduced value then exceeds 21 the player is forced to stand.

        Raises:
            ValueError: If it is not the player's turn
        """
        self._require_player_turn("hit")
        engine = self.engine

        self._draw_for(Seat.PLAYER)

        player_value = engine.value(Seat.PLAYER)
        if player_value > BUST_LIMIT:
            logger.info("Player busts with %d", player_value)
            engine.events.emit(
                TableEventType.PLAYER_BUSTED,
                {"seat": Seat.PLAYER, "value": player_value},
            )
            self.on_stand()
            return

        engine.notify_observers()

    def on_stand(self) -> None:
        """
        End the player's turn, play out the dealer and bots, and settle the round.

        Raises:
            ValueError: If it is not the player's turn
        """
        self._require_player_turn("stand")
        engine = self.engine

        engine.events.emit(
            TableEventType.PLAYER_STOOD,
            {"seat": Seat.PLAYER, "value": engine.value(Seat.PLAYER)},
        )

        self.stage = RoundStage.DEALER_AND_BOTS_RESOLVING
        logger.debug("Resolving dealer and bots")

        self._play_out(Seat.DEALER)
        for seat in engine.bot_seats:
            self._play_out(seat)

        self._complete()
        engine.notify_observers()

    def _draw_for(self, seat: Seat) -> None:
        card = self.engine.draw_card()
        self.engine.add_card(seat, card)

    def _play_out(self, seat: Seat) -> None:
        # The threshold is checked against the unreduced total
        while self.engine.total(seat) < DRAW_THRESHOLD:
            self._draw_for(seat)
        logger.debug(
            "%s stops at %d (value %d)",
            seat.value,
            self.engine.total(seat),
            self.engine.value(seat),
        )

    def _complete(self) -> None:
        engine = self.engine
        engine.reveal_hidden_card()

        dealer_value = engine.value(Seat.DEALER)
        self._results = {
            seat: determine_result(engine.value(seat), dealer_value)
            for seat in engine.active_seats
            if seat is not Seat.DEALER
        }
        self.stage = RoundStage.ROUND_COMPLETE

        for seat in engine.active_seats:
            engine.events.emit(
                TableEventType.HAND_COMPLETED,
                {
                    "seat": seat,
                    "value": engine.value(seat),
                    "result": self._results.get(seat),
                },
            )
        engine.events.emit(
            TableEventType.ROUND_COMPLETED,
            {"dealer_value": dealer_value, "results": dict(self._results)},
        )
        logger.info(
            "Round complete, dealer %d: %s",
            dealer_value,
            ", ".join(f"{seat.value}={result}" for seat, result in self._results.items()),
        )

    def results(self) -> Dict[Seat, RoundResult]:
        """
        Outcome of every non-dealer seat in play.

        Raises:
            ValueError: If the round is not complete yet
        """
        if self.stage is not RoundStage.ROUND_COMPLETE:
            raise ValueError("Round is not complete")
        return dict(self._results)

    def result_for(self, seat: Seat) -> RoundResult:
        return self.results()[seat]
