"""
This module contains the SessionStats class which tallies results across the
rounds played at one table during a session. Nothing is persisted.
"""

import logging
from typing import Callable, Dict, Mapping, Optional

from cardtable.constants import DEFAULT_STAKE, STARTING_BANKROLL
from cardtable.engine.dealer import RoundResult
from cardtable.engine.model import Seat
from cardtable.events import EventEmitter, TableEventType

logger = logging.getLogger("cardtable.session")


class SessionStats:
    """
    Win, loss and push counts per seat, plus the human player's bankroll.

    The bankroll moves by the stake on a win or a loss and is unchanged on a
    push. Bots play without money.
    """

    def __init__(self, bankroll: int = STARTING_BANKROLL, stake: int = DEFAULT_STAKE):
        if stake < 0:
            raise ValueError(f"Stake cannot be negative: {stake}")
        self.bankroll = bankroll
        self.stake = stake
        self.rounds_played = 0
        self.tallies: Dict[Seat, Dict[RoundResult, int]] = {}
        self._unsubscribe: Optional[Callable] = None
        self.check_stake()

    def attach(self, events: EventEmitter) -> None:
        """Record every round completed on ``events`` from now on."""
        self.detach()
        self._unsubscribe = events.on(
            TableEventType.ROUND_COMPLETED, lambda data: self.record(data["results"])
        )

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def can_cover_stake(self) -> bool:
        return self.stake <= self.bankroll

    def check_stake(self) -> None:
        """
        Make sure the stake can be paid from the current bankroll.

        Raises:
            ValueError: If the stake exceeds the bankroll
        """
        if not self.can_cover_stake:
            raise ValueError(
                f"Stake of {self.stake} exceeds the bankroll of {self.bankroll}"
            )

    def record(self, results: Mapping[Seat, RoundResult]) -> None:
        """Updates the tallies with the results of one round."""
        self.rounds_played += 1
        for seat, result in results.items():
            seat_tally = self.tallies.setdefault(
                seat, {outcome: 0 for outcome in RoundResult}
            )
            seat_tally[result] += 1

        player_result = results.get(Seat.PLAYER)
        if player_result is RoundResult.WIN:
            self.bankroll += self.stake
        elif player_result is RoundResult.LOSS:
            self.bankroll -= self.stake
        logger.debug("Recorded round %d, bankroll %d", self.rounds_played, self.bankroll)

    def count(self, seat: Seat, result: RoundResult) -> int:
        return self.tallies.get(seat, {}).get(result, 0)

    def report(self) -> dict:
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "rounds_played": self.rounds_played,
            "bankroll": self.bankroll,
            "seats": {
                seat.value: {str(result): count for result, count in tally.items()}
                for seat, tally in self.tallies.items()
            },
        }
