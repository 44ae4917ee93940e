"""
This module is used to play blackjack at a single table.

It can be used in different modes:
- Interactive console mode (default), where the user hits or stands at the prompt.
- Simulation mode, where the player stands once their hand reaches a threshold.
- Shuffle analysis mode, which measures the bias of the table shuffle.

For example, `--players 3 --rounds 5` plays five interactive rounds against
the dealer with two bots, and `--simulate --rounds 1000` runs unattended.
"""

import argparse
import logging
import sys
from typing import List, Optional

from cardtable.adapters import ConsoleAdapter, ScriptedAdapter, attach, play_round
from cardtable.analysis import (
    fisher_yates,
    position_frequencies,
    table_shuffle,
    uniformity_test,
)
from cardtable.constants import (
    DEFAULT_STAKE,
    DRAW_THRESHOLD,
    MAX_PLAYERS,
    MIN_PLAYERS,
    STARTING_BANKROLL,
)
from cardtable.engine import DealerOrchestrator, Seat, TableEngine
from cardtable.session import SessionStats

logger = logging.getLogger("cardtable")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play blackjack at a single table.")
    parser.add_argument(
        "--players",
        type=int,
        choices=range(MIN_PLAYERS, MAX_PLAYERS + 1),
        default=1,
        help="1 plays alone against the dealer, 2 adds one bot, 3 adds two bots",
    )
    parser.add_argument("--rounds", type=int, default=1, help="Number of rounds to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shuffle")
    parser.add_argument(
        "--stake", type=int, default=DEFAULT_STAKE, help="Amount staked each round"
    )
    parser.add_argument(
        "--bankroll", type=int, default=STARTING_BANKROLL, help="Starting bankroll"
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        default=False,
        help="Play without prompting, standing once the hand reaches --stand-on",
    )
    parser.add_argument(
        "--stand-on",
        type=int,
        default=DRAW_THRESHOLD,
        help="Hand value at which the simulated player stands",
    )
    parser.add_argument(
        "--analyze-shuffle",
        type=int,
        metavar="TRIALS",
        default=0,
        help="Measure the table shuffle's bias over TRIALS shuffles and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def analyze_shuffle(trials: int, seed: Optional[int]) -> None:
    for name, shuffle in (("table", table_shuffle), ("fisher-yates", fisher_yates)):
        freqs = position_frequencies(trials, seed, shuffle=shuffle)
        report = uniformity_test(freqs)
        print(
            f"{name:>13}: chi2={report.chi_square:.1f} p={report.p_value:.4g} "
            f"max deviation={report.max_deviation:.1%}"
        )


def run_session(args: argparse.Namespace) -> SessionStats:
    engine = TableEngine(args.players, {"seed": args.seed})
    orchestrator = DealerOrchestrator(engine)
    stats = SessionStats(bankroll=args.bankroll, stake=args.stake)
    stats.attach(engine.events)

    if args.simulate:
        adapter = ScriptedAdapter(stand_on=args.stand_on)
    else:
        adapter = ConsoleAdapter()
        attach(adapter, orchestrator)

    for number in range(1, args.rounds + 1):
        stats.check_stake()
        orchestrator.start_round()
        play_round(adapter, orchestrator)
        if not args.simulate:
            player_result = orchestrator.result_for(Seat.PLAYER)
            print(f"Round {number}: you {player_result}\n")

    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to start the game.

    Parses the command line, plays the requested rounds and prints the
    session statistics.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.analyze_shuffle:
        analyze_shuffle(args.analyze_shuffle, args.seed)
        return 0

    if args.rounds < 1:
        logger.error("--rounds must be at least 1")
        return 2

    try:
        stats = run_session(args)
    except ValueError as e:
        logger.error("Session aborted: %s", e)
        return 1
    report = stats.report()
    print(f"Rounds played: {report['rounds_played']}")
    print(f"Bankroll: {report['bankroll']}")
    for seat, tally in report["seats"].items():
        counts = ", ".join(f"{result}: {count}" for result, count in tally.items())
        print(f"{seat:>7}: {counts}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
