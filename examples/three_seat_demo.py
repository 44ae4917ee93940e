"""
Plays one round against the dealer with both bots seated, printing the table
after every change and the events raised along the way.
"""

from cardtable.adapters import ConsoleAdapter, ScriptedAdapter, attach, play_round
from cardtable.engine import DealerOrchestrator, Seat, TableEngine


def main():
    engine = TableEngine(3, {"seed": 2024})
    orchestrator = DealerOrchestrator(engine)

    attach(ConsoleAdapter(), orchestrator)
    engine.events.on_any(lambda event: print(f"[{event[0]}]"))

    orchestrator.start_round()
    play_round(ScriptedAdapter(stand_on=17), orchestrator)

    for seat, result in orchestrator.results().items():
        print(f"{seat.value}: {result} ({engine.value(seat)} vs {engine.value(Seat.DEALER)})")


if __name__ == "__main__":
    main()
