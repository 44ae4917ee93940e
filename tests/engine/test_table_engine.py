"""
Tests for the TableEngine class.
"""

from collections import Counter
from unittest.mock import MagicMock

import pytest

from cardtable.common.deck import Deck, EmptyDeckError
from cardtable.engine import DealerOrchestrator, Seat, TableEngine
from cardtable.events import TableEventType

from conftest import make_card, make_cards


def all_cards_in_play(engine):
    cards = list(engine.deck.cards)
    for seat in engine.active_seats:
        cards.extend(engine.hand(seat).all_cards)
    return cards


@pytest.mark.parametrize("count", [0, 4, -1, "2", None, True, False])
def test_invalid_player_count(count):
    with pytest.raises(ValueError):
        TableEngine(count)


def test_construction_does_not_deal():
    engine = TableEngine(1)
    assert engine.deck_size == 0
    assert engine.hidden_card is None
    with pytest.raises(KeyError):
        engine.hand(Seat.PLAYER)


@pytest.mark.parametrize(
    "count, seats, dealt",
    [
        (1, [Seat.DEALER, Seat.PLAYER], 4),
        (2, [Seat.DEALER, Seat.PLAYER, Seat.BOT_1], 6),
        (3, [Seat.DEALER, Seat.PLAYER, Seat.BOT_1, Seat.BOT_2], 8),
    ],
)
def test_start_new_game_deals_opening_hands(count, seats, dealt):
    engine = TableEngine(count, {"seed": 3})
    engine.start_new_game()

    assert engine.active_seats == seats
    assert engine.deck_size == 52 - dealt
    assert engine.hidden_card is not None
    assert len(engine.hand(Seat.DEALER).cards) == 1
    for seat in seats[1:]:
        assert len(engine.hand(seat).cards) == 2


@pytest.mark.parametrize("count", [1, 2, 3])
def test_deck_and_hands_partition_the_full_deck(count):
    engine = TableEngine(count, {"seed": 11})
    engine.start_new_game()
    engine.add_card(Seat.PLAYER, engine.draw_card())

    cards = all_cards_in_play(engine)
    assert len(cards) == 52
    assert Counter(cards) == Counter(Deck().cards)


@pytest.mark.parametrize("count", [1, 2, 3])
def test_partition_holds_after_dealer_and_bots_draw(count):
    engine = TableEngine(count, {"seed": 17})
    orchestrator = DealerOrchestrator(engine)
    orchestrator.start_round()
    orchestrator.on_hit()
    if orchestrator.can_stand:
        orchestrator.on_stand()

    assert orchestrator.is_complete
    cards = all_cards_in_play(engine)
    assert len(cards) == 52
    assert Counter(cards) == Counter(Deck().cards)


def test_inactive_seats_have_no_hand():
    engine = TableEngine(1, {"seed": 1})
    engine.start_new_game()
    with pytest.raises(KeyError):
        engine.hand(Seat.BOT_1)
    with pytest.raises(KeyError):
        engine.add_card(Seat.BOT_2, make_card("2-C"))


def test_deal_order(stack_deck):
    stack_deck("A-H", "9-C", "10-S", "5-D", "K-C", "2-H", "3-S", "4-S")
    engine = TableEngine(3)
    engine.start_new_game()

    assert engine.hidden_card == make_card("A-H")
    assert engine.hand(Seat.DEALER).cards == [make_card("9-C")]
    assert engine.hand(Seat.PLAYER).cards == make_cards("10-S", "5-D")
    assert engine.hand(Seat.BOT_1).cards == make_cards("K-C", "2-H")
    assert engine.hand(Seat.BOT_2).cards == make_cards("3-S", "4-S")


def test_hidden_card_counts_toward_dealer_totals(stack_deck):
    stack_deck("A-H", "A-C", "10-S", "5-D")
    engine = TableEngine(1)
    engine.start_new_game()

    assert engine.total(Seat.DEALER) == 22
    assert engine.ace_count(Seat.DEALER) == 2
    assert engine.value(Seat.DEALER) == 12


def test_add_card_keeps_totals_consistent(stack_deck):
    stack_deck("2-H", "3-C", "A-S", "5-D", "A-C", "K-D")
    engine = TableEngine(1)
    engine.start_new_game()
    for _ in range(2):
        engine.add_card(Seat.PLAYER, engine.draw_card())

    hand = engine.hand(Seat.PLAYER)
    assert hand.cards == make_cards("A-S", "5-D", "A-C", "K-D")
    assert engine.total(Seat.PLAYER) == sum(card.value for card in hand.cards) == 37
    assert engine.ace_count(Seat.PLAYER) == 2
    assert engine.value(Seat.PLAYER) == 17


def test_new_game_replaces_previous_state():
    engine = TableEngine(3, {"seed": 5})
    engine.start_new_game()
    engine.add_card(Seat.PLAYER, engine.draw_card())

    engine.start_new_game(1)

    assert engine.player_count == 1
    assert engine.active_seats == [Seat.DEALER, Seat.PLAYER]
    assert engine.deck_size == 48
    assert len(engine.hand(Seat.PLAYER).cards) == 2


def test_seeded_games_repeat():
    first = TableEngine(2, {"seed": 99})
    second = TableEngine(2, {"seed": 99})
    first.start_new_game()
    second.start_new_game()
    assert first.deck.cards == second.deck.cards
    assert first.hidden_card == second.hidden_card


def test_draw_from_exhausted_deck():
    engine = TableEngine(1, {"seed": 0})
    engine.start_new_game()
    while engine.deck_size:
        engine.draw_card()
    with pytest.raises(EmptyDeckError):
        engine.draw_card()


def test_reduce_ace_is_exposed():
    assert TableEngine.reduce_ace(32, 2) == 12
    assert TableEngine(1).reduce_ace(22, 1) == 12


def test_events_emitted_while_dealing():
    engine = TableEngine(2, {"seed": 4})
    started = MagicMock()
    dealt = MagicMock()
    engine.events.on(TableEventType.ROUND_STARTED, started)
    engine.events.on(TableEventType.CARD_DEALT, dealt)

    engine.start_new_game()

    started.assert_called_once()
    assert started.call_args[0][0]["player_count"] == 2
    # The hidden card is not announced
    assert dealt.call_count == 5


def test_observers_get_engine():
    engine = TableEngine(1)
    observer = MagicMock()
    engine.register_observer(observer)
    engine.notify_observers()
    observer.assert_called_once_with(engine)


def test_snapshot_conceals_hidden_card(stack_deck):
    stack_deck("A-H", "9-C", "10-S", "5-D")
    engine = TableEngine(1, {"asset_root": "cards"})
    engine.start_new_game()

    snapshot = engine.snapshot()
    assert snapshot["hidden_card"] is None
    assert snapshot["seats"]["dealer"]["value"] is None
    assert snapshot["seats"]["dealer"]["cards"][0]["asset"] == "cards/9-C.png"
    assert snapshot["seats"]["player"]["value"] == 15
    assert snapshot["deck_size"] == 48

    engine.reveal_hidden_card()
    snapshot = engine.snapshot()
    assert snapshot["hidden_card"]["rank"] == "A"
    assert snapshot["seats"]["dealer"]["total"] == 20
