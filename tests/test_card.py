import pytest

from cardtable.common.card import Card, Rank, Suit


def test_card_initialization():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.EIGHT


def test_card_repr():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert repr(card) == "Card(Suit.HEARTS, Rank.EIGHT)"


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.EIGHT)) == "8-H"
    assert str(Card(Suit.SPADES, Rank.TEN)) == "10-S"


def test_card_values():
    assert Card(Suit.CLUBS, Rank.ACE).value == 11
    assert Card(Suit.CLUBS, Rank.TWO).value == 2
    assert Card(Suit.CLUBS, Rank.TEN).value == 10
    for face in (Rank.JACK, Rank.QUEEN, Rank.KING):
        assert Card(Suit.CLUBS, face).value == 10


def test_face_ranks_are_distinct():
    assert len(Rank) == 13
    assert len({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING}) == 4


def test_is_ace():
    assert Card(Suit.DIAMONDS, Rank.ACE).is_ace
    assert not Card(Suit.DIAMONDS, Rank.KING).is_ace


def test_asset_key_and_image_path():
    card = Card(Suit.CLUBS, Rank.QUEEN)
    assert card.asset_key == "Q-C"
    assert card.image_path() == "/BlackJack/resources/images/cards/Q-C.png"
    assert card.image_path("assets/") == "assets/Q-C.png"


def test_suit_symbols():
    assert str(Suit.HEARTS) == "♥"
    assert Suit.SPADES.symbol == "♠"


def test_invalid_suit():
    with pytest.raises(TypeError):
        Card("Z", Rank.EIGHT)


def test_invalid_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, "8")


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    with pytest.raises(AttributeError):
        card.rank = Rank.NINE


def test_card_equality_and_hash():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.CLUBS, Rank.EIGHT)

    assert card1 == card2
    assert card1 != card3
    assert len({card1, card2, card3}) == 2
