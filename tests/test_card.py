import pytest

from rummysim.card import (
    NUM_CARD_VALUES,
    NUM_POSSIBLE_CARDS,
    NUM_SUITS,
    Card,
    CardSet,
    CardSuit,
    CardValue,
)


def test_value_index_round_trip():
    for i in range(NUM_CARD_VALUES):
        assert CardValue.from_index(i).index() == i


def test_value_iteration_starts_with_ace_and_ends_with_king():
    by_index = [CardValue.from_index(i) for i in range(NUM_CARD_VALUES)]
    assert list(CardValue) == by_index
    assert by_index[0] is CardValue.ACE
    assert by_index[-1] is CardValue.KING
    assert CardValue.ACE.index() == 0
    assert CardValue.KING.index() == NUM_CARD_VALUES - 1


@pytest.mark.parametrize("bad", [-1, 13, 100])
def test_value_from_invalid_index_raises(bad):
    with pytest.raises(ValueError):
        CardValue.from_index(bad)


def test_value_next_and_prev_wrap():
    assert CardValue.KING.next() is CardValue.ACE
    assert CardValue.ACE.prev() is CardValue.KING
    assert CardValue.TWO.prev() is CardValue.ACE
    assert CardValue.QUEEN.next() is CardValue.KING


@pytest.mark.parametrize("i", range(NUM_CARD_VALUES))
def test_next_and_prev_are_inverse(i):
    value = CardValue.from_index(i)
    assert CardValue.next(CardValue.prev(value)) is value
    assert CardValue.prev(CardValue.next(value)) is value


def test_suit_index_round_trip():
    for i in range(NUM_SUITS):
        assert CardSuit.from_index(i).index() == i
    assert [s.index() for s in CardSuit] == list(range(NUM_SUITS))


@pytest.mark.parametrize("bad", [-1, 4])
def test_suit_from_invalid_index_raises(bad):
    with pytest.raises(ValueError):
        CardSuit.from_index(bad)


def test_card_string_format():
    assert str(Card(CardSuit.SPADES, CardValue.ACE)) == "A:S"
    assert str(Card(CardSuit.DIAMONDS, CardValue.TEN)) == "10:D"
    assert str(Card(CardSuit.HEARTS, CardValue.KING)) == "K:H"


def test_cards_are_equal_by_value():
    assert Card(CardSuit.CLUBS, CardValue.FIVE) == Card(CardSuit.CLUBS, CardValue.FIVE)
    assert Card(CardSuit.CLUBS, CardValue.FIVE) != Card(CardSuit.HEARTS, CardValue.FIVE)


def test_cardset_add_contains_remove():
    card = Card(CardSuit.HEARTS, CardValue.SEVEN)
    cards = CardSet()
    assert card not in cards
    cards.add(card)
    assert card in cards
    assert len(cards) == 1
    cards.remove(card)
    assert card not in cards
    assert len(cards) == 0


def test_cardset_add_duplicate_raises():
    card = Card(CardSuit.SPADES, CardValue.ACE)
    cards = CardSet([card])
    with pytest.raises(ValueError, match="already contains"):
        cards.add(card)


def test_cardset_remove_missing_raises():
    with pytest.raises(ValueError, match="without it"):
        CardSet().remove(Card(CardSuit.SPADES, CardValue.ACE))


def test_cardset_constructor_rejects_duplicates():
    card = Card(CardSuit.CLUBS, CardValue.TWO)
    with pytest.raises(ValueError):
        CardSet([card, card])


def test_ordered_list_sorts_by_suit_then_value():
    given = [
        Card(CardSuit.DIAMONDS, CardValue.ACE),
        Card(CardSuit.SPADES, CardValue.KING),
        Card(CardSuit.HEARTS, CardValue.TWO),
        Card(CardSuit.SPADES, CardValue.ACE),
    ]
    ordered = CardSet(given).as_ordered_list()
    assert ordered == [
        Card(CardSuit.SPADES, CardValue.ACE),
        Card(CardSuit.SPADES, CardValue.KING),
        Card(CardSuit.HEARTS, CardValue.TWO),
        Card(CardSuit.DIAMONDS, CardValue.ACE),
    ]
    assert list(CardSet(given)) == ordered


def test_full_deck_has_all_cards():
    deck = CardSet(Card(s, v) for s in CardSuit for v in CardValue)
    assert len(deck) == NUM_POSSIBLE_CARDS
    keys = [(c.suit.index(), c.value.index()) for c in deck]
    assert keys == sorted(keys)


def test_cardset_string_format():
    cards = CardSet(
        [Card(CardSuit.HEARTS, CardValue.TEN), Card(CardSuit.SPADES, CardValue.ACE)]
    )
    assert str(cards) == '["A:S", "10:H"]'
    assert str(CardSet()) == "[]"


def test_copy_is_independent():
    card = Card(CardSuit.CLUBS, CardValue.JACK)
    original = CardSet([card])
    duplicate = original.copy()
    assert duplicate == original
    duplicate.remove(card)
    assert card in original
    assert card not in duplicate
    assert duplicate != original