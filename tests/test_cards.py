import random

import pytest

from cribsim.cards import Card, Deck, HandSplit, Suit


def _seeded_deck(seed=1):
    return Deck(random.Random(seed))


def test_new_deck_starts_with_ace_of_hearts():
    deck = _seeded_deck()
    assert deck.draw_from_top() == Card(Suit.HEARTS, 1, 1)


def test_new_deck_holds_every_card_once():
    deck = _seeded_deck()
    cards = list(deck)
    assert len(cards) == len(deck)
    assert len(set(cards)) == len(cards)
    assert {(c.suit, c.rank) for c in cards} == {
        (suit, rank) for suit in Suit for rank in range(1, 14)
    }


def test_card_values_cap_at_ten():
    for card in _seeded_deck():
        assert card.value == min(card.rank, 10)


def test_draw_reduces_remaining_cards():
    deck = _seeded_deck()
    before = len(deck)
    drawn = deck.draw_from_top()
    assert len(deck) == before - 1
    assert drawn not in list(deck)


def test_drawing_past_the_end_raises():
    deck = _seeded_deck()
    for _ in range(len(deck)):
        deck.draw_from_top()
    assert len(deck) == 0
    with pytest.raises(IndexError):
        deck.draw_from_top()
    with pytest.raises(IndexError):
        deck.draw_for_cut()


def test_cut_comes_from_undealt_cards_and_leaves_them():
    deck = _seeded_deck(7)
    deck.shuffle()
    while len(deck) > 2:
        deck.draw_from_top()
    remaining = list(deck)
    for _ in range(20):
        assert deck.draw_for_cut() in remaining
    assert list(deck) == remaining


def test_shuffle_keeps_cards_and_resets_top():
    deck = _seeded_deck(3)
    original = set(deck)
    deck.draw_from_top()
    deck.draw_from_top()
    deck.shuffle()
    assert len(deck) == len(original)
    assert set(deck) == original


def test_shuffle_is_reproducible_with_seed():
    first = _seeded_deck(42)
    second = _seeded_deck(42)
    first.shuffle()
    second.shuffle()
    assert list(first) == list(second)


def test_shuffle_changes_order():
    unshuffled = list(_seeded_deck(5))
    deck = _seeded_deck(5)
    deck.shuffle()
    assert list(deck) != unshuffled
    assert sorted(deck, key=lambda c: (c.suit, c.rank)) == unshuffled


def test_card_str_format():
    assert str(Card(Suit.SPADES, 11, 10)) == "Suit: 2  Rank: 11"


def test_hand_split_str_lists_ranks():
    split = HandSplit(
        kept=(
            Card(Suit.HEARTS, 1, 1),
            Card(Suit.HEARTS, 2, 2),
            Card(Suit.CLUBS, 12, 10),
            Card(Suit.DIAMONDS, 5, 5),
        ),
        crib=(Card(Suit.SPADES, 9, 9), Card(Suit.SPADES, 13, 10)),
    )
    assert str(split) == "Kept: 1 2 12 5\nCrib: 9 13"