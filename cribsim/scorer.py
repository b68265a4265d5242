"""Scoring of cribbage hands."""

from __future__ import annotations

from itertools import combinations, pairwise
from typing import Iterable, Sequence

from .cards import JACK, Card


def sort_by_rank(hand: Iterable[Card]) -> list[Card]:
    """Return the cards ordered by rank, lowest first."""
    return sorted(hand, key=lambda card: card.rank)


def all_same_suit(hand: Iterable[Card]) -> bool:
    """True when the hand holds cards of one suit only."""
    return len({card.suit for card in hand}) == 1


def _is_run(cards: Sequence[Card]) -> bool:
    return all(b.rank == a.rank + 1 for a, b in pairwise(cards))


def _score_groups(hand: Sequence[Card], size: int, run_points: int) -> int:
    score = 0
    for group in combinations(hand, size):
        if sum(card.value for card in group) == 15:
            score += 2
        if _is_run(group):
            score += run_points
    return score


def score_sets_of_two(hand: Sequence[Card]) -> int:
    """Two points for each pair of equal rank and each pair making fifteen."""
    return sum(
        2
        for a, b in combinations(hand, 2)
        if a.rank == b.rank or a.value + b.value == 15
    )


def score_sets_of_three(hand: Sequence[Card]) -> int:
    """Fifteens and runs among groups of three cards of a rank-sorted hand."""
    return _score_groups(hand, 3, 3)


def score_sets_of_four(hand: Sequence[Card]) -> int:
    """Fifteens and runs among groups of four cards of a rank-sorted hand."""
    return _score_groups(hand, 4, 4)


def score_sets_of_five(hand: Sequence[Card]) -> int:
    """Fifteen and run made by the first five cards of a rank-sorted hand."""
    if len(hand) < 5:
        raise ValueError("at least five cards are needed")
    five = hand[:5]
    score = 0
    if sum(card.value for card in five) == 15:
        score += 2
    if _is_run(five):
        score += 5
    return score


def score_hand(
    hand: Iterable[Card],
    cut_card: Card,
    full_score: bool = True,
    is_crib: bool = False,
) -> int:
    """Score a hand, with the cut card when full_score is set, without it otherwise."""
    cards = list(hand)
    score = 0
    if full_score:
        score += sum(
            1 for card in cards if card.rank == JACK and card.suit == cut_card.suit
        )
        combined = [*cards, cut_card]
        if all_same_suit(combined):
            score += 5
        elif all_same_suit(cards) and not is_crib:
            score += 4
    else:
        if all_same_suit(cards):
            score += 4
        combined = cards
    combined = sort_by_rank(combined)

    score += score_sets_of_two(combined)
    score += score_sets_of_three(combined)
    score += score_sets_of_four(combined)
    if full_score:
        score += score_sets_of_five(combined)
    return score