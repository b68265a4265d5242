"""Strategies for choosing the crib discard and the card to peg."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from itertools import combinations
from typing import Iterable, Sequence

from .cards import Card, HandSplit

DEALT_CARDS = 6
KEPT_CARDS = 4
PEGGING_LIMIT = 31


def all_possibilities(dealt_cards: Sequence[Card]) -> list[HandSplit]:
    """Every way of keeping four of six dealt cards, the other two going to the crib."""
    cards = list(dealt_cards)
    if len(cards) != DEALT_CARDS:
        raise ValueError(f"expected {DEALT_CARDS} dealt cards, got {len(cards)}")
    splits = []
    for kept_positions in combinations(range(DEALT_CARDS), KEPT_CARDS):
        kept = tuple(cards[i] for i in kept_positions)
        crib = tuple(c for i, c in enumerate(cards) if i not in kept_positions)
        splits.append(HandSplit(kept, crib))
    return splits


def valid_cards(hand: Iterable[Card], round_score: int) -> list[Card]:
    """Cards that can be played without taking the count past 31."""
    return [card for card in hand if card.value + round_score <= PEGGING_LIMIT]


class HandEvaluator(ABC):
    """Chooses which cards of a dealt hand to keep."""

    @abstractmethod
    def evaluate_hand(self, dealt_cards: Sequence[Card]) -> HandSplit:
        """Return the chosen split of the dealt cards."""


class RandomHandEvaluator(HandEvaluator):
    """Picks a split at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def evaluate_hand(self, dealt_cards: Sequence[Card]) -> HandSplit:
        splits = all_possibilities(dealt_cards)
        # The pick ranges over as many splits as there are dealt cards.
        return splits[self._rng.randint(0, len(dealt_cards) - 1)]


class PeggingEvaluator(ABC):
    """Chooses which card to play during pegging."""

    @abstractmethod
    def evaluate_pegging(
        self, hand: Sequence[Card], round_score: int, played_cards: Sequence[Card]
    ) -> Card | None:
        """Return the card to play, or None when no card can be played."""


class RandomPeggingEvaluator(PeggingEvaluator):
    """Plays a random card among those that keep the count within 31."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def evaluate_pegging(
        self, hand: Sequence[Card], round_score: int, played_cards: Sequence[Card]
    ) -> Card | None:
        playable = valid_cards(hand, round_score)
        if not playable:
            return None
        return self._rng.choice(playable)