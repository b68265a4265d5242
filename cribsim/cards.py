"""Playing cards, hand splits, run statistics and the shuffled deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

JACK = 11
QUEEN = 12
KING = 13
DECK_SIZE = 52


class Suit(IntEnum):
    """The four suits of a standard deck."""

    HEARTS = 0
    DIAMONDS = 1
    SPADES = 2
    CLUBS = 3


@dataclass(frozen=True)
class Card:
    """A card: its suit, its rank (1-13) and its counting value (1-10)."""

    suit: Suit
    rank: int
    value: int

    def __str__(self) -> str:
        return f"Suit: {int(self.suit)}  Rank: {self.rank}"


@dataclass(frozen=True)
class HandSplit:
    """One way of dividing a dealt hand into kept cards and crib cards."""

    kept: tuple[Card, ...]
    crib: tuple[Card, ...]

    def __str__(self) -> str:
        kept = " ".join(str(card.rank) for card in self.kept)
        crib = " ".join(str(card.rank) for card in self.crib)
        return f"Kept: {kept}\nCrib: {crib}"


@dataclass
class GameData:
    """Counters gathered over a series of simulated games."""

    p1_wins: int = 0
    p2_wins: int = 0
    total_first_deal_wins: int = 0
    total_games: int = 0
    total_hand_points: int = 0
    total_hands: int = 0
    total_crib_points: int = 0
    total_cribs: int = 0


class Deck:
    """A 52-card deck dealt from the top, with a cut taken from the undealt cards."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [
            Card(suit, rank, min(rank, 10)) for suit in Suit for rank in range(1, 14)
        ]
        self._top = 0

    def shuffle(self) -> None:
        """Shuffle the whole deck and put every card back in play."""
        self._top = 0
        cards = self._cards
        for i in range(len(cards) - 1, 1, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

    def draw_from_top(self) -> Card:
        """Deal the top card."""
        if self._top >= len(self._cards):
            raise IndexError("no cards left in the deck")
        card = self._cards[self._top]
        self._top += 1
        return card

    def draw_for_cut(self) -> Card:
        """Pick a card uniformly from the undealt cards without removing it."""
        if self._top >= len(self._cards):
            raise IndexError("no cards left to cut")
        return self._cards[self._rng.randint(self._top, len(self._cards) - 1)]

    def __iter__(self) -> Iterator[Card]:
        """Iterate over the undealt cards, top first."""
        return iter(self._cards[self._top:])

    def __len__(self) -> int:
        """Number of undealt cards."""
        return len(self._cards) - self._top