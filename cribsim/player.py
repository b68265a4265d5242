"""A cribbage player: dealt cards, chosen split, score and strategies."""

from __future__ import annotations

from typing import Sequence

from .cards import Card, HandSplit
from .evaluators import HandEvaluator, PeggingEvaluator

WINNING_SCORE = 121


class Player:
    """Holds a player's cards and score and defers decisions to its strategies."""

    def __init__(
        self,
        hand_strategy: HandEvaluator | None = None,
        pegging_strategy: PeggingEvaluator | None = None,
    ) -> None:
        self.hand_strategy = hand_strategy
        self.pegging_strategy = pegging_strategy
        self.score = 0
        self.dealt_cards: list[Card] = []
        self._split = HandSplit((), ())

    def reset(self) -> None:
        """Clear the dealt cards and the score."""
        self.dealt_cards.clear()
        self.score = 0

    def evaluate_hand(self) -> HandSplit:
        """Let the hand strategy split the dealt cards into kept and crib cards."""
        if self.hand_strategy is None:
            raise RuntimeError("player has no hand strategy")
        self._split = self.hand_strategy.evaluate_hand(list(self.dealt_cards))
        return self._split

    def evaluate_pegging(
        self,
        current_hand: Sequence[Card],
        current_score: int,
        played_cards: Sequence[Card],
    ) -> Card | None:
        """Let the pegging strategy pick a card, or None when none can be played."""
        if self.pegging_strategy is None:
            raise RuntimeError("player has no pegging strategy")
        return self.pegging_strategy.evaluate_pegging(
            list(current_hand), current_score, list(played_cards)
        )

    def deal_card(self, card: Card) -> None:
        """Add a dealt card to the player's cards."""
        self.dealt_cards.append(card)

    def add_score(self, points: int) -> None:
        """Add points to the player's score."""
        self.score += points

    @property
    def hand(self) -> tuple[Card, ...]:
        """The cards kept after the last hand evaluation."""
        return self._split.kept

    @property
    def crib(self) -> tuple[Card, ...]:
        """The cards given to the crib after the last hand evaluation."""
        return self._split.crib

    def has_won(self) -> bool:
        """True once the score has reached 121."""
        return self.score >= WINNING_SCORE