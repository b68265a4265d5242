"""A two-player cribbage game: dealing, the cut and pegging."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

from .cards import JACK, Card, Deck
from .evaluators import (
    HandEvaluator,
    PeggingEvaluator,
    RandomHandEvaluator,
    RandomPeggingEvaluator,
)
from .player import Player
from .scorer import sort_by_rank

CARDS_DEALT = 6
HEELS_POINTS = 2
GO_POINTS = 1


class PlayerId(IntEnum):
    """Identifies one of the two players."""

    PLAYER1 = 1
    PLAYER2 = 2


@dataclass
class _PeggingSeat:
    player: Player
    hand: list[Card]
    done: bool = field(default=False)


def remove_card_from_hand(hand: Iterable[Card], selected: Card) -> list[Card]:
    """Return the hand without any card of the selected suit and rank."""
    return [
        card
        for card in hand
        if not (card.suit == selected.suit and card.rank == selected.rank)
    ]


class Game:
    """Sets up rounds, keeps track of the crib and runs the simulation."""

    def __init__(
        self,
        p1_hand: HandEvaluator | None = None,
        p2_hand: HandEvaluator | None = None,
        p1_peg: PeggingEvaluator | None = None,
        p2_peg: PeggingEvaluator | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.deck = Deck(rng)
        self.p1 = Player(p1_hand, p1_peg)
        self.p2 = Player(p2_hand, p2_peg)
        self.winner: PlayerId | None = None
        self.current_crib: PlayerId | None = None
        self.crib: list[Card] = []
        self.cut_card: Card | None = None

    def _player(self, player_id: PlayerId) -> Player:
        return self.p1 if player_id is PlayerId.PLAYER1 else self.p2

    def reset_game(self) -> None:
        """Reset both players and cut for the first crib; the lower card takes it."""
        self.winner = None
        self.p1.reset()
        self.p2.reset()
        self.deck.shuffle()
        while True:
            p1_card = self.deck.draw_for_cut()
            p2_card = self.deck.draw_for_cut()
            if p1_card.value < p2_card.value:
                self.current_crib = PlayerId.PLAYER1
                return
            if p1_card.value > p2_card.value:
                self.current_crib = PlayerId.PLAYER2
                return
            self.deck.shuffle()

    def initialize_round(self) -> None:
        """Deal six cards each, collect the crib and cut the starter card."""
        if self.current_crib is None:
            raise RuntimeError("the game has not been reset")
        self.deck.shuffle()
        for _ in range(CARDS_DEALT):
            self.p1.deal_card(self.deck.draw_from_top())
            self.p2.deal_card(self.deck.draw_from_top())
        self.p1.evaluate_hand()
        self.p2.evaluate_hand()
        self.crib = sort_by_rank([*self.p1.crib[:2], *self.p2.crib[:2]])

        self.cut_card = self.deck.draw_for_cut()
        if self.cut_card.rank == JACK:
            self._player(self.current_crib).add_score(HEELS_POINTS)
            self.win_check()

    def run_pegging(self) -> None:
        """Play out the pegging phase until both players have played every card."""
        if self.current_crib is None:
            raise RuntimeError("the game has not been reset")
        played: list[Card] = []
        count = 0
        seat1 = _PeggingSeat(self.p1, list(self.p1.hand))
        seat2 = _PeggingSeat(self.p2, list(self.p2.hand))
        if self.current_crib is PlayerId.PLAYER1:
            current, other = seat2, seat1
        else:
            current, other = seat1, seat2

        while seat1.hand or seat2.hand:
            chosen = current.player.evaluate_pegging(current.hand, count, played)
            if chosen is None:
                if not other.done:
                    other.player.add_score(GO_POINTS)
                    self.win_check()
                    if self.winner is not None:
                        break
                current.done = True
            else:
                played.append(chosen)
                count += chosen.value
                current.hand = remove_card_from_hand(current.hand, chosen)
                if not current.hand:
                    current.done = True

            if not other.done:
                current, other = other, current
            if current.done and other.done:
                count = 0
                current, other = other, current
                played.clear()
                current.done = False
                other.done = False

    def win_check(self) -> None:
        """Record the winner once a player has reached 121."""
        if self.p1.has_won():
            self.winner = PlayerId.PLAYER1
        elif self.p2.has_won():
            self.winner = PlayerId.PLAYER2


def main(argv: list[str] | None = None) -> int:
    """Play one round between two random players."""
    parser = argparse.ArgumentParser(description="Simulate a round of cribbage.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    game = Game(
        RandomHandEvaluator(rng),
        RandomHandEvaluator(rng),
        RandomPeggingEvaluator(rng),
        RandomPeggingEvaluator(rng),
        rng,
    )
    game.reset_game()
    game.initialize_round()
    game.run_pegging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())