import random

import pytest

from cribsim.cards import JACK, Card, Suit
from cribsim.evaluators import RandomHandEvaluator, RandomPeggingEvaluator
from cribsim.game import Game, PlayerId, main, remove_card_from_hand


class RecordingPegging(RandomPeggingEvaluator):
    def __init__(self, rng, log):
        super().__init__(rng)
        self.log = log

    def evaluate_pegging(self, hand, round_score, played_cards):
        card = super().evaluate_pegging(hand, round_score, played_cards)
        if card is not None:
            self.log.append((round_score, card))
        return card


def _game(seed, log=None):
    rng = random.Random(seed)
    if log is None:
        peg1, peg2 = RandomPeggingEvaluator(rng), RandomPeggingEvaluator(rng)
    else:
        peg1, peg2 = RecordingPegging(rng, log), RecordingPegging(rng, log)
    return Game(RandomHandEvaluator(rng), RandomHandEvaluator(rng), peg1, peg2, rng)


def test_remove_card_from_hand_matches_suit_and_rank():
    hand = [Card(Suit.HEARTS, 5, 5), Card(Suit.CLUBS, 5, 5), Card(Suit.HEARTS, 9, 9)]
    result = remove_card_from_hand(hand, Card(Suit.HEARTS, 5, 5))
    assert result == [Card(Suit.CLUBS, 5, 5), Card(Suit.HEARTS, 9, 9)]


def test_remove_card_missing_leaves_hand_alone():
    hand = [Card(Suit.SPADES, 2, 2)]
    assert remove_card_from_hand(hand, Card(Suit.SPADES, 3, 3)) == hand


def test_win_check_prefers_player_one_when_both_reach_target():
    game = _game(2)
    game.reset_game()
    game.p1.add_score(121)
    game.p2.add_score(130)
    game.win_check()
    assert game.winner is PlayerId.PLAYER1
    assert game.winner == 1


@pytest.mark.parametrize("seed", range(5))
def test_reset_game_chooses_crib_and_clears_scores(seed):
    game = _game(seed)
    game.p1.add_score(50)
    game.reset_game()
    assert game.current_crib in (PlayerId.PLAYER1, PlayerId.PLAYER2)
    assert game.winner is None
    assert game.p1.score == 0


def test_round_requires_reset():
    game = _game(0)
    with pytest.raises(RuntimeError):
        game.initialize_round()
    with pytest.raises(RuntimeError):
        game.run_pegging()


@pytest.mark.parametrize("seed", range(10))
def test_initialize_round_deals_distinct_cards(seed):
    game = _game(seed)
    game.reset_game()
    game.initialize_round()
    assert len(game.p1.hand) == 4
    assert len(game.p2.hand) == 4
    assert len(game.crib) == 4
    assert [c.rank for c in game.crib] == sorted(c.rank for c in game.crib)
    everything = [*game.p1.hand, *game.p2.hand, *game.crib]
    assert len(set(everything)) == 12
    assert game.cut_card not in everything


@pytest.mark.parametrize("seed", range(20))
def test_heels_scores_for_crib_owner(seed):
    game = _game(seed)
    game.reset_game()
    game.initialize_round()
    owner = game.p1 if game.current_crib is PlayerId.PLAYER1 else game.p2
    other = game.p2 if owner is game.p1 else game.p1
    assert owner.score == (2 if game.cut_card.rank == JACK else 0)
    assert other.score == 0


def test_win_check_sets_winner():
    game = _game(1)
    game.reset_game()
    game.win_check()
    assert game.winner is None
    game.p2.add_score(121)
    game.win_check()
    assert game.winner is PlayerId.PLAYER2


def test_main_runs_a_round():
    assert main(["--seed", "3"]) == 0