# cribsim

cribsim is a small cribbage simulator. It deals six cards to each of two players. Each player keeps four cards and discards two to the crib. A starter card is cut, and then the pegging phase is played out. How a player splits its hand and how it chooses a card to peg are strategies that you can plug in.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
cribsim
cribsim --seed 7
```

The command plays one round between two random players. It resets the game, cuts for the first crib, deals, builds the crib, cuts the starter and runs the pegging phase. `--seed` fixes the random generator so that a run can be repeated. The command prints nothing and exits with status 0.

## Library use

```python
import random

from cribsim.cards import Card, Suit
from cribsim.evaluators import RandomHandEvaluator, RandomPeggingEvaluator
from cribsim.game import Game
from cribsim.scorer import score_hand

rng = random.Random(7)
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
print(game.current_crib, game.cut_card, game.p1.score, game.p2.score)

hand = [Card(Suit.HEARTS, 5, 5), Card(Suit.SPADES, 5, 5),
        Card(Suit.CLUBS, 5, 5), Card(Suit.HEARTS, 11, 10)]
cut = Card(Suit.DIAMONDS, 5, 5)
print(score_hand(hand, cut, True, False))
```

### Modules

- `cribsim.cards` defines the following:
  - `Suit` is an `IntEnum` with the members `HEARTS`, `DIAMONDS`, `SPADES` and `CLUBS`.
  - `Card` is a frozen dataclass with the fields `suit`, `rank` (1–13) and `value` (1–10).
  - `HandSplit` holds the `kept` cards and the `crib` cards.
  - `GameData` is a set of counters for statistics.
  - `Deck` is a 52-card deck. `shuffle()` puts every card back into play. `draw_from_top()` deals a card. `draw_for_cut()` picks a random undealt card without removing it. `len()` and iteration cover the undealt cards. Drawing from an empty deck raises `IndexError`.
- `cribsim.scorer` scores hands. `score_hand(hand, cut_card, full_score=True, is_crib=False)` counts the following:
  - fifteens;
  - pairs;
  - runs of three, four and five cards;
  - a flush of four or five cards, where a four-card flush does not count in the crib;
  - one point for the jack of the cut card's suit.

  When `full_score` is false, the cut card is left out. The helpers are `all_same_suit`, `score_sets_of_two`, `score_sets_of_three`, `score_sets_of_four`, `score_sets_of_five` and `sort_by_rank`.
- `cribsim.evaluators` contains the following:
  - `all_possibilities(dealt_cards)` returns the 15 ways of keeping four of six cards. It raises `ValueError` when it is not given exactly six cards.
  - `valid_cards(hand, round_score)` returns the cards that keep the count at 31 or below.
  - `HandEvaluator` and `PeggingEvaluator` are the abstract strategy bases.
  - `RandomHandEvaluator` picks one of the first six splits that `all_possibilities` lists.
  - `RandomPeggingEvaluator` plays a random valid card, or returns `None` when no card is valid.
- `cribsim.player` contains `Player`. It holds the dealt cards, the `score` and the two strategies. It also exposes the kept `hand` and the `crib` cards from the last evaluation. `has_won()` is true at 121 points or more.
- `cribsim.game` contains `Game`, `PlayerId`, `remove_card_from_hand` and `main`. In a `Game`, the following rules apply:
  - `reset_game()` gives the first crib to the player who cuts the lower card. On a tie it shuffles and cuts again.
  - `initialize_round()` gives two points to the crib's owner when the starter is a jack.
  - `run_pegging()` plays until both hands are empty. A player who cannot play gives the opponent one point for a go. The count resets once neither player can go on.
  - `winner` is set as soon as a player reaches 121.

### Writing a strategy

To write a hand strategy, subclass `HandEvaluator` and implement `evaluate_hand(dealt_cards)`. It must return a `HandSplit`, and it may choose among the splits that `all_possibilities` produces.

To write a pegging strategy, subclass `PeggingEvaluator` and implement `evaluate_pegging(hand, round_score, played_cards)`. It returns the card to play. It returns `None` when no card can be played, and the opponent is then given a go.

## What it does not do

cribsim plays a single round. It is not a full game that runs until 121.

- Pegging scores only goes. Pairs, runs, fifteens and thirty-ones made during play earn no points.
- At the end of the round, the hands and the crib are not scored. `score_hand` is there for strategies or callers to use.
- Nothing in the package fills in `GameData`.
- Nothing is printed or stored.