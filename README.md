# rummysim

rummysim lists every play a rummy player could make. It takes three inputs:

- the cards in the player's hand,
- the discard pile, in order from bottom to top,
- the cards already on the table. Cards laid down in straight flushes are
  kept separate from cards laid down in sets of one value.

It finds three kinds of play:

- **Multiples.** These are sets of three or four cards of one value. When
  four cards of a value are available, it lists each set of three and the set
  of four. A single card is also a play when its value is already on the
  table as a multiple.
- **Straight-flush extensions.** These are one card, or two cards in a row,
  played onto the end of a run that is already on the table.
- **Standalone straight flushes.** These are runs of three or more cards in
  one suit. An ace can be low (A-2-3) or high (Q-K-A).

Each play lists the cards it uses. It also lists the cards the player must
pick up from the discard pile. Taking a card from the pile also takes every
card above it.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `rummysim` command has three built-in example positions, numbered 1 to 3.
It prints `PLAYS:` and then one line for each play found in the chosen
position:

```
rummysim        # position 3
rummysim 1
```

Each line has the form `(kind, cards used, cards acquired)`. For example:

```
(StraightFlush { ace_status: Some(Low) }, ["A:S", "2:S", "3:S"], [])
```

The command reads no hands from files or from input. It only runs the
built-in positions.

## Library use

```python
from rummysim.card import Card, CardSet, CardSuit, CardValue
from rummysim.score import PlayedCards, all_possible_plays

hand = CardSet([
    Card(CardSuit.HEARTS, CardValue.ACE),
    Card(CardSuit.HEARTS, CardValue.TWO),
    Card(CardSuit.HEARTS, CardValue.THREE),
])
discard_pile = [Card(CardSuit.CLUBS, CardValue.SEVEN)]
played = PlayedCards()  # nothing on the table yet

for play in all_possible_plays(hand, discard_pile, played):
    print(play.kind, play.cards_used, play.cards_acquired)
```

This prints:

```
StraightFlush { ace_status: Some(Low) } ["A:H", "2:H", "3:H"] []
```

### `rummysim.card`

- `CardValue` lists the values from `ACE` to `KING`. `index()` numbers them
  from 0 (ace) to 12 (king). `from_index(i)` does the reverse. `next()` and
  `prev()` wrap around between king and ace.
- `CardSuit` lists the suits `SPADES`, `HEARTS`, `CLUBS` and `DIAMONDS`,
  numbered 0 to 3. It also has `index()` and `from_index(i)`.
- `Card(suit, value)` is a frozen dataclass. Its string form is `value:suit`,
  for example `10:H` or `K:S`.
- `CardSet` holds distinct cards and works like a small set. It supports
  `in`, `len`, `==`, `add`, `remove` and `copy`. Iteration and
  `as_ordered_list()` give the cards by suit, then by value. Adding a card the
  set already holds raises `ValueError`. So does removing a card it does not
  hold.

An index out of range given to `from_index` raises `ValueError`.

### `rummysim.score`

- `all_possible_plays(hand, discard_pile, played_cards)` returns a list of
  `Play`. It lists multiples first, then extensions, then standalone runs.
- `Play` has `kind`, `cards_used` and `cards_acquired`.
  `Play.make(cards_used, kind, discard_pile)` works out the cards acquired.
- `PlayKind` is either `PlayKind.multiple()` or
  `PlayKind.straight_flush(ace_status)`. `ace_status` is an `AceStatus`
  (`HIGH` or `LOW`) when the play contains an ace, and otherwise `None`.
- `PlayedCards(straight_flush_played, multiple_played)` describes the table.
  Both fields default to empty sets.
  `value_was_played_as_multiple(value)` raises `ValueError` when one or two
  cards of a value are on the table as multiples, because no legal game can
  reach that state.
- `PlayMetadata(player_index)` records which player makes a play.

### `rummysim.cli`

- `make_cards(pairs)` builds a list of cards from `(value_index, suit)` pairs.
- `format_play(play)` renders a play as a line of command output.
- `scenario(number)` returns the hand, discard pile and `PlayedCards` of a
  built-in position.
- `main(argv=None)` runs the command.

## What it does not do

rummysim only lists the plays that are available. It does not deal cards or
run turns between players. It does not choose a play, and it does not count
points.