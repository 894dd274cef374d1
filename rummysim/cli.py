"""Command line that lists the plays available in sample game positions."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

from rummysim.card import Card, CardSet, CardSuit, CardValue
from rummysim.score import Play, PlayedCards, all_possible_plays

S = CardSuit.SPADES
H = CardSuit.HEARTS
C = CardSuit.CLUBS
D = CardSuit.DIAMONDS


def make_cards(pairs: Iterable[tuple[int, CardSuit]]) -> list[Card]:
    """Build cards from ``(value index, suit)`` pairs."""
    return [Card(suit=suit, value=CardValue.from_index(index)) for index, suit in pairs]


def format_play(play: Play) -> str:
    """Render a play as ``(kind, cards used, cards acquired)``."""
    return f"({play.kind}, {play.cards_used}, {play.cards_acquired})"


def scenario(number: int) -> tuple[CardSet, list[Card], PlayedCards]:
    """Return the hand, discard pile and table of a sample position."""
    if number == 1:
        hand = CardSet(
            make_cards(
                [(1, C), (2, C), (1, S), (1, D), (0, D), (0, C), (5, H), (12, H), (12, D)]
            )
        )
        discard = make_cards([(12, S), (6, C), (10, H), (0, S), (12, C), (4, S)])
        played = PlayedCards(
            multiple_played=CardSet(
                make_cards([(5, C), (5, S), (5, D), (10, C), (10, S), (10, D)])
            ),
        )
        return hand, discard, played
    if number == 2:
        hand = CardSet(
            make_cards(
                [
                    (2, S),
                    (10, S),
                    (0, H),
                    (1, H),
                    (2, H),
                    (5, C),
                    (4, C),
                    (9, C),
                    (4, D),
                    (5, D),
                    (6, D),
                    (7, D),
                ]
            )
        )
        played = PlayedCards(
            straight_flush_played=CardSet(
                make_cards(
                    [
                        (11, S),
                        (12, S),
                        (0, S),
                        (6, C),
                        (7, C),
                        (8, C),
                        (10, C),
                        (11, C),
                        (12, C),
                        (1, D),
                        (2, D),
                        (3, D),
                    ]
                )
            ),
        )
        return hand, [], played
    if number == 3:
        hand = CardSet(
            make_cards(
                [
                    (0, H),
                    (0, D),
                    (0, S),
                    (1, S),
                    (2, S),
                    (3, S),
                    (4, S),
                    (8, S),
                    (9, S),
                    (10, S),
                    (11, S),
                    (12, S),
                ]
            )
        )
        discard = make_cards([(6, C)])
        played = PlayedCards(
            straight_flush_played=CardSet(
                make_cards(
                    [
                        (3, C),
                        (4, C),
                        (5, C),
                        (7, C),
                        (8, C),
                        (9, C),
                        (9, H),
                        (10, H),
                        (11, H),
                        (12, H),
                        (1, D),
                        (2, D),
                        (3, D),
                        (5, S),
                        (6, S),
                        (7, S),
                    ]
                )
            ),
        )
        return hand, discard, played
    raise ValueError(f"Unknown scenario: {number}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print every play available in the chosen sample position."""
    parser = argparse.ArgumentParser(
        prog="rummysim", description="List the plays available in a sample position."
    )
    parser.add_argument(
        "scenario",
        type=int,
        nargs="?",
        default=3,
        choices=(1, 2, 3),
        help="sample position to analyse (default: 3)",
    )
    args = parser.parse_args(argv)

    hand, discard, played = scenario(args.scenario)
    print("PLAYS:")
    for play in all_possible_plays(hand, discard, played):
        print(format_play(play))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())