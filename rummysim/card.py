"""Playing cards and sets of cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

NUM_CARD_VALUES = 13
NUM_SUITS = 4
NUM_POSSIBLE_CARDS = NUM_CARD_VALUES * NUM_SUITS


class CardValue(Enum):
    """Card rank; the enum value is its index, with the ace lowest."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    def index(self) -> int:
        """Return the index of this value: ace is 0, king is 12."""
        return self.value

    @classmethod
    def from_index(cls, i: int) -> CardValue:
        """Return the value with index ``i``."""
        try:
            return cls(i)
        except ValueError:
            raise ValueError(f"Invalid index for card value: {i}") from None

    def next(self) -> CardValue:
        """Return the following value, wrapping from king to ace."""
        return CardValue.from_index((self.value + 1) % NUM_CARD_VALUES)

    def prev(self) -> CardValue:
        """Return the preceding value, wrapping from ace to king."""
        return CardValue.from_index((self.value - 1) % NUM_CARD_VALUES)

    @property
    def symbol(self) -> str:
        return _VALUE_SYMBOLS[self]


class CardSuit(Enum):
    """Card suit; the enum value is its index."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    def index(self) -> int:
        """Return the index of this suit."""
        return self.value

    @classmethod
    def from_index(cls, i: int) -> CardSuit:
        """Return the suit with index ``i``."""
        try:
            return cls(i)
        except ValueError:
            raise ValueError(f"Invalid index for card suit: {i}") from None

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_VALUE_SYMBOLS = {
    CardValue.ACE: "A",
    CardValue.TWO: "2",
    CardValue.THREE: "3",
    CardValue.FOUR: "4",
    CardValue.FIVE: "5",
    CardValue.SIX: "6",
    CardValue.SEVEN: "7",
    CardValue.EIGHT: "8",
    CardValue.NINE: "9",
    CardValue.TEN: "10",
    CardValue.JACK: "J",
    CardValue.QUEEN: "Q",
    CardValue.KING: "K",
}

_SUIT_SYMBOLS = {
    CardSuit.SPADES: "S",
    CardSuit.HEARTS: "H",
    CardSuit.CLUBS: "C",
    CardSuit.DIAMONDS: "D",
}


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: CardSuit
    value: CardValue

    def __str__(self) -> str:
        return f"{self.value.symbol}:{self.suit.symbol}"

    def _sort_key(self) -> tuple[int, int]:
        return (self.suit.index(), self.value.index())


class CardSet:
    """A set of distinct cards, iterated by suit and then by value."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self._cards: set[Card] = set()
        for card in cards or ():
            self.add(card)

    def add(self, card: Card) -> None:
        """Add ``card``; it must not already be in the set."""
        if card in self._cards:
            raise ValueError(
                f"Adding card {card} to set that already contains it: {self}"
            )
        self._cards.add(card)

    def remove(self, card: Card) -> None:
        """Remove ``card``; it must be in the set."""
        if card not in self._cards:
            raise ValueError(f"Removing card {card} from a set without it: {self}")
        self._cards.remove(card)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self.as_ordered_list())

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSet):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> CardSet:
        """Return an independent copy of this set."""
        return CardSet(self._cards)

    def as_ordered_list(self) -> list[Card]:
        """Return the cards ordered by suit, then by value."""
        return sorted(self._cards, key=Card._sort_key)

    def __str__(self) -> str:
        return "[" + ", ".join(f'"{card}"' for card in self.as_ordered_list()) + "]"

    def __repr__(self) -> str:
        return f"CardSet({self})"