"""Enumeration of the plays a hand can make against the cards on the table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from rummysim.card import Card, CardSet, CardSuit, CardValue

_LOW_ACE_INDEX = 0
_HIGH_ACE_INDEX = 13


class AceStatus(Enum):
    """Whether an ace in a straight flush counts below the two or above the king."""

    HIGH = "High"
    LOW = "Low"


@dataclass(frozen=True)
class PlayKind:
    """The kind of a play: a straight flush (with its ace status) or a multiple."""

    is_straight_flush: bool
    ace_status: AceStatus | None = None

    def __post_init__(self) -> None:
        if not self.is_straight_flush and self.ace_status is not None:
            raise ValueError("A multiple play carries no ace status")

    @classmethod
    def multiple(cls) -> PlayKind:
        return cls(is_straight_flush=False)

    @classmethod
    def straight_flush(cls, ace_status: AceStatus | None = None) -> PlayKind:
        return cls(is_straight_flush=True, ace_status=ace_status)

    def __str__(self) -> str:
        if not self.is_straight_flush:
            return "Multiple"
        status = "None" if self.ace_status is None else f"Some({self.ace_status.value})"
        return f"StraightFlush {{ ace_status: {status} }}"


@dataclass
class Play:
    """A set of cards to lay down, and the discards taken up to reach them."""

    kind: PlayKind
    cards_used: CardSet
    cards_acquired: CardSet

    @classmethod
    def make(
        cls, cards_used: CardSet, kind: PlayKind, discard_pile: Sequence[Card]
    ) -> Play:
        """Build a play, acquiring every discard from the deepest one used upward."""
        cards_acquired = CardSet()
        taking = False
        for discarded in discard_pile:
            if not taking and discarded in cards_used:
                taking = True
            if taking:
                cards_acquired.add(discarded)
        return cls(kind=kind, cards_used=cards_used, cards_acquired=cards_acquired)


@dataclass
class PlayedCards:
    """Cards already on the table, split by how they were played."""

    straight_flush_played: CardSet = field(default_factory=CardSet)
    multiple_played: CardSet = field(default_factory=CardSet)

    def value_was_played_as_multiple(self, value: CardValue) -> bool:
        """Return whether ``value`` lies on the table as a set of three or four."""
        count = sum(
            Card(suit=suit, value=value) in self.multiple_played for suit in CardSuit
        )
        if count == 0:
            return False
        if count in (3, 4):
            return True
        raise ValueError(
            f"Invalid game state: {count} cards of value {value.name} "
            "were played as multiples"
        )


@dataclass
class PlayMetadata:
    """Information about who makes a play."""

    player_index: int


def all_possible_plays(
    hand: CardSet, discard_pile: Sequence[Card], played_cards: PlayedCards
) -> list[Play]:
    """Return every play available from the hand and the discard pile."""
    playable = _playable_cards(hand, discard_pile)
    plays: list[Play] = []
    plays.extend(_multiple_plays(playable, discard_pile, played_cards))
    plays.extend(_extension_plays(playable, discard_pile, played_cards))
    plays.extend(_standalone_plays(playable, discard_pile))
    return plays


def _playable_cards(hand: CardSet, discard_pile: Iterable[Card]) -> CardSet:
    playable = hand.copy()
    for card in discard_pile:
        playable.add(card)
    return playable


def _multiple_plays(
    playable: CardSet, discard_pile: Sequence[Card], played_cards: PlayedCards
) -> list[Play]:
    plays = []
    kind = PlayKind.multiple()
    for value in CardValue:
        suits = [suit for suit in CardSuit if Card(suit=suit, value=value) in playable]
        cards = [Card(suit=suit, value=value) for suit in suits]
        if len(suits) == 1:
            if played_cards.value_was_played_as_multiple(value):
                plays.append(Play.make(CardSet(cards), kind, discard_pile))
        elif len(suits) == 3:
            plays.append(Play.make(CardSet(cards), kind, discard_pile))
        elif len(suits) == 4:
            for left_out in cards:
                subset = CardSet(card for card in cards if card != left_out)
                plays.append(Play.make(subset, kind, discard_pile))
            plays.append(Play.make(CardSet(cards), kind, discard_pile))
    return plays


def _extension_plays(
    playable: CardSet, discard_pile: Sequence[Card], played_cards: PlayedCards
) -> list[Play]:
    plays = []
    on_table = played_cards.straight_flush_played
    for suit in CardSuit:
        for value in CardValue:
            card = Card(suit=suit, value=value)
            if card not in playable:
                continue
            next_card = Card(suit=suit, value=value.next())
            prev_card = Card(suit=suit, value=value.prev())
            if next_card in on_table:
                plays.extend(
                    _straight_extensions(
                        playable, card, prev_card, AceStatus.LOW, discard_pile
                    )
                )
            elif prev_card in on_table:
                plays.extend(
                    _straight_extensions(
                        playable, card, next_card, AceStatus.HIGH, discard_pile
                    )
                )
    return plays


def _straight_extensions(
    playable: CardSet,
    card: Card,
    additional: Card,
    ace_status: AceStatus,
    discard_pile: Sequence[Card],
) -> list[Play]:
    is_ace = card.value is CardValue.ACE
    kind = PlayKind.straight_flush(ace_status if is_ace else None)
    plays = []
    if not is_ace and additional in playable:
        plays.append(Play.make(CardSet([card, additional]), kind, discard_pile))
    plays.append(Play.make(CardSet([card]), kind, discard_pile))
    return plays


def _standalone_plays(playable: CardSet, discard_pile: Sequence[Card]) -> list[Play]:
    plays = []
    for suit in CardSuit:
        for start in range(_LOW_ACE_INDEX, _HIGH_ACE_INDEX):
            if all(
                _bounded_contains(playable, suit, start + offset) for offset in range(3)
            ):
                plays.extend(_runs_from(playable, suit, start, discard_pile))
    return plays


def _runs_from(
    playable: CardSet, suit: CardSuit, start: int, discard_pile: Sequence[Card]
) -> list[Play]:
    cards = CardSet()
    ace_status: AceStatus | None = None
    for index in range(start, start + 3):
        ace_status = ace_status or _ace_status_of_index(index)
        cards.add(_card_at(suit, index))
    runs = [(cards, ace_status)]

    index = start + 3
    while _bounded_contains(playable, suit, index):
        cards = cards.copy()
        card = _card_at(suit, index)
        if card in cards:
            # Only possible when the run spans from the low ace to the high ace.
            if card.value is not CardValue.ACE:
                raise ValueError(
                    f"Non-ace card {card} being added twice to a cardset {cards}"
                )
        else:
            cards.add(card)
        ace_status = ace_status or _ace_status_of_index(index)
        runs.append((cards, ace_status))
        index += 1

    return [
        Play.make(used, PlayKind.straight_flush(status), discard_pile)
        for used, status in runs
    ]


def _card_at(suit: CardSuit, index: int) -> Card:
    return Card(suit=suit, value=CardValue.from_index(_wrap_index(index)))


def _bounded_contains(cards: CardSet, suit: CardSuit, index: int) -> bool:
    if index > _HIGH_ACE_INDEX:
        return False
    return _card_at(suit, index) in cards


def _wrap_index(index: int) -> int:
    return _LOW_ACE_INDEX if index == _HIGH_ACE_INDEX else index


def _ace_status_of_index(index: int) -> AceStatus | None:
    if index == _LOW_ACE_INDEX:
        return AceStatus.LOW
    if index == _HIGH_ACE_INDEX:
        return AceStatus.HIGH
    return None