from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator


class Rank(IntEnum):
    """Card ranks; the value is the card's point value in Elevens."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(Enum):
    CLUBS = 'Clubs'
    DIAMONDS = 'Diamonds'
    HEARTS = 'Hearts'
    SPADES = 'Spades'


FACE_RANKS = (Rank.JACK, Rank.QUEEN, Rank.KING)

_RANK_LABELS = {Rank.ACE: 'A', Rank.JACK: 'J', Rank.QUEEN: 'Q', Rank.KING: 'K'}
_SUIT_SYMBOLS = {Suit.CLUBS: '♣', Suit.DIAMONDS: '♦', Suit.HEARTS: '♥', Suit.SPADES: '♠'}
_IDENTITY_FIELDS = ("rank", "suit")


@dataclass
class Card:
    """A playing card. Identity is (rank, suit); face orientation is mutable state."""
    rank: Rank
    suit: Suit
    face_up: bool = field(default=False, compare=False)

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def __setattr__(self, name: str, value) -> None:
        if name in _IDENTITY_FIELDS and name in self.__dict__:
            raise AttributeError(f"Card {name} cannot be changed")
        object.__setattr__(self, name, value)

    def flip(self) -> None:
        self.face_up = not self.face_up

    def point_value(self) -> int:
        return int(self.rank)

    def label(self) -> str:
        """Short form such as '10♥' or 'Q♠'."""
        return _RANK_LABELS.get(self.rank, str(int(self.rank))) + _SUIT_SYMBOLS[self.suit]

    def __str__(self) -> str:
        if not self.face_up:
            return 'Face Down Card'
        return f"{self.rank.name.title()} of {self.suit.value}"


def full_set() -> Iterator[Card]:
    """Yields one face-down card per (suit, rank), suits outer and ranks inner."""
    for suit in Suit:
        for rank in Rank:
            yield Card(rank, suit)
