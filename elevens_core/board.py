from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from .card import Card
from .deck import Deck

logger = logging.getLogger(__name__)

FULL_SET_SIZE = 52


class InvariantError(AssertionError):
    """Raised when the board's card accounting is broken (a programming defect)."""


class RuleEvaluator(Protocol):
    """Variant-specific policy: which selections are legal and whether play can continue."""

    def is_legal(self, board: 'Board', selection: Sequence[int]) -> bool: ...

    def another_play_is_possible(self, board: 'Board') -> bool: ...

    def available_moves(self, board: 'Board') -> List[Tuple[int, ...]]: ...


class Board:
    """Fixed-capacity row of card slots backed by a single deck.

    Slot and deck management is shared machinery; move legality is delegated
    to the injected rule evaluator so new variants plug in without subclassing.
    """

    def __init__(self, size: int, rules: RuleEvaluator, rng: Optional[random.Random] = None) -> None:
        if size <= 0:
            raise ValueError('Board size must be positive')
        self._size = size
        self.rules = rules
        self._rng = rng if rng is not None else random.Random()
        self._slots: List[Optional[Card]] = [None] * size
        self._deck = Deck(rng=self._rng)

    @classmethod
    def restore(
        cls,
        rules: RuleEvaluator,
        slots: Sequence[Optional[Card]],
        deck_cards: Iterable[Card],
        rng: Optional[random.Random] = None,
    ) -> 'Board':
        """Rebuilds a board from captured slot contents and remaining deck cards."""
        board = cls(len(slots), rules, rng=rng)
        board._slots = list(slots)
        board._deck = Deck(rng=board._rng, cards=deck_cards)
        try:
            board.check_invariants()
        except InvariantError as e:
            raise ValueError(f'Invalid board: {e}') from e
        return board

    def new_game(self) -> None:
        """Discards the current deck and slots, shuffles a fresh deck and deals a full board."""
        self._deck = Deck(rng=self._rng)
        self._deck.shuffle()
        self._slots = [None] * self._size
        placed = self.deal(self._size)
        logger.debug("new game: dealt %d cards, %d left in deck", placed, self._deck.size())

    def deal(self, k: int) -> int:
        """Fills up to k empty slots in index order; stops early when the deck runs out."""
        placed = 0
        for i in range(self._size):
            if placed >= k or self._deck.is_empty():
                break
            if self._slots[i] is None:
                self._slots[i] = self._deck.deal_card()
                placed += 1
        return placed

    def replace_selected(self, indices: Sequence[int]) -> int:
        """Clears the selected slots and deals up to len(indices) replacements.

        Out-of-range indices are ignored. Returns the number of cards actually placed.
        """
        for index in indices:
            if 0 <= index < self._size:
                self._slots[index] = None
        placed = self.deal(len(indices))
        logger.debug("replaced %s: placed %d, %d left in deck", list(indices), placed, self._deck.size())
        return placed

    def size(self) -> int:
        return self._size

    def card_at(self, k: int) -> Optional[Card]:
        if 0 <= k < self._size:
            return self._slots[k]
        return None

    def occupied(self) -> List[Tuple[int, Card]]:
        return [(i, card) for i, card in enumerate(self._slots) if card is not None]

    def is_empty(self) -> bool:
        return all(card is None for card in self._slots)

    def deck_size(self) -> int:
        return self._deck.size()

    def deck_cards(self) -> Tuple[Card, ...]:
        return self._deck.remaining()

    def game_is_won(self) -> bool:
        return self._deck.is_empty() and self.is_empty()

    def is_legal(self, selection: Sequence[int]) -> bool:
        return self.rules.is_legal(self, selection)

    def another_play_is_possible(self) -> bool:
        return self.rules.another_play_is_possible(self)

    def check_invariants(self) -> None:
        live = [card for _, card in self.occupied()] + list(self._deck.remaining())
        if len(live) > FULL_SET_SIZE:
            raise InvariantError(f'{len(live)} live cards exceeds a full set')
        if len(set(live)) != len(live):
            raise InvariantError('a card appears more than once')

    def pretty(self) -> str:
        """Human-readable dump of the slots and the deck count."""
        lines: List[str] = []
        for i, card in enumerate(self._slots):
            lines.append(f"{i}: {card.label() if card is not None else '--'}")
        lines.append(f"deck: {self._deck.size()}")
        return "\n".join(lines)
