from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Tuple

from .card import Card, full_set

logger = logging.getLogger(__name__)


class Deck:
    """An ordered, depleting pile of unique cards. Index 0 is the top of the deck."""

    def __init__(self, rng: Optional[random.Random] = None, cards: Optional[Iterable[Card]] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        if cards is None:
            self._cards: List[Card] = list(full_set())
        else:
            self._cards = list(cards)
            for card in self._cards:
                card.face_up = False
            if len(set(self._cards)) != len(self._cards):
                raise ValueError('Invalid deck: duplicate cards')

    def shuffle(self) -> None:
        """Fisher-Yates over whatever cards remain."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug("shuffled %d cards", len(cards))

    def deal_card(self) -> Optional[Card]:
        """Removes the top card and turns it face up; None when the deck is empty."""
        if not self._cards:
            return None
        card = self._cards.pop(0)
        card.flip()
        return card

    def is_empty(self) -> bool:
        return not self._cards

    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def remaining(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __repr__(self) -> str:
        if not self._cards:
            return 'Deck(empty)'
        return f"Deck({len(self._cards)} cards, top={self._cards[0].label()})"
