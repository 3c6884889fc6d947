from __future__ import annotations

from typing import List, Sequence, Tuple

from .board import Board
from .card import FACE_RANKS, Rank

BOARD_SIZE = 9
PAIR_TOTAL = 11

Pair = Tuple[int, int]
Triplet = Tuple[int, int, int]


def _occupied_cards(board: Board, selection: Sequence[int]):
    """Returns the cards under a selection, or None if any index is bad, empty or repeated."""
    if any(not isinstance(index, int) or isinstance(index, bool) for index in selection):
        return None
    if len(set(selection)) != len(selection):
        return None
    cards = []
    for index in selection:
        card = board.card_at(index)
        if card is None:
            return None
        cards.append(card)
    return cards


class ElevensRules:
    """Elevens: remove two cards totalling 11, or a Jack, Queen and King together."""

    def is_legal(self, board: Board, selection: Sequence[int]) -> bool:
        selection = list(selection)
        if len(selection) not in (2, 3):
            return False
        cards = _occupied_cards(board, selection)
        if cards is None:
            return False
        if len(cards) == 2:
            return cards[0].point_value() + cards[1].point_value() == PAIR_TOTAL
        return sorted(card.rank for card in cards) == list(FACE_RANKS)

    def find_pair_sum_11(self, board: Board) -> List[Pair]:
        """Every unordered pair (i, j), i < j, of occupied slots whose values total 11."""
        pairs: List[Pair] = []
        size = board.size()
        for i in range(size):
            first = board.card_at(i)
            if first is None:
                continue
            for j in range(i + 1, size):
                second = board.card_at(j)
                if second is not None and first.point_value() + second.point_value() == PAIR_TOTAL:
                    pairs.append((i, j))
        return pairs

    def find_jqk(self, board: Board) -> List[Triplet]:
        """Every (jack, queen, king) combination of slot indices currently on the board."""
        by_rank = {rank: [] for rank in FACE_RANKS}
        for i, card in board.occupied():
            if card.rank in by_rank:
                by_rank[card.rank].append(i)
        return [
            (j, q, k)
            for j in by_rank[Rank.JACK]
            for q in by_rank[Rank.QUEEN]
            for k in by_rank[Rank.KING]
        ]

    def another_play_is_possible(self, board: Board) -> bool:
        return bool(self.find_pair_sum_11(board)) or bool(self.find_jqk(board))

    def available_moves(self, board: Board) -> List[Tuple[int, ...]]:
        """Pairs totalling 11 first, then J-Q-K triplets."""
        return list(self.find_pair_sum_11(board)) + list(self.find_jqk(board))
