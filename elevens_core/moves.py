from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .board import Board

Move = Tuple[int, ...]


class IllegalSelection(ValueError):
    """Raised by apply_selection when the rules reject a selection."""

    def __init__(self, selection: Sequence[int]) -> None:
        super().__init__(f"Illegal selection: {list(selection)}")
        self.selection = list(selection)


class GamePhase(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


def available_moves(board: Board) -> List[Move]:
    """All legal selections the board's rules report, in hint order."""
    return list(board.rules.available_moves(board))


def hint(board: Board) -> Optional[Move]:
    moves = available_moves(board)
    return moves[0] if moves else None


def apply_selection(board: Board, selection: Sequence[int]) -> int:
    """Removes a legal selection and refills from the deck; returns the number of cards placed."""
    if not board.is_legal(selection):
        raise IllegalSelection(selection)
    return board.replace_selected(list(selection))


def game_phase(board: Board) -> GamePhase:
    if board.game_is_won():
        return GamePhase.WON
    if not board.another_play_is_possible():
        return GamePhase.LOST
    return GamePhase.IN_PROGRESS
